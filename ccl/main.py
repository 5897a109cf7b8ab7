import json
import os
import sys
import time
from collections.abc import Sequence

from tap import Tap

from ccl.compose import compose
from ccl.core import logger
from ccl.core import settings as default_settings
from ccl.core.config import Settings
from ccl.core.errors import CclError
from ccl.resolve import HELP_FLAGS, resolve
from ccl.utils import process, store, terminal

log = logger.get('main')

USAGE = 'ccl [list | help | schema | <config-name>] [options] [--] [args ...]'
EPILOG = """subcommands:
  list                  list available configurations
  help                  show this help message
  schema                print the JSON schema of the config file

A bare first word that names a configuration selects it. Everything after the
first argument ccl does not recognize (or after --) is passed to claude unchanged."""


class Args(Tap):
    config: str | None = None
    """configuration name to use (default: the default configuration)"""
    yolo: bool = False
    """pass --dangerously-skip-permissions to claude"""
    verbose: bool = False
    """log argument resolution and environment composition"""
    passthrough: list[str]
    """arguments passed through to claude"""

    def configure(self) -> None:
        self.add_argument('-c', '--config', metavar='NAME')
        self.add_argument('-y', '--yolo')
        self.add_argument('passthrough', nargs='...')


def usage() -> str:
    return f"{Args(prog='ccl', usage=USAGE).format_help()}\n{EPILOG}"


def list_configs(settings: Settings) -> int:
    config_set = store.load(store.config_path(settings))
    print('Available configurations:')
    for name in config_set.known_names():
        print(f'  {name}')
    return 0


def print_schema() -> int:
    print(json.dumps(store.schema(), indent=2))
    return 0


def print_help() -> int:
    print(usage())
    return 0


SUBCOMMANDS = {
    'list': list_configs,
    'help': lambda _: print_help(),
    **{flag: lambda _: print_help() for flag in HELP_FLAGS},
    'schema': lambda _: print_schema(),
}


def launch(args: list[str], settings: Settings) -> int:
    start_time = time.perf_counter()
    config_file = store.config_path(settings)
    config_set = store.load(config_file)
    invocation = resolve(args, config_set.known_names(), settings.scan_policy)
    if invocation.verbose:
        logger.set_verbose()
        log.debug('Using config: %s', config_file)
        log.debug('Initial args: %s', args)
        log.debug('Scan policy: %s', settings.scan_policy)
        log.debug(
            'Parsed: config=%s, yolo=%s, verbose=%s, help=%s',
            invocation.config_name, invocation.yolo, invocation.verbose, invocation.help,
        )
        log.debug('Remaining args: %s', list(invocation.passthrough))
    if invocation.help:
        return print_help()

    plan = compose(os.environ, config_set, invocation)
    log.info('Launching %s with config %s', settings.program, plan.config_name)
    if settings.set_title:
        terminal.set_title(invocation.config_name, settings.program)

    lookup_start = time.perf_counter()
    path = process.locate(config_set.bin, settings.program, config_file)
    log.debug('Binary resolution time: %.3fms', (time.perf_counter() - lookup_start) * 1000)
    log.debug('ccl startup time: %.3fms', (time.perf_counter() - start_time) * 1000)
    process.replace(path, [settings.program, *plan.args], plan.env)
    return 1


def main(argv: Sequence[str] | None = None, settings: Settings | None = None) -> int:
    settings = settings or default_settings
    args = list(sys.argv[1:] if argv is None else argv)
    logger.setup(settings.log_level, settings.log_file)
    try:
        if args and args[0] in SUBCOMMANDS:
            return SUBCOMMANDS[args[0]](settings)
        return launch(args, settings)
    except CclError as e:
        log.error('%s', e)  # noqa: TRY400
        return e.exit_code


if __name__ == '__main__':
    sys.exit(main())
