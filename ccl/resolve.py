"""
turn the raw argument vector into an Invocation

Launcher tokens are matched exactly. Scanning is a single greedy pass that
stops at the first token it does not recognize, so the downstream program's
own flags are never read as launcher flags once free-form arguments begin.

"""

from collections.abc import Collection, Sequence

from pydantic import BaseModel, ConfigDict

from ccl.core.config import ScanPolicy
from ccl.core.errors import MissingConfigNameError, MissingValueError, UnknownFlagError

CONFIG_FLAGS = ('--config', '-c')
YOLO_FLAGS = ('--yolo', '-y')
VERBOSE_FLAGS = ('--verbose',)
HELP_FLAGS = ('--help', '-h')
SENTINEL = '--'


class Invocation(BaseModel):
    model_config = ConfigDict(frozen=True)

    config_name: str | None = None
    yolo: bool = False
    verbose: bool = False
    help: bool = False
    passthrough: tuple[str, ...] = ()


def is_flag(token: str) -> bool:
    return len(token) > 1 and token.startswith('-')


def resolve(
    args: Sequence[str],
    known_names: Collection[str] = (),
    policy: ScanPolicy = ScanPolicy.FORWARD,
) -> Invocation:
    if policy == ScanPolicy.CONFIG_FIRST:
        return _resolve_config_first(args)
    return _scan(args, known_names, strict=policy == ScanPolicy.STRICT)


def _scan(args: Sequence[str], known_names: Collection[str], *, strict: bool) -> Invocation:  # noqa: C901
    config_name: str | None = None
    yolo = verbose = show_help = False
    passthrough: tuple[str, ...] = ()
    i = 0
    while i < len(args):
        token = args[i]
        if token in CONFIG_FLAGS:
            if i + 1 >= len(args):
                raise MissingValueError(CONFIG_FLAGS[0])
            config_name = args[i + 1]
            i += 2
            continue
        if token in YOLO_FLAGS:
            yolo = True
        elif token in VERBOSE_FLAGS:
            verbose = True
        elif token in HELP_FLAGS:
            show_help = True
        elif token == SENTINEL:
            passthrough = tuple(args[i + 1:])
            break
        elif config_name is None and not token.startswith('-') and token in known_names:
            config_name = token
        else:
            if strict and is_flag(token):
                raise UnknownFlagError(token)
            passthrough = tuple(args[i:])
            break
        i += 1
    return Invocation(config_name=config_name, yolo=yolo, verbose=verbose, help=show_help, passthrough=passthrough)


def _resolve_config_first(args: Sequence[str]) -> Invocation:
    """The first token names the config; launcher flags follow it."""
    if len(args) == 1 and args[0] in HELP_FLAGS:
        return Invocation(help=True)
    if not args or args[0].startswith('-'):
        raise MissingConfigNameError
    config_name = args[0]
    yolo = verbose = show_help = False
    passthrough: tuple[str, ...] = ()
    for i, token in enumerate(args[1:], start=1):
        if token in YOLO_FLAGS:
            yolo = True
        elif token in VERBOSE_FLAGS:
            verbose = True
        elif token in HELP_FLAGS:
            show_help = True
        elif token == SENTINEL:
            passthrough = tuple(args[i + 1:])
            break
        elif is_flag(token):
            raise UnknownFlagError(token)
        else:
            passthrough = tuple(args[i:])
            break
    return Invocation(config_name=config_name, yolo=yolo, verbose=verbose, help=show_help, passthrough=passthrough)
