from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

from ccl.core import logger
from ccl.core.config import DEFAULT_NAME, ConfigSet, EnvConfig
from ccl.core.errors import ConfigNotFoundError
from ccl.resolve import Invocation
from ccl.utils.sensitive import mask

log = logger.get('compose')

YOLO_ARG = '--dangerously-skip-permissions'


class Launch(BaseModel):
    model_config = ConfigDict(frozen=True)

    config_name: str
    env: dict[str, str]
    args: tuple[str, ...]


def is_default(name: str | None) -> bool:
    return name is None or name == DEFAULT_NAME


def select_config(config_set: ConfigSet, name: str | None) -> EnvConfig:
    if is_default(name):
        return config_set.default
    if name not in config_set.configs:
        raise ConfigNotFoundError(name, config_set.known_names())
    return config_set.configs[name]


def _overlay(env: dict[str, str], values: Mapping[str, str], source: str) -> None:
    for key, value in values.items():
        env[key] = value
        log.debug('Added %s env var: %s=%s', source, key, mask(key, value))


def compose_env(environ: Mapping[str, str], config_set: ConfigSet, name: str | None) -> dict[str, str]:
    """Process env, then the default config, then the selected config; last write wins."""
    selected = select_config(config_set, name)
    env = dict(environ)
    original_count = len(env)
    _overlay(env, config_set.default.env, 'default')
    if is_default(name):
        log.debug('Using default config, no selected overlay')
    elif selected.env:
        _overlay(env, selected.env, 'selected')
    else:
        log.debug('No environment variables configured in selected config')
    log.debug('Final env count: %d (added %d)', len(env), len(env) - original_count)
    return env


def compose_args(invocation: Invocation) -> list[str]:
    if invocation.yolo:
        log.debug('Transforming --yolo to %s', YOLO_ARG)
        return [YOLO_ARG, *invocation.passthrough]
    return list(invocation.passthrough)


def compose(environ: Mapping[str, str], config_set: ConfigSet, invocation: Invocation) -> Launch:
    env = compose_env(environ, config_set, invocation.config_name)
    args = compose_args(invocation)
    log.debug('Transformed args: %s', args)
    return Launch(config_name=invocation.config_name or DEFAULT_NAME, env=env, args=tuple(args))
