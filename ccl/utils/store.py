"""
config file location, first-run creation and parsing

"""

import os
from pathlib import Path

from pydantic import ValidationError

from ccl.core import logger
from ccl.core.config import ConfigSet, Settings
from ccl.core.errors import ConfigFileMissingError, ConfigParseError, ConfigReadError

log = logger.get('store')

DEFAULT_CONFIG = Path(__file__).resolve().parent.parent / 'data' / 'ccl.example.json'
DIR_MODE = 0o700
FILE_MODE = 0o600


def config_path(settings: Settings) -> Path:
    if settings.config_path is not None:
        return settings.config_path
    if xdg := os.environ.get('XDG_CONFIG_HOME'):
        return Path(xdg) / 'ccl' / 'ccl.json'
    return Path.home() / '.config' / 'ccl' / 'ccl.json'


def create_default(path: Path) -> None:
    path.parent.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, FILE_MODE)
    with os.fdopen(fd, 'wb') as f:
        f.write(DEFAULT_CONFIG.read_bytes())


def load(path: Path) -> ConfigSet:
    if not path.exists():
        try:
            create_default(path)
        except OSError as e:
            msg = f'error writing config file {path}: {e}'
            raise ConfigReadError(msg) from e
        log.notice('Created default config at %s', path)
        log.notice('Please edit the config file to add your API keys')
        raise ConfigFileMissingError(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        msg = f'error reading config {path}: {e}'
        raise ConfigReadError(msg) from e
    try:
        config_set = ConfigSet.model_validate_json(data)
    except ValidationError as e:
        raise ConfigParseError(path, str(e)) from e
    log.debug('Loaded %d named configs from %s', len(config_set.configs), path)
    return config_set


def schema() -> dict:
    return ConfigSet.model_json_schema(by_alias=True)
