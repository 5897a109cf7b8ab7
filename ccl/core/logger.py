import logging
import sys
from pathlib import Path

NOTICE = 25
ROOT = 'ccl'
STREAM_FORMAT = 'ccl: %(message)s'
FILE_FORMAT = '%(asctime)s %(levelname)-7s %(name)s: %(message)s'
DATE_FORMAT = '%H:%M:%S'

logging.addLevelName(NOTICE, 'NOTICE')


class Logger(logging.Logger):
    def notice(self, msg: object, *args: object, **kwargs) -> None:
        if self.isEnabledFor(NOTICE):
            self._log(NOTICE, msg, args, **kwargs)


def get(name: str) -> Logger:
    """Return the ``ccl.<name>`` logger, which supports ``notice``."""
    manager = logging.Logger.manager
    previous = manager.loggerClass
    manager.setLoggerClass(Logger)
    try:
        return logging.getLogger(f'{ROOT}.{name}')
    finally:
        manager.loggerClass = previous


def setup(level: str | int = NOTICE, log_file: Path | None = None) -> None:
    root = logging.getLogger(ROOT)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(logging.Formatter(STREAM_FORMAT))
    root.addHandler(stream_handler)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, DATE_FORMAT))
        root.addHandler(file_handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)
    root.propagate = False


def set_verbose() -> None:
    logging.getLogger(ROOT).setLevel(logging.DEBUG)
