import os
import shutil
from collections.abc import Mapping, Sequence
from pathlib import Path

from ccl.core import logger
from ccl.core.errors import ExecutableNotFoundError, ReplacementFailureError

log = logger.get('process')


def locate(bin_path: str | None, program: str, config_file: Path | None = None) -> str:
    """Return the executable to launch.

    A configured ``bin`` wins and must point to an executable file; otherwise
    ``program`` is looked up in PATH.
    """
    if bin_path:
        path = Path(bin_path).expanduser()
        if not path.is_file() or not os.access(path, os.X_OK):
            msg = f'configured binary {bin_path} is not an executable file, check "bin" in {config_file or "your config"}'
            raise ExecutableNotFoundError(msg)
        log.debug('Using configured binary path: %s', path)
        return str(path)
    found = shutil.which(program)
    if found is None:
        lines = [
            f'{program} binary not found in PATH and no bin configured.',
            f'To fix this, run `which {program}` (or `where {program}` on Windows) and add the path to your config:',
            f'Config file: {config_file or "unknown"}',
            f'Add: "bin": "/path/to/{program}"',
        ]
        raise ExecutableNotFoundError('\n'.join(lines))
    log.debug('Found %s in PATH: %s', program, found)
    return found


def replace(path: str, argv: Sequence[str], env: Mapping[str, str]) -> None:
    """Replace the current process image. Only returns by raising."""
    log.debug('Executing: %s with args %s', path, list(argv))
    try:
        os.execve(path, list(argv), dict(env))
    except (OSError, ValueError) as e:
        msg = f'error executing {path}: {e}'
        raise ReplacementFailureError(msg) from e
