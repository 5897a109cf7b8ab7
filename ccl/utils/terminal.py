import contextlib
import os
import subprocess
import sys

from ccl.core import logger

log = logger.get('terminal')


def title_for(config_name: str | None, program: str) -> str:
    return f'{program} ({config_name})' if config_name else program


def set_title(config_name: str | None, program: str = 'claude') -> None:
    """Show the active config in the terminal title.

    Inside tmux this renames the current window. Failures are ignored.
    """
    title = title_for(config_name, program)
    if os.environ.get('TMUX'):
        with contextlib.suppress(OSError, subprocess.SubprocessError):
            subprocess.run(['tmux', 'rename-window', title], check=False, capture_output=True)  # noqa: S603, S607
        return
    if not sys.stdout.isatty():
        return
    with contextlib.suppress(OSError, ValueError):
        sys.stdout.write(f'\033]0;{title}\007')
        sys.stdout.flush()
