from collections.abc import Iterable
from pathlib import Path


class CclError(Exception):
    """Base class for every error that aborts a launch."""

    exit_code = 1


class ResolutionError(CclError):
    pass


class MissingValueError(ResolutionError):
    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(f'{flag} requires a value')


class UnknownFlagError(ResolutionError):
    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(f'flag provided but not defined: {flag}')


class MissingConfigNameError(ResolutionError):
    def __init__(self) -> None:
        super().__init__('config name or subcommand required as first argument')


class ConfigNotFoundError(CclError):
    def __init__(self, name: str, known: Iterable[str]) -> None:
        self.name = name
        self.known = list(known)
        lines = [f"config '{name}' not found", 'Available configurations:']
        lines.extend(f'  {n}' for n in self.known)
        lines.append("Use 'ccl list' to see all available configurations")
        super().__init__('\n'.join(lines))


class ConfigFileMissingError(CclError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f'config file created at {path}, please edit it to add your API keys and run again')


class ConfigReadError(CclError):
    pass


class ConfigParseError(CclError):
    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        super().__init__(f'error parsing config {path}: {detail}')


class ExecutableNotFoundError(CclError):
    pass


class ReplacementFailureError(CclError):
    pass
