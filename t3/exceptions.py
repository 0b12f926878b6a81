"""t3 exceptions."""

from pathlib import Path
from typing import Optional, Union


class T3Error(Exception):
    """Base error for a run of the transformer.

    Carries the exit code the CLI should map the failure to.
    """

    exit_code = 1

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class TraversalError(T3Error):
    """Raised when a directory cannot be listed during the walk."""


class ReadError(T3Error):
    """Raised when a candidate file cannot be read."""


class WriteError(T3Error):
    """Raised when a substituted file cannot be written back."""


class ConfigError(T3Error):
    """Raised for invalid presets, values files or scan roots."""

    exit_code = 2
