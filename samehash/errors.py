"""Per-path error taxonomy for expansion and hashing."""

from pathlib import Path

from samehash.models import Failure


class SameHashError(Exception):
    """An error attributed to a single path. Collected, never run-terminating."""

    def __init__(self, path: Path | str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = Path(path)
        self.message = message

    @property
    def kind(self) -> str:
        return type(self).__name__

    def to_failure(self) -> Failure:
        return Failure(path=self.path, kind=self.kind, message=self.message)


class PathNotFound(SameHashError):
    """A supplied path does not exist."""


class TraversalError(SameHashError):
    """A directory-walk failure on one entry (permissions, broken link, cycle)."""


class OpenError(SameHashError):
    """A file was found but could not be opened."""


class ReadError(SameHashError):
    """An I/O failure while reading a file; no partial digest is produced."""


class ConfigError(ValueError):
    """Invalid configuration value."""
