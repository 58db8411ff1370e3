"""Errors raised while building a vault index."""

from pathlib import Path


class SlipboxError(Exception):
    """Base class for all slipbox errors."""


class UnimplementedError(SlipboxError):
    """Placeholder for functionality that is not built yet."""


class VaultIOError(SlipboxError):
    """A directory or note could not be read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to read {path}: {reason}")
        self.path = path
        self.reason = reason


class InvalidPathError(SlipboxError):
    """The vault path has no final component to name the vault after."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Invalid vault path: {str(path)!r}")
        self.path = path


class MetaDataError(SlipboxError):
    """A note's metadata block is missing, malformed, or declares no tags."""
