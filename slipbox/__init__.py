"""Slipbox - tag index for a directory of markdown notes."""

from .errors import (
    InvalidPathError,
    MetaDataError,
    SlipboxError,
    UnimplementedError,
    VaultIOError,
)
from .indexer import Note, State
from .vault import Vault

__all__ = [
    "InvalidPathError",
    "MetaDataError",
    "Note",
    "SlipboxError",
    "State",
    "UnimplementedError",
    "Vault",
    "VaultIOError",
]
