"""Top-level vault handle."""

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from slipbox.errors import InvalidPathError
from slipbox.indexer import Note, State

logger = logging.getLogger(__name__)


@dataclass
class Vault:
    """A notes directory together with its tag index."""

    vault_path: Path
    name: str
    state: State
    created_on: datetime | None = None

    @classmethod
    def new(cls, path: Path) -> "Vault":
        """Scan ``path`` and build its vault.

        Raises:
            InvalidPathError: If the path has no final component (empty, root or "..").
            VaultIOError: If the directory or one of its notes can't be read.
            MetaDataError: If any note has bad or missing tag metadata.
        """
        path = Path(path)
        if path.name in ("", ".."):
            raise InvalidPathError(path)

        logger.info(f"Vault name: {path.name}")
        return cls(vault_path=path, name=path.name, state=State(path))

    def tags(self) -> set[str]:
        return self.state.tags()

    def notes_from_tag(self, tag: str) -> list[Note]:
        return self.state.notes_from_tag(tag)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "vault_path": str(self.vault_path),
            "notes": [note.to_dict() for note in self.state],
        }
