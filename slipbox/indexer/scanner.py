"""Vault scanner - builds the tag index of all notes in a directory."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from slipbox.errors import VaultIOError

from .metadata import parse_tags

logger = logging.getLogger(__name__)

NOTE_SUFFIX = ".md"


@dataclass(frozen=True)
class Note:
    """A single parsed note."""

    name: str
    path: Path
    tags: tuple[str, ...]
    # Reserved, not filled in by the scanner yet
    id: str | None = None
    created_on: datetime | None = None
    last_edited: datetime | None = None
    links: tuple["Note", ...] = ()

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "path": str(self.path),
            "tags": list(self.tags),
        }


def build_note(path: Path) -> Note:
    """Read a note file and parse its tags.

    Raises:
        VaultIOError: If the file can't be read.
        MetaDataError: If the metadata block is missing or declares no tags.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise VaultIOError(path, str(e)) from e

    return Note(name=path.stem, path=path, tags=tuple(parse_tags(content)))


def is_note_file(path: Path) -> bool:
    """Check whether a directory entry should be parsed as a note."""
    return path.suffix == NOTE_SUFFIX and path.is_file()


class State:
    """All notes of one vault directory.

    Construction is all-or-nothing: the first unreadable entry or badly
    formatted note aborts the scan and the error propagates.
    """

    def __init__(self, path: Path) -> None:
        self.notes: tuple[Note, ...] = tuple(self._read_notes(path))
        logger.info(f"Indexed {len(self.notes)} notes from {path}")

    def __len__(self) -> int:
        return len(self.notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(self.notes)

    def __repr__(self) -> str:
        return f"State(notes={list(self.notes)!r})"

    def tags(self) -> set[str]:
        """All distinct tags across the vault."""
        return {tag for note in self.notes for tag in note.tags}

    def notes_from_tag(self, tag: str) -> list[Note]:
        """Notes carrying exactly ``tag``."""
        return [note for note in self.notes if note.has_tag(tag)]

    def tag_counts(self) -> dict[str, int]:
        """Map each tag to the number of notes carrying it."""
        counts: dict[str, int] = {}
        for note in self.notes:
            for tag in set(note.tags):
                counts[tag] = counts.get(tag, 0) + 1
        return counts

    def note(self, name: str) -> Note | None:
        """Get a note by name."""
        return next((note for note in self.notes if note.name == name), None)

    def _read_notes(self, path: Path) -> Iterator[Note]:
        try:
            entries = sorted(path.iterdir(), key=lambda entry: entry.name)
        except OSError as e:
            raise VaultIOError(path, str(e)) from e

        for entry in entries:
            if not is_note_file(entry):
                logger.debug(f"Skipping {entry.name}")
                continue

            logger.info(f"Found note: {entry.stem}")
            yield build_note(entry)
