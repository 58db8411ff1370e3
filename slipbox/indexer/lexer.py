"""Structural event stream for note documents.

Turns raw note text into a lazy sequence of events: a leading metadata block
(YAML ``---`` or pluses ``+++`` fenced), then body paragraphs separated by
blank lines. Only block structure is recognized; inline markdown is left as
plain text.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum


class MetadataBlockKind(Enum):
    """Fence convention of a metadata block."""

    YAML = "yaml"
    PLUSES = "pluses"


@dataclass(frozen=True)
class MetadataBlock:
    kind: MetadataBlockKind


@dataclass(frozen=True)
class Paragraph:
    pass


Block = MetadataBlock | Paragraph


@dataclass(frozen=True)
class Start:
    block: Block


@dataclass(frozen=True)
class End:
    block: Block


@dataclass(frozen=True)
class Text:
    content: str


Event = Start | End | Text

# Opening fence -> accepted closing fences
METADATA_FENCES: dict[str, tuple[MetadataBlockKind, tuple[str, ...]]] = {
    "---": (MetadataBlockKind.YAML, ("---", "...")),
    "+++": (MetadataBlockKind.PLUSES, ("+++",)),
}


def lex(text: str) -> Iterator[Event]:
    """Lex a document into structural events, merging adjacent text runs."""
    return merge_text(_lex_blocks(text))


def merge_text(events: Iterable[Event]) -> Iterator[Event]:
    """Merge runs of consecutive Text events into a single Text event."""
    pending: list[str] = []

    for event in events:
        if isinstance(event, Text):
            pending.append(event.content)
            continue

        if pending:
            yield Text("".join(pending))
            pending = []
        yield event

    if pending:
        yield Text("".join(pending))


def _lex_blocks(text: str) -> Iterator[Event]:
    lines = text.splitlines(keepends=True)

    body_start = 0
    metadata = _find_metadata_block(lines)
    if metadata is not None:
        kind, close_index = metadata
        block = MetadataBlock(kind)
        yield Start(block)
        for line in lines[1:close_index]:
            yield Text(line)
        yield End(block)
        body_start = close_index + 1

    yield from _lex_paragraphs(lines[body_start:])


def _find_metadata_block(lines: list[str]) -> tuple[MetadataBlockKind, int] | None:
    """Return the block kind and the index of its closing fence line.

    A block only counts when it opens on the very first line and is closed
    later on. A YAML fence followed by a blank line is a thematic break.
    """
    if not lines:
        return None

    fence = METADATA_FENCES.get(lines[0].rstrip())
    if fence is None:
        return None

    kind, closers = fence
    if kind is MetadataBlockKind.YAML and (len(lines) < 2 or not lines[1].strip()):
        return None

    for index in range(1, len(lines)):
        if lines[index].rstrip() in closers:
            return kind, index

    return None


def _lex_paragraphs(lines: list[str]) -> Iterator[Event]:
    in_paragraph = False

    for line in lines:
        if not line.strip():
            if in_paragraph:
                yield End(Paragraph())
                in_paragraph = False
            continue

        if not in_paragraph:
            yield Start(Paragraph())
            in_paragraph = True
        yield Text(line)

    if in_paragraph:
        yield End(Paragraph())

