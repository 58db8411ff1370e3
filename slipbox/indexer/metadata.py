"""Metadata block and tag parsing for notes."""

from collections.abc import Iterable

from slipbox.errors import MetaDataError

from .lexer import Event, MetadataBlock, Start, Text, lex

TAG_IDENTIFIER = "tags:"

# Characters stripped from both ends of every tag token
TAG_EDGE_CHARS = '[],"'


def locate_metadata(events: Iterable[Event]) -> str:
    """Return the raw text of the first metadata block in an event stream.

    Raises:
        MetaDataError: If there is no metadata block, or the event right after
            its start is not a single text run.
    """
    events = iter(events)

    for event in events:
        if isinstance(event, Start) and isinstance(event.block, MetadataBlock):
            break

    text_event = next(events, None)
    if not isinstance(text_event, Text):
        raise MetaDataError("Incorrectly formatted metadata or missing entirely.")

    return text_event.content


def extract_tag_lines(metadata: str) -> list[str]:
    """Return the content of every ``tags:`` line, in order.

    Raises:
        MetaDataError: If no line declares tags.
    """
    declarations = [
        line[len(TAG_IDENTIFIER) :].strip()
        for line in (raw.strip() for raw in metadata.split("\n"))
        if line.startswith(TAG_IDENTIFIER)
    ]

    if not declarations:
        raise MetaDataError("Must specify at least one tag.")

    return declarations


def tokenize_tags(declarations: Iterable[str]) -> list[str]:
    """Split tag declarations into tags.

    Only whitespace separates tokens; brackets, commas and double quotes are
    trimmed from each token's edges. ``a,b`` stays a single tag ``a,b``.
    """
    return [token.strip(TAG_EDGE_CHARS) for declaration in declarations for token in declaration.split()]


def parse_tags(text: str) -> list[str]:
    """Parse the tag sequence out of a note's full text."""
    tags = tokenize_tags(extract_tag_lines(locate_metadata(lex(text))))

    # A bare "tags:" line declares nothing
    if not tags:
        raise MetaDataError("Must specify at least one tag.")

    return tags
