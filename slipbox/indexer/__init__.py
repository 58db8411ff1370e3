"""Vault indexing - parses note metadata and builds the tag index."""

from .lexer import lex
from .metadata import extract_tag_lines, locate_metadata, parse_tags, tokenize_tags
from .scanner import Note, State, build_note
from .summary import generate_compact_summary, generate_tag_summary

__all__ = [
    "Note",
    "State",
    "build_note",
    "extract_tag_lines",
    "generate_compact_summary",
    "generate_tag_summary",
    "lex",
    "locate_metadata",
    "parse_tags",
    "tokenize_tags",
]
