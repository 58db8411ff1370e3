"""Tests for metadata location and tag parsing."""

import pytest

from slipbox.errors import MetaDataError
from slipbox.indexer.lexer import (
    End,
    MetadataBlock,
    MetadataBlockKind,
    Paragraph,
    Start,
    Text,
    lex,
)
from slipbox.indexer.metadata import (
    extract_tag_lines,
    locate_metadata,
    parse_tags,
    tokenize_tags,
)


class TestLocateMetadata:
    """Tests for locate_metadata."""

    def test_returns_block_text(self):
        assert locate_metadata(lex("---\ntags: a\n---\nBody")) == "tags: a\n"

    def test_pluses_block(self):
        assert locate_metadata(lex("+++\ntags: a\n+++\n")) == "tags: a\n"

    def test_missing_block(self):
        with pytest.raises(MetaDataError, match="missing entirely"):
            locate_metadata(lex("# Heading\n\ntags: a\n"))

    def test_empty_block(self):
        with pytest.raises(MetaDataError):
            locate_metadata(lex("---\n...\n"))

    def test_empty_stream(self):
        with pytest.raises(MetaDataError):
            locate_metadata([])

    def test_non_text_after_start(self):
        with pytest.raises(MetaDataError):
            locate_metadata([Start(Paragraph()), End(Paragraph())])

    def test_skips_events_before_block(self):
        block = MetadataBlock(MetadataBlockKind.YAML)
        events = [Start(Paragraph()), Text("intro"), End(Paragraph()), Start(block), Text("tags: a")]

        assert locate_metadata(events) == "tags: a"


class TestExtractTagLines:
    """Tests for extract_tag_lines."""

    def test_single_line(self):
        assert extract_tag_lines("title: A\ntags: [a, b]\n") == ["[a, b]"]

    def test_multiple_lines_in_order(self):
        metadata = "tags: a b\ntitle: A\n  tags: c  \n"

        assert extract_tag_lines(metadata) == ["a b", "c"]

    def test_bare_prefix_gives_empty_content(self):
        assert extract_tag_lines("tags:\n") == [""]

    def test_prefix_is_case_sensitive(self):
        with pytest.raises(MetaDataError, match="at least one tag"):
            extract_tag_lines("Tags: a\nTAGS: b\n")

    def test_prefix_must_start_line(self):
        with pytest.raises(MetaDataError, match="at least one tag"):
            extract_tag_lines("mytags: a\nkeywords: tags: b\n")

    def test_no_tag_line(self):
        with pytest.raises(MetaDataError, match="Must specify at least one tag"):
            extract_tag_lines("title: A\n")

    def test_windows_line_endings(self):
        assert extract_tag_lines("title: A\r\ntags: a\r\n") == ["a"]


class TestTokenizeTags:
    """Tests for tokenize_tags."""

    def test_bracketed_quoted_list(self):
        assert tokenize_tags(['[rust, "systems", design,]']) == ["rust", "systems", "design"]

    def test_lines_are_merged_in_order(self):
        assert tokenize_tags(["a b", "c"]) == ["a", "b", "c"]

    def test_bare_words(self):
        assert tokenize_tags(["one two   three"]) == ["one", "two", "three"]

    def test_mixed_edge_characters(self):
        assert tokenize_tags(['["a",] [b]', '"c",]']) == ["a", "b", "c"]

    def test_commas_without_whitespace_do_not_split(self):
        assert tokenize_tags(["[a,b]"]) == ["a,b"]

    def test_inner_characters_are_kept(self):
        assert tokenize_tags(['say"hi" a[1]b']) == ['say"hi', "a[1]b"]

    def test_empty_brackets_give_empty_tag(self):
        assert tokenize_tags(["[]"]) == [""]

    def test_duplicates_are_kept(self):
        assert tokenize_tags(["a a", "a"]) == ["a", "a", "a"]

    def test_empty_content(self):
        assert tokenize_tags([""]) == []


class TestParseTags:
    """Tests for parse_tags."""

    def test_full_note(self, sample_note_content: str):
        # The body "tags:" line is outside the metadata block
        assert parse_tags(sample_note_content) == ["test", "sample"]

    def test_multiple_declarations(self):
        assert parse_tags("---\ntags: a b\ntags: c\n---\n") == ["a", "b", "c"]

    def test_pluses_note(self):
        assert parse_tags('+++\ntitle = "x"\ntags: ["x", "y"]\n+++\nBody') == ["x", "y"]

    def test_missing_metadata(self):
        with pytest.raises(MetaDataError, match="missing entirely"):
            parse_tags("Just text.\n")

    def test_metadata_without_tags(self):
        with pytest.raises(MetaDataError, match="at least one tag"):
            parse_tags("---\ntitle: A\n---\n")

    def test_bare_tags_line_declares_nothing(self):
        with pytest.raises(MetaDataError, match="at least one tag"):
            parse_tags("---\ntitle: A\ntags:\n---\n")
