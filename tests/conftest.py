"""Shared test fixtures."""

from pathlib import Path

import pytest


@pytest.fixture
def tmp_vault(tmp_path: Path) -> Path:
    """Create a temporary vault directory with sample notes."""
    vault = tmp_path / "vault"
    vault.mkdir()

    (vault / "TestNote01.md").write_text(
        "---\ntitle: First\ntags: [rust, \"systems\", design,]\n---\n\nFirst note body."
    )
    (vault / "TestNote02.md").write_text(
        "+++\ntitle = \"Second\"\ntags: design notes\n+++\n\nSecond note body."
    )
    (vault / "TestNote03.md").write_text(
        "---\ntags: rust\ndraft: true\ntags: \"zettelkasten\"\n---\n\n# Third\n"
    )

    # Ignored entries
    (vault / "readme.txt").write_text("Not a note.")
    (vault / "Upper.MD").write_text("---\ntags: ignored\n---\n")
    attachments = vault / "attachments"
    attachments.mkdir()
    (attachments / "Nested.md").write_text("---\ntags: nested\n---\n")

    return vault


@pytest.fixture
def invalid_vault(tmp_path: Path) -> Path:
    """Create a vault whose only note has no metadata block."""
    vault = tmp_path / "invalid-vault"
    vault.mkdir()
    (vault / "NoMetadata.md").write_text("# Just a heading\n\nNo metadata here.\n")
    return vault


@pytest.fixture
def sample_note_content() -> str:
    """Sample note content for testing."""
    return """---
title: Test Note
tags: [test, sample]
aliases: [example]
---

# Test Note

This is a test note with some content.

tags: not-metadata
"""
