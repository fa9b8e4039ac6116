"""Unit tests for core/metadata.py"""

import datetime

import pytest

from mdjsx.core.metadata import extract, extract_file, read_document
from mdjsx.errors import DocumentIOError, ParseError


@pytest.mark.parametrize("text", [
    "",
    "# No metadata\n\nBody.\n",
    "Intro\n---\ntitle: late\n---\n",
    "---\ntitle: never closed\n\n# Body\n",
    "---\n---\n# Empty block\n",
    " ---\ntitle: indented\n---\n",
])
def test_extract_without_block_is_empty(text):
    """Documents without a leading, closed metadata block yield {}."""
    assert extract(text) == {}


def test_extract_scalars():
    """Scalar values keep their YAML types."""
    meta = extract("---\ntitle: Hello\ncount: 3\ndraft: false\n---\n# Body\n")
    assert meta == {"title": "Hello", "count": 3, "draft": False}


def test_extract_nested_structure():
    """Sequences and nested mappings come back with the block's exact nesting."""
    text = """\
---
title: Post
tags:
  - math
  - graphs
author:
  name: Ada
  links:
    site: https://example.com
---
Body
"""
    assert extract(text) == {
        "title": "Post",
        "tags": ["math", "graphs"],
        "author": {"name": "Ada", "links": {"site": "https://example.com"}},
    }


def test_extract_dates():
    """YAML dates are parsed into date objects."""
    meta = extract("---\ndate: 2026-01-15\n---\n")
    assert meta["date"] == datetime.date(2026, 1, 15)


def test_extract_invalid_yaml_names_source():
    """Malformed YAML raises ParseError naming the source path and line."""
    with pytest.raises(ParseError, match="posts/bad.md") as exc:
        extract("---\ntitle: ok\ntags: [unclosed\n---\n", "posts/bad.md")
    assert exc.value.source_path == "posts/bad.md"
    assert exc.value.location is not None
    assert exc.value.location.startswith("line ")


def test_extract_non_mapping_rejected():
    """A block that parses to a list is not valid metadata."""
    with pytest.raises(ParseError, match="expected a mapping"):
        extract("---\n- a\n- b\n---\n")


def test_extract_file(tmp_path):
    """extract_file reads the document from disk."""
    f = tmp_path / "doc.md"
    f.write_text("---\ntitle: From disk\n---\n# Body\n", encoding="utf-8")
    assert extract_file(f) == {"title": "From disk"}


def test_read_document_missing(tmp_path):
    """Reading a missing document raises DocumentIOError with its path."""
    missing = tmp_path / "missing.md"
    with pytest.raises(DocumentIOError) as exc:
        read_document(missing)
    assert exc.value.source_path == str(missing)


def test_extract_agrees_with_parser_on_indented_delimiter():
    """An indented opener is neither metadata nor a front_matter node."""
    from mdjsx.core.parse import parse_document

    text = " ---\ntitle: indented\n---\n# Body\n"
    assert extract(text) == {}
    assert "front_matter" not in [c.type for c in parse_document(text).children]


def test_extract_trailing_space_on_delimiter():
    """Trailing whitespace after the opening delimiter is allowed."""
    assert extract("---  \ntitle: T\n---\n") == {"title": "T"}
