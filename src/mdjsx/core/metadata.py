"""Metadata block extraction from raw document text"""

from pathlib import Path
from typing import Any, Optional

import yaml

from mdjsx.errors import DocumentIOError, ParseError


DELIMITER = "---"


def _split_block(text: str) -> Optional[str]:
    """Return the text between the leading delimiter line and the next one, or None."""
    lines = text.splitlines()
    if not lines or lines[0].rstrip() != DELIMITER:
        return None
    for i in range(1, len(lines)):
        if lines[i].strip() == DELIMITER:
            return "\n".join(lines[1:i])
    return None


def extract(text: str, source_path: Optional[str] = None) -> dict[str, Any]:
    """Parse the leading metadata block of text; {} when the document has none.

    Raises ParseError when the block is not valid YAML or is not a mapping.
    """
    block = _split_block(text)
    if block is None or not block.strip():
        return {}

    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        # +2: delimiter line, and marks are 0-based
        location = f"line {mark.line + 2}" if mark is not None else None
        raise ParseError(f"Invalid YAML metadata: {e}", source_path, location) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ParseError(
            f"Invalid YAML metadata: expected a mapping, got {type(data).__name__}", source_path
        )
    return data


def read_document(path: Path) -> str:
    """Read a document as UTF-8, raising DocumentIOError on failure."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentIOError(f"Cannot read document: {e}", str(path)) from e


def extract_file(path: Path) -> dict[str, Any]:
    """Read path and extract its metadata block."""
    return extract(read_document(path), str(path))
