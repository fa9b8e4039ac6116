"""Source discovery and markdown-it parsing into a syntax tree"""

import logging
import re
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Optional

from markdown_it import MarkdownIt
from markdown_it.token import Token
from markdown_it.tree import SyntaxTreeNode
from mdit_py_plugins.front_matter import front_matter_plugin

from mdjsx.core.models import DocumentSource
from mdjsx.errors import ParseError


logger = logging.getLogger(__name__)

MD_EXTENSIONS = {'.md', '.mdx'}
# markdown-it breaks lines only on these
LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix in MD_EXTENSIONS)


def discover_sources(root: Path) -> list[DocumentSource]:
    """Describe every document under root relative to it.

    Documents directly under root get an empty relative_directory; a single
    file path is treated as living at its own content root.
    """
    root = root.resolve()
    base = root.parent if root.is_file() else root
    sources = []
    for p in discover_files(root):
        rel = p.parent.relative_to(base).as_posix()
        sources.append(DocumentSource(
            absolute_path=p,
            relative_directory="" if rel == "." else rel,
            name=p.stem,
        ))
    return sources


def make_parser(plugins: Iterable[Callable] = ()) -> MarkdownIt:
    """Build a MarkdownIt instance with HTML passthrough and the given plugins."""
    md = MarkdownIt("gfm-like", options_update={"linkify": False, "html": True})
    md.use(front_matter_plugin)
    for plugin in plugins:
        md.use(plugin)
    return md


def _is_closing_fence(line: str, markup: str) -> bool:
    stripped = line.lstrip(" \t>").rstrip()
    return stripped.startswith(markup) and not stripped.strip(markup[0])


def check_fences(tokens: list[Token], lines: list[str], source_path: Optional[str] = None) -> None:
    """Raise ParseError for a fenced block that never closes."""
    for tok in tokens:
        if tok.type != 'fence' or not tok.map:
            continue
        start, end = tok.map
        if end - start < 2 or not _is_closing_fence(lines[end - 1], tok.markup):
            raise ParseError(
                f"Unterminated fenced block opened with {tok.markup!r}",
                source_path,
                f"lines {start + 1}-{end}",
            )


def parse_document(
    text: str,
    plugins: Iterable[Callable] = (),
    source_path: Optional[str] = None,
    ) -> SyntaxTreeNode:
    """Parse document text into a markdown-it syntax tree."""
    tokens = make_parser(plugins).parse(text)
    check_fences(tokens, LINE_BREAK_RE.split(text), source_path)
    logger.debug("Parsed %s into %d tokens", source_path or "<text>", len(tokens))
    return SyntaxTreeNode(tokens)
