"""Pipeline orchestration: text -> component source, and batch page builds"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Optional, Sequence

from mdjsx.core.bridge import to_markup
from mdjsx.core.compile import compile_tree
from mdjsx.core.metadata import extract, read_document
from mdjsx.core.models import CompiledPage, DocumentSource
from mdjsx.core.options import CompilerConfig
from mdjsx.core.parse import parse_document
from mdjsx.core.routes import make_page
from mdjsx.errors import CompileError


logger = logging.getLogger(__name__)


@dataclass
class BuildReport:
    """Per-document outcome of a batch build, in input order."""
    pages: list[CompiledPage] = field(default_factory=list)
    failures: list[tuple[DocumentSource, CompileError]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


def compile_text(text: str, config: CompilerConfig, source_path: Optional[str] = None) -> str:
    """Run every stage in order: pre-parse, parse, post-parse, bridge, post-bridge, compile, post-compile."""
    for stage in config.pre_parse_stages:
        text = stage(text)

    tree = parse_document(text, config.parser_plugins, source_path)
    for stage in config.post_parse_stages:
        tree = stage(tree)

    root = to_markup(tree)
    for stage in config.post_bridge_stages:
        root = stage(root)

    source = compile_tree(root, config, source_path).text
    for stage in config.post_compile_stages:
        source = stage(source)
    return source


def compile_document(source: DocumentSource, config: CompilerConfig) -> CompiledPage:
    """Read, extract metadata from, and compile a single document."""
    path = str(source.absolute_path)
    text = read_document(source.absolute_path)
    metadata = extract(text, path)
    output = compile_text(text, config, path)
    return CompiledPage(source=source, page=make_page(source, metadata), output=output)


def _attempt(source: DocumentSource, config: CompilerConfig):
    try:
        return compile_document(source, config)
    except CompileError as e:
        logger.warning("Failed to compile %s: %s", source.absolute_path, e)
        return e


def build_pages(
    sources: Sequence[DocumentSource],
    config: CompilerConfig,
    max_workers: int = 1,
    ) -> BuildReport:
    """Compile every source independently; one document's failure never stops the rest."""
    if max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            results = list(pool.map(lambda s: _attempt(s, config), sources))
    else:
        results = [_attempt(s, config) for s in sources]

    report = BuildReport()
    for source, result in zip(sources, results):
        if isinstance(result, CompileError):
            report.failures.append((source, result))
        else:
            report.pages.append(result)
    logger.info("Compiled %d document(s), %d failed", len(report.pages), len(report.failures))
    return report
