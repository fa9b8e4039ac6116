"""Route path derivation and page descriptors"""

from typing import Any

from mdjsx.core.models import DocumentSource, Page, PageContext


INDEX_NAME = "index"


def build_path(directory: str, base_name: str) -> str:
    """Route for a document: 'dir/' for the index document, else 'dir/name'."""
    if base_name == INDEX_NAME:
        return f"{directory}/"
    return f"{directory}/{base_name}"


def make_page(source: DocumentSource, metadata: dict[str, Any]) -> Page:
    """Page descriptor for source, carrying its metadata as page context."""
    return Page(
        path=build_path(source.relative_directory, source.name),
        component=source.absolute_path,
        context=PageContext(metadata=dict(metadata)),
    )
