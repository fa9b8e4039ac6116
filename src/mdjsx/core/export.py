"""Export: write compiled components and the page manifest"""

import json
from pathlib import Path

from mdjsx.core.models import CompiledPage, Page


MANIFEST_NAME = "pages.json"


def component_path(compiled: CompiledPage, output_dir: Path, fmt: str = 'js') -> Path:
    """Output location mirrors the source layout: output_dir / relative_directory / name.fmt"""
    return output_dir / compiled.source.relative_directory / f"{compiled.source.name}.{fmt}"


def write_component(compiled: CompiledPage, output_dir: Path, fmt: str = 'js') -> Path:
    """Write compiled component source and return its path."""
    dest = component_path(compiled, output_dir, fmt)
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(compiled.output, encoding='utf-8')
    return dest


def build_manifest(pages: list[Page]) -> list[dict]:
    """JSON-ready page descriptors; dates in metadata become ISO strings."""
    return [p.model_dump(mode="json") for p in pages]


def write_manifest(pages: list[Page], output_dir: Path) -> Path:
    """Write the page descriptors to output_dir/pages.json."""
    output_dir.mkdir(parents=True, exist_ok=True)
    dest = output_dir / MANIFEST_NAME
    dest.write_text(json.dumps(build_manifest(pages), indent=2), encoding='utf-8')
    return dest
