"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdjsx.config import Settings, compiler_config, load_config
from mdjsx.core.export import write_component, write_manifest
from mdjsx.core.metadata import extract_file, read_document
from mdjsx.core.parse import discover_sources
from mdjsx.core.pipeline import build_pages, compile_text
from mdjsx.core.routes import build_path
from mdjsx.errors import CompileError, ValidationError


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValidationError as e:
        _fail(str(e))


def build_cmd(
    path: Annotated[Optional[str], typer.Argument(help="Content file or directory (default: content_dir)")] = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    components: Annotated[Optional[str], typer.Option("--components-dir", help="Import root for local components")] = None,
    fmt: Annotated[Optional[str], typer.Option("--format", help="Output extension: js or jsx")] = None,
    workers: Annotated[Optional[int], typer.Option("--max-workers", help="Documents compiled concurrently")] = None,
    ):
    """Compile every document, write components and pages.json; failures are reported per document."""
    settings = _settings(overrides={
        "content_dir": path, "output_dir": out, "components_dir": components,
        "output_format": fmt, "max_workers": workers,
    })
    try:
        config = compiler_config(settings)
    except ValidationError as e:
        _fail(str(e))

    content = Path(settings.content_dir)
    if not content.exists():
        _fail(f"Content path not found: {content}")
    sources = discover_sources(content)
    if not sources:
        typer.echo("No .md/.mdx files found.")
        raise typer.Exit(0)

    report = build_pages(sources, config, settings.max_workers)
    output_dir = Path(settings.output_dir)
    for compiled in report.pages:
        dest = write_component(compiled, output_dir, settings.output_format)
        typer.echo(f"  {compiled.page.path} -> {dest}")
    manifest = write_manifest([c.page for c in report.pages], output_dir)

    for source, error in report.failures:
        typer.echo(f"  FAILED {source.absolute_path}: {error}", err=True)
    typer.echo(
        f"Built {len(report.pages)} page(s), {len(report.failures)} failed. Manifest: {manifest}"
    )
    if not report.ok:
        raise typer.Exit(1)


def compile_cmd(
    path: Annotated[Path, typer.Argument(help="Document to compile")],
    out: Annotated[Optional[Path], typer.Option("--out", "-o", help="Write to file instead of stdout")] = None,
    components: Annotated[Optional[str], typer.Option("--components-dir", help="Import root for local components")] = None,
    ):
    """Compile a single document to component source."""
    settings = _settings(overrides={"components_dir": components})
    try:
        source = compile_text(read_document(path), compiler_config(settings), str(path))
    except (CompileError, ValidationError) as e:
        _fail("Compile failed", e)
    if out is None:
        typer.echo(source)
    else:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(source, encoding="utf-8")
        typer.echo(f"  {path} -> {out}")


def metadata_cmd(
    path: Annotated[Path, typer.Argument(help="Document to read metadata from")],
    ):
    """Print a document's metadata block as JSON."""
    try:
        metadata = extract_file(path)
    except CompileError as e:
        _fail("Metadata extraction failed", e)
    typer.echo(json.dumps(metadata, indent=2, default=str))


def route_cmd(
    directory: Annotated[str, typer.Argument(help="Directory relative to the content root")],
    name: Annotated[str, typer.Argument(help="Document base name")],
    ):
    """Print the route path for a document."""
    typer.echo(build_path(directory, name))
