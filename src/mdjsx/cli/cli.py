"""CLI entrypoint: Typer app definition and command registration"""

import logging
from typing import Annotated

import typer

from mdjsx.cli.commands import build_cmd, compile_cmd, metadata_cmd, route_cmd


app = typer.Typer(name="mdjsx", no_args_is_help=True, help="Markdown/MDX to page component compiler")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log pipeline progress")] = False,
    ):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


app.command(name="build")(build_cmd)
app.command(name="compile")(compile_cmd)
app.command(name="metadata")(metadata_cmd)
app.command(name="route")(route_cmd)
