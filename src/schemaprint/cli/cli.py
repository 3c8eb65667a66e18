"""CLI application for printing database metadata outlines."""

from pathlib import Path

import typer

from schemaprint.cli.commands.unitycatalog import uc_app
from schemaprint.cli.common.exits import exit_from_exc
from schemaprint.cli.common.options import FormatOpt
from schemaprint.cli.common.render import OutputFormat, render
from schemaprint.core.loader import SnapshotError, load_snapshot

app = typer.Typer(
    help="schemaprint - outline database metadata as indented text or JSON",
    no_args_is_help=True,
)

app.add_typer(uc_app, name="uc")


@app.command("print")
def print_snapshot(
    snapshot: Path = typer.Argument(..., help="JSON snapshot file"),
    fmt: OutputFormat = FormatOpt,
):
    """Print the outline of a JSON metadata snapshot."""
    try:
        database = load_snapshot(snapshot)
    except SnapshotError as exc:
        exit_from_exc(exc, message=str(exc), code=1)

    render(database, fmt)


if __name__ == "__main__":
    app()
