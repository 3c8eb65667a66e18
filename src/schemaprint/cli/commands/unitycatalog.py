from __future__ import annotations

import re

import typer
from databricks.sdk.errors import NotFound, PermissionDenied

from schemaprint.cli.common.context import build_uc_adapter
from schemaprint.cli.common.exits import exit_from_exc, warn_exit
from schemaprint.cli.common.options import (
    CatalogOpt,
    FormatOpt,
    ProfileOpt,
    SchemaRegexOpt,
    SelectOpt,
)
from schemaprint.cli.common.output import out
from schemaprint.cli.common.render import OutputFormat, render
from schemaprint.cli.tui import select_schemas
from schemaprint.core.adapters.unitycatalog import UnityCatalogAdapter
from schemaprint.core.catalog import build_snapshot, filter_schemas

uc_app = typer.Typer(
    help="Outline Unity Catalog metadata.",
    no_args_is_help=False,
    invoke_without_command=True,
)


@uc_app.callback()
def _init(ctx: typer.Context, profile: str | None = ProfileOpt):
    """Connect to the Databricks workspace for Unity Catalog commands."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)
    ctx.obj = build_uc_adapter(profile)


def _check_regex_or_exit(pattern: str | None, *, option_name: str) -> None:
    """Convert invalid regex syntax into a CLI usage error."""
    if not pattern:
        return
    try:
        re.compile(pattern)
    except re.error as exc:
        out.error(f"Invalid regex for {option_name}: {exc}")
        raise typer.Exit(2) from exc


@uc_app.command("outline")
def outline(
    ctx: typer.Context,
    catalog: str = CatalogOpt,
    schema: str | None = SchemaRegexOpt,
    select: bool = SelectOpt,
    fmt: OutputFormat = FormatOpt,
):
    """Print the schema / table / column outline of a catalog."""
    adapter: UnityCatalogAdapter = ctx.obj
    _check_regex_or_exit(schema, option_name="--schema")

    picked: list[str] | None = None
    try:
        if select:
            with out.status("Loading schemas..."):
                candidates = filter_schemas(
                    adapter.list_schemas(catalog=catalog), schema
                )
            picked = select_schemas([s.full_name for s in candidates])
            if not picked:
                warn_exit("No schemas selected.")

        with out.status(f"Reading catalog '{catalog}'..."):
            database = build_snapshot(
                adapter, catalog, schema_regex=schema, schemas=picked
            )
    except NotFound as exc:
        exit_from_exc(exc, message=f"Catalog '{catalog}' does not exist.", code=1)
    except PermissionDenied as exc:
        exit_from_exc(exc, message=f"No permission to access catalog '{catalog}'.", code=1)

    if not database.schemas:
        out.warn("No schemas found.")

    render(database, fmt)
