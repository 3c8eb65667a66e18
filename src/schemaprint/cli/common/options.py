"""Common CLI options for the CLI."""

import typer

from schemaprint.cli.common.render import OutputFormat

ProfileOpt = typer.Option(
    None,
    "--profile",
    "-p",
    envvar="SCHEMAPRINT_PROFILE",
    help="Databricks CLI profile (from ~/.databrickscfg)",
)

CatalogOpt = typer.Option(
    ...,
    "--catalog",
    "-c",
    help="Catalog to outline",
)

SchemaRegexOpt = typer.Option(
    None,
    "--schema",
    help="Regex on schema full names (catalog.schema)",
)

SelectOpt = typer.Option(
    False,
    "--select",
    help="Pick schemas interactively before printing",
)

FormatOpt = typer.Option(
    OutputFormat.TEXT,
    "--format",
    "-f",
    case_sensitive=False,
    help="Output format: text outline or JSON document",
)
