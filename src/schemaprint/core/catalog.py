"""Assemble database snapshots from a catalog source.

The functions here are the host side of the printer: they talk to a catalog
adapter (for example `UnityCatalogAdapter`) and return an immutable
`Database` snapshot. They know nothing about output or prompts.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version
from typing import Iterable, Protocol

from schemaprint.core.snapshot import Database, Schema, Table

TOOL_NAME = "schemaprint"


@dataclass(frozen=True)
class SchemaRef:
    """A schema as listed by a catalog: full name plus its own short name."""

    full_name: str
    name: str


class CatalogAdapter(Protocol):
    """Interface for catalog lookups used to build a snapshot."""

    def server_info(self) -> str:
        """Describe the metadata server."""
        ...

    def connection_info(self) -> str:
        """Describe the client used to reach the server."""
        ...

    def list_schemas(self, catalog: str) -> list[SchemaRef]:
        """Return the schemas of the catalog."""
        ...

    def list_tables(self, catalog: str, schema: str) -> list[Table]:
        """Return tables (with columns) in catalog.schema."""
        ...


def tool_info() -> str:
    """Return `<tool> <version>` for the snapshot header."""
    try:
        tool_version = version(TOOL_NAME)
    except PackageNotFoundError:
        tool_version = "0+unknown"
    return f"{TOOL_NAME} {tool_version}"


def filter_schemas(schemas: list[SchemaRef], name_regex: str | None) -> list[SchemaRef]:
    """Filter schemas by regex on full_name (or keep all if regex is None)."""
    if not name_regex:
        return schemas
    rx = re.compile(name_regex)
    return [s for s in schemas if rx.search(s.full_name)]


def build_snapshot(
    adapter: CatalogAdapter,
    catalog: str,
    *,
    schema_regex: str | None = None,
    schemas: Iterable[str] | None = None,
) -> Database:
    """
    Build a snapshot of one catalog.

    Args:
        adapter: Catalog adapter used to list schemas and tables.
        catalog: Catalog to read.
        schema_regex: Optional regex applied to schema full names.
        schemas: Optional allow-list of schema full names. Order still
            follows the adapter.

    Returns:
        A `Database` with schemas and tables in adapter order.
    """
    refs = filter_schemas(adapter.list_schemas(catalog=catalog), schema_regex)
    if schemas is not None:
        wanted = set(schemas)
        refs = [r for r in refs if r.full_name in wanted]

    return Database(
        tool_info=tool_info(),
        server_info=adapter.server_info(),
        connection_info=adapter.connection_info(),
        schemas=tuple(
            Schema(
                full_name=ref.full_name,
                tables=tuple(adapter.list_tables(catalog=catalog, schema=ref.name)),
            )
            for ref in refs
        ),
    )
