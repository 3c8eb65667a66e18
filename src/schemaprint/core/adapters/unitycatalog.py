from __future__ import annotations

from databricks.sdk import WorkspaceClient
from databricks.sdk.version import __version__ as sdk_version

from schemaprint.core.catalog import SchemaRef
from schemaprint.core.snapshot import Column, Table


class UnityCatalogAdapter:
    """Adapter around Databricks SDK Unity Catalog APIs (schemas/tables/columns)."""

    def __init__(self, client: WorkspaceClient) -> None:
        self.client = client

    def server_info(self) -> str:
        """Describe the metadata server this adapter reads from."""
        host = getattr(getattr(self.client, "config", None), "host", None) or "unknown"
        return f"Databricks Unity Catalog ({host})"

    def connection_info(self) -> str:
        """Describe the client library used to reach the server."""
        return f"databricks-sdk {sdk_version}"

    def list_schemas(self, catalog: str) -> list[SchemaRef]:
        """List schemas of a catalog in API order."""
        out: list[SchemaRef] = []
        for s in self.client.schemas.list(catalog_name=catalog):
            name = getattr(s, "name", None)
            full_name = getattr(s, "full_name", None)
            catalog_name = getattr(s, "catalog_name", None) or catalog

            if not name and full_name:
                name = full_name.split(".")[-1]
            if not full_name and name:
                full_name = f"{catalog_name}.{name}"
            if not name or not full_name:
                continue

            out.append(SchemaRef(full_name=full_name, name=name))
        return out

    def list_tables(self, catalog: str, schema: str) -> list[Table]:
        """List tables in catalog.schema, each with its columns, in API order."""
        out: list[Table] = []
        for t in self.client.tables.list(catalog_name=catalog, schema_name=schema):
            name = getattr(t, "name", None)
            if not name:
                continue
            # TableInfo.columns is None when the table reports no columns
            columns = tuple(
                Column(name=c.name)
                for c in (getattr(t, "columns", None) or [])
                if getattr(c, "name", None)
            )
            out.append(Table(name=name, columns=columns))
        return out
