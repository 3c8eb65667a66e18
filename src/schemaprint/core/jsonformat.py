"""JSON rendering of a database snapshot.

The document has the same shape `loader.snapshot_from_dict` reads, so a
rendered snapshot can be fed back to `schemaprint print`. Like the text
printer, rendering does not validate: missing attributes and null
collections raise from the element that lacks them.
"""

from __future__ import annotations

import json
from typing import Any, TextIO

from schemaprint.core.snapshot import Database


def snapshot_document(database: Database) -> dict[str, Any]:
    """Return the snapshot as plain dicts and lists, in collection order."""
    return {
        "tool_info": str(database.tool_info),
        "server_info": str(database.server_info),
        "connection_info": str(database.connection_info),
        "schemas": [
            {
                "full_name": schema.full_name,
                "tables": [
                    {
                        "name": table.name,
                        "columns": [{"name": column.name} for column in table.columns],
                    }
                    for table in schema.tables
                ],
            }
            for schema in database.schemas
        ],
    }


class JsonPrinter:
    """Write a snapshot as one indented JSON document to a text stream."""

    def __init__(self, stream: TextIO, *, indent: int = 2) -> None:
        self._stream = stream
        self._indent = indent

    def run(self, database: Database) -> None:
        document = snapshot_document(database)
        self._stream.write(json.dumps(document, indent=self._indent, ensure_ascii=False))
        self._stream.write("\n")
