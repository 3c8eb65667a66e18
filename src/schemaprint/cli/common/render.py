"""Write a snapshot to stdout in the requested format."""

from __future__ import annotations

import sys
from enum import Enum

from schemaprint.core.jsonformat import JsonPrinter
from schemaprint.core.printer import SchemaPrinter
from schemaprint.core.snapshot import Database


class OutputFormat(str, Enum):
    """Output formats accepted by `--format`."""

    TEXT = "text"
    JSON = "json"


def render(database: Database, fmt: OutputFormat = OutputFormat.TEXT) -> None:
    """Print `database` to the current stdout."""
    if fmt is OutputFormat.JSON:
        JsonPrinter(sys.stdout).run(database)
    else:
        SchemaPrinter.to_stream(sys.stdout).run(database)
