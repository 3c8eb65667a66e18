"""Plain-text outline of a database snapshot.

The printer walks schema -> table -> column depth-first, parents before
children, siblings in the order the snapshot collections yield them. It does
not validate its input: a missing attribute or a null collection or name
aborts the run with the original exception, after the lines produced so far
have already been written.
"""

from __future__ import annotations

from typing import Callable, Iterator, TextIO

from schemaprint.core.snapshot import Database

SCHEMA_MARKER = ""
TABLE_MARKER = "o--> "
COLUMN_MARKER = "     o--> "

LineWriter = Callable[[str], object]


def _line(marker: str, name: str) -> str:
    """Prefix a name with its level marker (str + name, no coercion)."""
    return marker + name


def outline_lines(database: Database) -> Iterator[str]:
    """
    Yield the outline of a snapshot one line at a time.

    Header lines come first (tool, server, connection info), followed by one
    line per schema, table and column. Lines carry no terminator.
    """
    yield str(database.tool_info)
    yield str(database.server_info)
    yield str(database.connection_info)

    for schema in database.schemas:
        yield _line(SCHEMA_MARKER, schema.full_name)
        for table in schema.tables:
            yield _line(TABLE_MARKER, table.name)
            for column in table.columns:
                yield _line(COLUMN_MARKER, column.name)


class SchemaPrinter:
    """Write the outline of a database snapshot to a line sink."""

    def __init__(self, write: LineWriter = print) -> None:
        """
        Create a printer.

        Args:
            write: Callable receiving one line of text (without terminator)
                per call. Defaults to `print`.
        """
        self._write = write

    @classmethod
    def to_stream(cls, stream: TextIO) -> "SchemaPrinter":
        """Create a printer writing newline-terminated lines to a text stream."""
        return cls(lambda line: stream.write(f"{line}\n"))

    def run(self, database: Database) -> None:
        """Write the full outline of `database`, one sink call per line."""
        for line in outline_lines(database):
            self._write(line)
