"""Core snapshot models for database metadata.

A snapshot is a read-only picture of one database: identifying header
information plus the schema -> table -> column hierarchy. Snapshots are
built once by a producer (JSON loader, Unity Catalog source) and handed to
the printer. They are intentionally free of SDK types and CLI concerns.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Column:
    """A column of a table."""

    name: str


@dataclass(frozen=True)
class Table:
    """
    A table and its columns.

    Attributes:
        name: Table name, unique within its schema.
        columns: Columns in the order the producer exposes them.
    """

    name: str
    columns: tuple[Column, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Schema:
    """
    A schema and its tables.

    Attributes:
        full_name: Fully-qualified schema name, unique within the database.
        tables: Tables in the order the producer exposes them.
    """

    full_name: str
    tables: tuple[Table, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Database:
    """
    Root of a metadata snapshot.

    Attributes:
        tool_info: Name/version of the tool that produced the snapshot.
        server_info: Identification of the backing database engine.
        connection_info: Identification of the driver/client used to connect.
        schemas: Schemas in the order the producer exposes them.
    """

    tool_info: str
    server_info: str
    connection_info: str
    schemas: tuple[Schema, ...] = field(default_factory=tuple)
