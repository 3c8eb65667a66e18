"""Build database snapshots from JSON documents.

The loader is the producer side of a snapshot: it enforces the invariants the
printer relies on (collections present, names are strings) and reports the
JSON path of the first element that violates them.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from schemaprint.core.snapshot import Column, Database, Schema, Table

_HEADER_KEYS = ("tool_info", "server_info", "connection_info")


class SnapshotError(ValueError):
    """Raised when a snapshot document is unreadable or malformed."""


def _require(obj: Any, key: str, path: str) -> Any:
    if not isinstance(obj, Mapping):
        raise SnapshotError(f"{path or '<root>'}: expected an object.")
    if key not in obj:
        where = f"{path}.{key}" if path else key
        raise SnapshotError(f"{where}: missing.")
    return obj[key]


def _name(obj: Any, key: str, path: str) -> str:
    value = _require(obj, key, path)
    if not isinstance(value, str):
        raise SnapshotError(f"{path}.{key}: expected a string.")
    return value


def _items(obj: Any, key: str, path: str) -> list[tuple[str, Any]]:
    """Return (path, element) pairs for a required list-valued key."""
    value = _require(obj, key, path)
    where = f"{path}.{key}" if path else key
    if not isinstance(value, list):
        raise SnapshotError(f"{where}: expected a list.")
    return [(f"{where}[{i}]", item) for i, item in enumerate(value)]


def _table(obj: Any, path: str) -> Table:
    return Table(
        name=_name(obj, "name", path),
        columns=tuple(
            Column(name=_name(c, "name", p)) for p, c in _items(obj, "columns", path)
        ),
    )


def _schema(obj: Any, path: str) -> Schema:
    return Schema(
        full_name=_name(obj, "full_name", path),
        tables=tuple(_table(t, p) for p, t in _items(obj, "tables", path)),
    )


def snapshot_from_dict(payload: Mapping[str, Any]) -> Database:
    """
    Build a snapshot from a decoded JSON document.

    Header values are converted with `str`; schema, table and column
    collections must be present (possibly empty) lists.

    Raises:
        SnapshotError: If a required key is missing or has the wrong type.
    """
    tool_info, server_info, connection_info = (
        str(_require(payload, key, "")) for key in _HEADER_KEYS
    )
    schemas = tuple(_schema(s, p) for p, s in _items(payload, "schemas", ""))
    return Database(
        tool_info=tool_info,
        server_info=server_info,
        connection_info=connection_info,
        schemas=schemas,
    )


def load_snapshot(path: Path | str) -> Database:
    """Read a UTF-8 JSON snapshot file and build a `Database` from it."""
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise SnapshotError(f"Cannot read snapshot '{path}': {exc}") from exc
    except UnicodeDecodeError as exc:
        raise SnapshotError(f"Snapshot '{path}' is not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"Snapshot '{path}' is not valid JSON: {exc}") from exc
    return snapshot_from_dict(payload)
