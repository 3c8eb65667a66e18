from types import SimpleNamespace

import pytest

from schemaprint.core.printer import (
    COLUMN_MARKER,
    TABLE_MARKER,
    SchemaPrinter,
    outline_lines,
)
from schemaprint.core.snapshot import Column, Database, Schema, Table


def _db(*schemas: Schema) -> Database:
    return Database(
        tool_info="SC/1.0",
        server_info="HSQLDB",
        connection_info="JDBC-Driver",
        schemas=tuple(schemas),
    )


def _capture(database) -> list[str]:
    lines: list[str] = []
    SchemaPrinter(lines.append).run(database)
    return lines


def test_books_example_renders_exact_outline():
    database = _db(
        Schema(
            full_name="PUBLIC",
            tables=(Table(name="BOOKS", columns=(Column("ID"), Column("TITLE"))),),
        )
    )

    assert _capture(database) == [
        "SC/1.0",
        "HSQLDB",
        "JDBC-Driver",
        "PUBLIC",
        "o--> BOOKS",
        "     o--> ID",
        "     o--> TITLE",
    ]


def test_to_stream_writes_newline_terminated_lines(tmp_path):
    database = _db(Schema(full_name="PUBLIC", tables=(Table(name="BOOKS"),)))
    target = tmp_path / "outline.txt"

    with target.open("w", encoding="utf-8") as fh:
        SchemaPrinter.to_stream(fh).run(database)

    assert target.read_text(encoding="utf-8") == (
        "SC/1.0\nHSQLDB\nJDBC-Driver\nPUBLIC\no--> BOOKS\n"
    )


def test_default_sink_is_print(capsys):
    SchemaPrinter().run(_db())

    assert capsys.readouterr().out == "SC/1.0\nHSQLDB\nJDBC-Driver\n"


def test_zero_schemas_emits_only_headers():
    assert _capture(_db()) == ["SC/1.0", "HSQLDB", "JDBC-Driver"]


def test_empty_schema_and_empty_table_emit_only_their_own_line():
    database = _db(
        Schema(full_name="EMPTY"),
        Schema(full_name="S", tables=(Table(name="NOCOLS"),)),
    )

    assert _capture(database)[3:] == ["EMPTY", "S", "o--> NOCOLS"]


def test_line_count_and_prefixes():
    database = _db(
        Schema(
            full_name="A",
            tables=(
                Table(name="T1", columns=(Column("c1"), Column("c2"), Column("c3"))),
                Table(name="T2"),
            ),
        ),
        Schema(full_name="B", tables=(Table(name="T3", columns=(Column("x"),)),)),
        Schema(full_name="C"),
    )

    lines = _capture(database)

    expected = 3 + sum(
        1 + len(s.tables) + sum(len(t.columns) for t in s.tables)
        for s in database.schemas
    )
    assert len(lines) == expected
    assert TABLE_MARKER == "o--> "
    assert COLUMN_MARKER == "     o--> "
    assert [l for l in lines if l.startswith(TABLE_MARKER)] == [
        "o--> T1",
        "o--> T2",
        "o--> T3",
    ]
    assert [l for l in lines if l.startswith(COLUMN_MARKER)] == [
        "     o--> c1",
        "     o--> c2",
        "     o--> c3",
        "     o--> x",
    ]


def test_collection_order_is_preserved():
    database = _db(
        Schema(
            full_name="zeta",
            tables=(Table(name="b", columns=(Column("z"), Column("a"))), Table("a")),
        ),
        Schema(full_name="alpha"),
    )

    assert _capture(database)[3:] == [
        "zeta",
        "o--> b",
        "     o--> z",
        "     o--> a",
        "o--> a",
        "alpha",
    ]


def test_run_is_repeatable_on_same_snapshot():
    database = _db(
        Schema(full_name="PUBLIC", tables=(Table(name="T", columns=(Column("c"),)),))
    )

    assert _capture(database) == _capture(database)


def test_accepts_duck_typed_objects_and_stringifies_headers():
    class _ToolInfo:
        def __str__(self) -> str:
            return "tool 2.0"

    database = SimpleNamespace(
        tool_info=_ToolInfo(),
        server_info=42,
        connection_info="driver",
        schemas=[
            SimpleNamespace(
                full_name="main.sales",
                tables=[SimpleNamespace(name="orders", columns=[])],
            )
        ],
    )

    assert list(outline_lines(database)) == [
        "tool 2.0",
        "42",
        "driver",
        "main.sales",
        "o--> orders",
    ]


def test_missing_attribute_propagates_after_partial_output():
    database = _db(
        Schema(full_name="S", tables=(Table(name="T1"), SimpleNamespace(columns=()))),
        Schema(full_name="NEVER"),
    )
    lines: list[str] = []

    with pytest.raises(AttributeError):
        SchemaPrinter(lines.append).run(database)

    assert lines == ["SC/1.0", "HSQLDB", "JDBC-Driver", "S", "o--> T1"]


def test_null_collection_and_null_name_are_not_masked():
    no_columns = _db(Schema(full_name="S", tables=(Table(name="T", columns=None),)))
    null_name = _db(Schema(full_name="S", tables=(Table(name=None),)))

    with pytest.raises(TypeError):
        _capture(no_columns)
    with pytest.raises(TypeError):
        _capture(null_name)


def test_missing_header_aborts_before_any_output():
    lines: list[str] = []

    with pytest.raises(AttributeError):
        SchemaPrinter(lines.append).run(SimpleNamespace(schemas=[]))

    assert lines == []
