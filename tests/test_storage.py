"""Test PostgreSQL loading with a mocked connection."""
from contextlib import contextmanager
from unittest.mock import MagicMock, patch

import psycopg2
import pytest

from enumwarp.parser import parse_enum_declaration
from enumwarp.schema import EnumTable, TableSchema, project_enum
from enumwarp.storage import get_connection, get_connection_string, load_tables, replace_table
from enumwarp.storage.tables import create_table_ddl, quote_ident, row_records


@pytest.fixture
def status_table():
    declaration = parse_enum_declaration('enum Status { OK(0, "Green"), NG(1); }')
    return project_enum(declaration)


@pytest.fixture
def fake_connection():
    """Patch get_connection; yields the cursor and the captured row inserts."""
    conn = MagicMock()
    cur = conn.cursor.return_value.__enter__.return_value
    inserted = []

    @contextmanager
    def _get_connection():
        yield conn

    def _execute_values(cursor, sql, records):
        inserted.append((sql, list(records)))

    with patch('enumwarp.storage.tables.get_connection', _get_connection), \
            patch('enumwarp.storage.tables.execute_values', side_effect=_execute_values):
        yield cur, inserted


class TestReplaceTable:

    def test_statement_sequence(self, status_table, fake_connection):
        cur, inserted = fake_connection

        rows = replace_table(status_table, 'enums')

        assert rows == 2
        statements = [c.args[0].strip() for c in cur.execute.call_args_list]
        assert statements[0] == 'CREATE SCHEMA IF NOT EXISTS "enums"'
        assert statements[1] == 'DROP TABLE IF EXISTS "enums"."status"'
        assert statements[2].startswith('CREATE TABLE "enums"."status"')
        assert len(inserted) == 1

    def test_create_table_types(self, status_table):
        ddl = create_table_ddl(status_table, 'enums')
        assert '"key" TEXT' in ddl
        assert '"code" BIGINT' in ddl
        assert '"label" TEXT' in ddl

    def test_boolean_column_type(self):
        table = project_enum(parse_enum_declaration('enum Flag { ON(true), OFF(false); }'))
        assert '"code" BOOLEAN' in create_table_ddl(table, 'enums')

    def test_insert_with_sparse_row(self, status_table, fake_connection):
        _, inserted = fake_connection

        replace_table(status_table, 'enums')

        sql, records = inserted[0]
        assert sql == 'INSERT INTO "enums"."status" ("key", "code", "label") VALUES %s'
        assert records == [('OK', '0', 'Green'), ('NG', '1', None)]


class TestRowRecords:

    def test_missing_fields_become_none(self, status_table):
        assert row_records(status_table) == [('OK', '0', 'Green'), ('NG', '1', None)]

    def test_null_marker_text_is_kept_as_text(self):
        table = project_enum(parse_enum_declaration(r'enum Marker { NULLISH(0, "\N"), EMPTY(1, ""); }'))
        assert row_records(table) == [('NULLISH', '0', '\\N'), ('EMPTY', '1', '')]


class TestLoadTables:

    def test_failure_does_not_abort_other_tables(self):
        first = EnumTable('broken', TableSchema('broken'), [])
        second = EnumTable('status', TableSchema('status'), [{'key': 'A'}, {'key': 'B'}])

        def _replace(table, schema_name):
            if table.table_id == 'broken':
                raise psycopg2.OperationalError('connection refused')
            return table.row_count

        with patch('enumwarp.storage.tables.replace_table', side_effect=_replace):
            results = load_tables([first, second], 'enums')

        assert results == [('broken', 'connection refused'), ('status', 2)]

    def test_overlong_table_name_rejected(self):
        long_id = 'x' * 64
        tables = [
            EnumTable(long_id, TableSchema(long_id), [{'key': 'A'}]),
            EnumTable('y' * 63, TableSchema('y' * 63), [{'key': 'A'}]),
        ]

        with patch('enumwarp.storage.tables.replace_table', return_value=1) as replace:
            results = load_tables(tables, 'enums')

        assert results[0] == (long_id, f"table name '{long_id}' exceeds 63 bytes")
        assert results[1] == ('y' * 63, 1)
        replace.assert_called_once_with(tables[1], 'enums')

    def test_other_errors_propagate(self, status_table):
        with patch('enumwarp.storage.tables.replace_table', side_effect=RuntimeError('bug')):
            with pytest.raises(RuntimeError):
                load_tables([status_table], 'enums')


class TestConnection:

    def test_connection_string_skips_empty_values(self, monkeypatch):
        monkeypatch.setenv('DB_NAME', 'lookup')
        monkeypatch.setenv('DB_USER', 'loader')
        monkeypatch.setenv('DB_PASSWORD', '')
        monkeypatch.setenv('DB_HOST', 'db.internal')
        monkeypatch.delenv('DB_PORT', raising=False)
        assert get_connection_string() == 'dbname=lookup user=loader host=db.internal'

    def test_commit_on_success(self):
        conn = MagicMock()
        with patch('enumwarp.storage.connection.psycopg2.connect', return_value=conn):
            with get_connection():
                pass
        conn.commit.assert_called_once()
        conn.rollback.assert_not_called()
        conn.close.assert_called_once()

    def test_rollback_on_error(self):
        conn = MagicMock()
        with patch('enumwarp.storage.connection.psycopg2.connect', return_value=conn):
            with pytest.raises(ValueError):
                with get_connection():
                    raise ValueError('boom')
        conn.rollback.assert_called_once()
        conn.commit.assert_not_called()
        conn.close.assert_called_once()


def test_quote_ident_escapes_quotes():
    assert quote_ident('we"ird') == '"we""ird"'
