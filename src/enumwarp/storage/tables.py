"""Destructive replace of enum tables in PostgreSQL"""
import logging
from typing import List, Optional, Sequence, Tuple, Union

import pandas as pd
import psycopg2
from psycopg2.extras import execute_values

from ..schema import ColumnType, EnumTable
from ..utils.naming import qualified_table_name
from .connection import get_connection

logger = logging.getLogger(__name__)

PG_TYPES = {
    ColumnType.BOOLEAN: 'BOOLEAN',
    ColumnType.INTEGER: 'BIGINT',
    ColumnType.STRING: 'TEXT',
}

# PostgreSQL NAMEDATALEN - 1; longer identifiers are silently truncated
MAX_IDENTIFIER_BYTES = 63

# (table_id, rows inserted) on success, (table_id, error message) on failure
LoadResult = Tuple[str, Union[int, str]]


def quote_ident(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


def identifier_error(name: str) -> Optional[str]:
    """Reason name cannot be used as a table name as-is, or None."""
    if len(name.encode('utf-8')) > MAX_IDENTIFIER_BYTES:
        return f"table name {name!r} exceeds {MAX_IDENTIFIER_BYTES} bytes"
    return None


def create_table_ddl(table: EnumTable, schema_name: str) -> str:
    col_defs = [f'{quote_ident(f.name)} {PG_TYPES[f.type]}' for f in table.schema.fields]
    return f"""
        CREATE TABLE {quote_ident(schema_name)}.{quote_ident(table.table_id)} (
            {', '.join(col_defs)}
        )
    """


def row_records(table: EnumTable) -> List[tuple]:
    """Rows as tuples in schema column order; absent fields become None (NULL)."""
    df = pd.DataFrame(table.rows, columns=table.schema.column_names).astype(object)
    df = df.where(df.notna(), None)
    return list(df.itertuples(index=False, name=None))


def replace_table(table: EnumTable, schema_name: str = 'enums') -> int:
    """
    Replace the contents of schema_name.table_id with the enum's rows.

    Creates the schema if missing and drops any existing table of the same
    name before recreating it from the inferred schema. Runs in a single
    transaction, so a failed load leaves the previous table in place.

    Returns number of rows inserted.
    """
    full_table = f'{quote_ident(schema_name)}.{quote_ident(table.table_id)}'
    columns_quoted = ', '.join(quote_ident(c) for c in table.schema.column_names)
    records = row_records(table)

    with get_connection() as conn:
        with conn.cursor() as cur:
            cur.execute(f"CREATE SCHEMA IF NOT EXISTS {quote_ident(schema_name)}")
            cur.execute(f"DROP TABLE IF EXISTS {full_table}")
            cur.execute(create_table_ddl(table, schema_name))
            if records:
                execute_values(cur, f"INSERT INTO {full_table} ({columns_quoted}) VALUES %s", records)

    return len(records)


def load_tables(tables: Sequence[EnumTable], schema_name: str = 'enums') -> List[LoadResult]:
    """
    Replace each table in turn.

    A failing table is logged and reported in its result; the remaining
    tables are still loaded.
    """
    results = []
    for table in tables:
        name = qualified_table_name(schema_name, table.table_id)
        error = identifier_error(table.table_id)
        if error:
            logger.error(f"Skipping {name}: {error}")
            results.append((table.table_id, error))
            continue
        try:
            rows = replace_table(table, schema_name)
        except psycopg2.Error as e:
            logger.error(f"Load failed for {name}: {e}")
            results.append((table.table_id, str(e).strip()))
            continue
        logger.info(f"Inserted {rows} rows into {name}")
        results.append((table.table_id, rows))
    return results
