"""Turn a parsed enum into a table schema and load-ready rows"""
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from ..parser import EnumDeclaration, ValueTuple
from ..utils.naming import camel_to_snake
from .inference import ColumnType, guess_schema

# Fixed positional column names: constant name, code, label
ENUM_COLUMNS = ('key', 'code', 'label')


@dataclass(frozen=True)
class FieldSpec:
    """One column of a target table"""
    name: str
    type: ColumnType

    def to_dict(self) -> dict:
        return {'name': self.name, 'type': self.type.value}


@dataclass(frozen=True)
class TableSchema:
    table_id: str
    fields: List[FieldSpec] = field(default_factory=list)

    def to_fields(self) -> List[dict]:
        return [f.to_dict() for f in self.fields]

    @property
    def column_names(self) -> List[str]:
        return [f.name for f in self.fields]


@dataclass(frozen=True)
class EnumTable:
    """Everything the load step needs for one enum"""
    table_id: str
    schema: TableSchema
    rows: List[Dict[str, str]]

    @property
    def row_count(self) -> int:
        return len(self.rows)


def to_schema_fields(values: Sequence[ValueTuple], columns: Sequence[str] = ENUM_COLUMNS) -> List[FieldSpec]:
    """
    Infer field types for the value tuples and name them positionally.

    Columns beyond len(columns) are dropped.
    """
    types = guess_schema(values)[:len(columns)]
    return [FieldSpec(name=name, type=col_type) for name, col_type in zip(columns, types)]


def to_rows(values: Sequence[ValueTuple], columns: Sequence[str] = ENUM_COLUMNS) -> List[Dict[str, str]]:
    """
    Key each value tuple by column name.

    Short tuples give sparse rows (missing columns are absent, not None).
    Values are passed through as text; no coercion to the schema type.
    """
    return [dict(zip(columns, value)) for value in values]


def project_enum(declaration: EnumDeclaration, columns: Sequence[str] = ENUM_COLUMNS) -> EnumTable:
    """Build the table id, schema and rows for one parsed enum."""
    table_id = camel_to_snake(declaration.name)
    schema = TableSchema(table_id=table_id, fields=to_schema_fields(declaration.values, columns))
    return EnumTable(table_id=table_id, schema=schema, rows=to_rows(declaration.values, columns))
