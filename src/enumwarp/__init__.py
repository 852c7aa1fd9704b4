"""enumwarp - load Java enum declarations into PostgreSQL tables"""
from .parser import EnumDeclaration, parse_enum_declaration
from .schema import (
    ENUM_COLUMNS,
    ColumnType,
    EnumTable,
    FieldSpec,
    TableSchema,
    guess_schema,
    project_enum,
    to_rows,
    to_schema_fields,
)
from .utils import camel_to_snake
