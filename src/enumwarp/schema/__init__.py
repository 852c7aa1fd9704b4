"""Schema inference and row projection for parsed enums"""
from .inference import ColumnType, guess_schema, guess_column_type, transpose
from .projector import (
    ENUM_COLUMNS,
    EnumTable,
    FieldSpec,
    TableSchema,
    project_enum,
    to_rows,
    to_schema_fields,
)
