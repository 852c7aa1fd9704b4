"""Identifier normalization for table names"""
import re

# Zero-width split point before every uppercase letter, except at the start
_UPPER_BOUNDARY = re.compile(r'(?<!^)(?=[A-Z])')


def camel_to_snake(name: str) -> str:
    """
    Convert a camel-case identifier to a lowercase, underscore-separated one.

    Every uppercase letter starts a new segment, so acronym runs are split
    letter by letter:

        camel_to_snake("SomeEnumName") -> "some_enum_name"
        camel_to_snake("HTTPServer")   -> "h_t_t_p_server"
    """
    return _UPPER_BOUNDARY.sub('_', name).lower()


def qualified_table_name(schema: str, table_id: str) -> str:
    """Display form of a table: "enums.status"."""
    return f"{schema}.{table_id}"
