"""PostgreSQL storage for enum tables"""
from .connection import get_connection, get_connection_string
from .tables import PG_TYPES, load_tables, replace_table
