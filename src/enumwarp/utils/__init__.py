"""Utility functions"""
from .naming import camel_to_snake, qualified_table_name
