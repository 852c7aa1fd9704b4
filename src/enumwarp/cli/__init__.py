"""
enumwarp CLI module - shared console and commands.
"""
from enumwarp.cli.console import console, custom_theme
from enumwarp.cli.display import display_enum_table
from enumwarp.cli.parse import parse_command
from enumwarp.cli.sync import sync_command
from enumwarp.cli.serve import serve_command
from enumwarp.cli.main import cli

__all__ = [
    'console',
    'custom_theme',
    'display_enum_table',
    'parse_command',
    'sync_command',
    'serve_command',
    'cli',
]
