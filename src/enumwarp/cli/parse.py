"""
Parse command - show the tables local enum sources would produce.
"""
from pathlib import Path
from typing import Tuple

import click

from enumwarp.cli.console import console
from enumwarp.cli.display import display_enum_table
from enumwarp.sync import build_enum_tables


@click.command('parse')
@click.argument('files', nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path))
def parse_command(files: Tuple[Path, ...]):
    """Parse enum declarations in FILES without touching the database."""
    sources = [f.read_text(encoding='utf-8') for f in files]
    tables = build_enum_tables(sources)

    if not tables:
        console.print("[warning]No enum declarations found[/]")
        return

    for table in tables:
        display_enum_table(table, console)

    console.print(f"\n[success]{len(tables)} of {len(files)} files declare enums[/]")
