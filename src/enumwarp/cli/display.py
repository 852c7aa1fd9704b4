"""Render parsed enum tables to the console."""
from rich.markup import escape
from rich.table import Table

from enumwarp.schema import EnumTable


def display_enum_table(table: EnumTable, console) -> None:
    """Print one enum's schema as table headers and its rows beneath."""
    columns = table.schema.fields
    tbl = Table(title=escape(f"{table.table_id} ({table.row_count} rows)"), header_style="bold")
    for field in columns:
        tbl.add_column(f"{field.name}\n[muted]{field.type.value}[/]")
    for row in table.rows:
        tbl.add_row(*(escape(row.get(field.name, "")) for field in columns))
    console.print(tbl)
