"""
Shared Rich console and theme for the enumwarp CLI.
"""
from rich.console import Console
from rich.theme import Theme

custom_theme = Theme({
    "info": "blue",
    "success": "blue",
    "warning": "blue",
    "error": "bold red",
    "highlight": "bold blue",
    "muted": "blue",
    "count": "blue",
    "table.header": "bold blue",
})

console = Console(theme=custom_theme, highlight=False)
