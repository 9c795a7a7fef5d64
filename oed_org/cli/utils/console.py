"""Rich console configuration and helpers."""

from rich.console import Console
from rich.theme import Theme

custom_theme = Theme(
    {
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "red bold",
        "dim": "dim",
    }
)

# Main console for output
console = Console(theme=custom_theme)

# Status and error messages go to stderr, leaving stdout for documents
error_console = Console(theme=custom_theme, stderr=True)
