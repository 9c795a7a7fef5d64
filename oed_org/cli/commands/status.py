"""Status command for displaying API configuration."""

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from oed_org.cli.utils.console import console
from oed_org.config import settings


def status() -> None:
    """Show API configuration."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Label", style="bold")
    table.add_column("Value")

    table.add_row("Base URL", escape(settings.oed_base_url))
    table.add_row("Language", settings.oed_language)
    table.add_row("Timeout", f"{settings.oed_timeout:g}s")
    table.add_row(
        "Credentials",
        "[green]Configured[/]" if settings.has_credentials else "[yellow]Missing[/]",
    )
    if settings.has_credentials:
        table.add_row("App ID", settings.oed_app_id)
    if settings.log_file_enabled:
        table.add_row("Log file", str(settings.resolved_log_file_path))

    console.print()
    console.print(Panel(table, title="[bold]Oxford Dictionaries API[/]", border_style="blue"))
    console.print()
