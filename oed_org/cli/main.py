"""Main CLI application entry point."""

import typer

from oed_org.cli.commands import lookup, status
from oed_org.logging_config import setup_logging

app = typer.Typer(
    name="oed-org",
    help="Look words up in the Oxford dictionaries and read them as Org outlines",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def startup() -> None:
    """Initialize application on startup."""
    setup_logging()


app.command(name="lookup", help="Look up a word and show it as an Org outline")(lookup.lookup)

app.command(name="status", help="Show API configuration")(status.status)


if __name__ == "__main__":
    app()
