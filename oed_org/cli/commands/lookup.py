"""Word lookup command."""

import json
import logging
from pathlib import Path

import click
import typer
from rich.markup import escape

from oed_org.cli.utils.async_runner import run_async
from oed_org.cli.utils.console import error_console
from oed_org.services.dictionary import DictionaryError, LookupService, OxfordClient

logger = logging.getLogger(__name__)


async def _render(word: str, raw: bool) -> str:
    """Return the Org document, or the pretty-printed JSON when raw is set."""
    logger.debug(f"Looking up '{word}' (raw={raw})")
    client = OxfordClient()
    if raw:
        data, _ = await client.fetch(word)
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"

    service = LookupService(client=client)
    try:
        return await service.render(word)
    finally:
        await service.close()


def _write(document: str, output: Path) -> None:
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(document, encoding="utf-8")
    error_console.print(f"[success]Wrote {escape(str(output))}[/]")


def lookup(
    word: str = typer.Argument(..., help="Word to look up"),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write the document to a file instead of stdout"
    ),
    edit: bool = typer.Option(
        False, "--edit", help="Open the document in $EDITOR as a scratch buffer"
    ),
    raw: bool = typer.Option(False, "--raw", help="Show the API's JSON instead of Org text"),
) -> None:
    """Look up a word and show it as an Org outline."""
    try:
        document = run_async(_render(word, raw))
    except (DictionaryError, ValueError) as e:
        error_console.print(f"[error]{escape(str(e))}[/]")
        raise typer.Exit(1) from None

    if output is not None:
        _write(document, output)
    elif edit:
        # Edits are discarded, like a scratch buffer
        click.edit(document, extension=".json" if raw else ".org", require_save=False)
    else:
        typer.echo(document, nl=False)
