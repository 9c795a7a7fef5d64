"""CLI utility modules."""

from oed_org.cli.utils.async_runner import run_async
from oed_org.cli.utils.console import console, error_console

__all__ = ["run_async", "console", "error_console"]
