"""Allow ``python -m oed_org``."""

from oed_org.cli.main import app

app()
