"""Lookup facade combining the Oxford client with the Org formatter."""

import logging

from oed_org.services.dictionary.base import WordEntry
from oed_org.services.dictionary.client import OxfordClient
from oed_org.services.formatter import format_org

logger = logging.getLogger(__name__)


class LookupService:
    """Look a word up and render it as an Org outline."""

    def __init__(self, client: OxfordClient | None = None) -> None:
        self.client = client or OxfordClient()

    async def lookup(self, word: str) -> WordEntry:
        entry = await self.client.lookup(word)
        logger.info(f"Found '{entry.word}' ({len(entry.lexical_entries)} lexical entries)")
        return entry

    async def render(self, word: str) -> str:
        """Return the Org document for a word."""
        return format_org(await self.lookup(word))

    async def close(self) -> None:
        """Release resources (the client opens one connection per request)."""
        close_method = getattr(self.client, "close", None)
        if close_method is not None:
            await close_method()
