"""HTTP client for the Oxford Dictionaries entries API."""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from oed_org.config import settings
from oed_org.services.dictionary.base import (
    DictionaryAPIError,
    MissingCredentialsError,
    WordEntry,
    WordNotFoundError,
)
from oed_org.services.dictionary.parser import parse_response

logger = logging.getLogger(__name__)

THESAURUS_FILTER = "synonyms;antonyms"


class OxfordClient:
    """Fetch word entries from the Oxford Dictionaries API."""

    def __init__(
        self,
        app_id: str | None = None,
        app_key: str | None = None,
        base_url: str | None = None,
        language: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.app_id = app_id if app_id is not None else settings.oed_app_id
        self.app_key = app_key if app_key is not None else settings.oed_app_key
        self.base_url = (base_url or settings.oed_base_url).rstrip("/")
        self.language = language or settings.oed_language
        self.timeout = timeout if timeout is not None else settings.oed_timeout

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "app_id": self.app_id,
            "app_key": self.app_key,
        }

    @staticmethod
    def normalize(word: str) -> str:
        """Return the word id used in URLs: lower-case, underscores for spaces."""
        normalized = word.strip().lower()
        if not normalized:
            raise ValueError("Word must not be empty")
        return "_".join(normalized.split())

    def entry_url(self, word: str) -> str:
        word_id = quote(self.normalize(word), safe="")
        return f"{self.base_url}/entries/{self.language}/{word_id}"

    def thesaurus_url(self, word: str) -> str:
        """Entry URL that also asks for synonyms and antonyms."""
        return f"{self.entry_url(word)}/{THESAURUS_FILTER}"

    async def _get(self, url: str) -> dict[str, Any]:
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.get(url, headers=self.headers)
            response.raise_for_status()
            data = response.json()
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object from {url}, got {type(data).__name__}")
        return data

    async def fetch(self, word: str) -> tuple[dict[str, Any], str]:
        """
        Fetch the raw JSON for a word.

        Tries the thesaurus-enriched URL first. If that fails for any reason,
        the plain entry URL is requested once; its failure is raised.

        Returns:
            Tuple of (response JSON, URL that answered)

        Raises:
            MissingCredentialsError: app id or key not configured
            WordNotFoundError: the fallback URL answered 404
            DictionaryAPIError: any other failure of the fallback request
        """
        if not (self.app_id and self.app_key):
            raise MissingCredentialsError(
                "Oxford API credentials missing: set OED_APP_ID and OED_APP_KEY"
            )

        primary = self.thesaurus_url(word)
        try:
            return await self._get(primary), primary
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Thesaurus lookup failed for '{word}', retrying without it: {e}")

        fallback = self.entry_url(word)
        try:
            return await self._get(fallback), fallback
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status == 404:
                raise WordNotFoundError(word) from e
            raise DictionaryAPIError(
                f"Oxford API returned HTTP {status} for '{word}'", status_code=status
            ) from e
        except httpx.HTTPError as e:
            raise DictionaryAPIError(f"Oxford API request failed for '{word}': {e}") from e
        except ValueError as e:
            raise DictionaryAPIError(f"Oxford API returned invalid JSON for '{word}'") from e

    async def lookup(self, word: str) -> WordEntry:
        """Fetch and parse a word entry."""
        data, url = await self.fetch(word)
        logger.debug(f"Fetched '{word}' from {url}")
        try:
            return parse_response(data, source_url=url)
        except WordNotFoundError:
            raise WordNotFoundError(word) from None
