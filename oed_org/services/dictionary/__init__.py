"""Oxford dictionary client, response models and lookup facade."""

from oed_org.services.dictionary.base import (
    DictionaryAPIError,
    DictionaryError,
    Entry,
    Example,
    LexicalEntry,
    MissingCredentialsError,
    Pronunciation,
    Sense,
    WordEntry,
    WordNotFoundError,
)
from oed_org.services.dictionary.client import OxfordClient
from oed_org.services.dictionary.parser import parse_response
from oed_org.services.dictionary.service import LookupService

__all__ = [
    "DictionaryAPIError",
    "DictionaryError",
    "Entry",
    "Example",
    "LexicalEntry",
    "LookupService",
    "MissingCredentialsError",
    "OxfordClient",
    "Pronunciation",
    "Sense",
    "WordEntry",
    "WordNotFoundError",
    "parse_response",
]
