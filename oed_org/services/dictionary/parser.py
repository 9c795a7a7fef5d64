"""Convert Oxford API JSON responses into WordEntry dataclasses."""

import logging
from typing import Any

from oed_org.services.dictionary.base import (
    Entry,
    Example,
    LexicalEntry,
    Pronunciation,
    Sense,
    WordEntry,
    WordNotFoundError,
)

logger = logging.getLogger(__name__)


def _text(value: Any) -> str:
    """Return the text of a tag that is either a string or a {"text": ...} object."""
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        return str(value.get("text") or value.get("id") or "")
    return ""


def _texts(values: Any) -> list[str]:
    """Return non-empty texts from a list of tags (or a single tag)."""
    if values is None:
        return []
    if not isinstance(values, list):
        values = [values]
    return [text for text in (_text(v) for v in values) if text]


def _parse_pronunciations(items: list[dict[str, Any]] | None) -> list[Pronunciation]:
    pronunciations = []
    for item in items or []:
        spelling = item.get("phoneticSpelling")
        if not spelling:
            continue
        pronunciations.append(
            Pronunciation(
                spelling=spelling,
                notation=item.get("phoneticNotation"),
                dialects=_texts(item.get("dialects")),
                audio_url=item.get("audioFile"),
            )
        )
    return pronunciations


def _parse_examples(items: list[dict[str, Any]] | None) -> list[Example]:
    return [
        Example(
            text=item["text"],
            registers=_texts(item.get("registers")),
            domains=_texts(item.get("domains")),
            regions=_texts(item.get("regions")),
        )
        for item in items or []
        if item.get("text")
    ]


def _parse_sense(data: dict[str, Any]) -> Sense:
    """Parse a sense and, recursively, its sub-senses."""
    cross_references = _texts(data.get("crossReferenceMarkers"))
    if not cross_references:
        cross_references = _texts(data.get("crossReferences"))

    return Sense(
        definitions=_texts(data.get("definitions")),
        short_definitions=_texts(data.get("short_definitions") or data.get("shortDefinitions")),
        examples=_parse_examples(data.get("examples")),
        registers=_texts(data.get("registers")),
        domains=_texts(data.get("domains")),
        regions=_texts(data.get("regions")),
        notes=_texts(data.get("notes")),
        cross_references=cross_references,
        synonyms=_texts(data.get("synonyms")),
        antonyms=_texts(data.get("antonyms")),
        subsenses=[_parse_sense(sub) for sub in data.get("subsenses") or []],
    )


def _parse_entry(data: dict[str, Any]) -> Entry:
    return Entry(
        homograph_number=data.get("homographNumber"),
        etymologies=_texts(data.get("etymologies")),
        grammatical_features=_texts(data.get("grammaticalFeatures")),
        pronunciations=_parse_pronunciations(data.get("pronunciations")),
        senses=[_parse_sense(sense) for sense in data.get("senses") or []],
    )


def _parse_lexical_entry(data: dict[str, Any], word: str) -> LexicalEntry:
    return LexicalEntry(
        text=data.get("text") or word,
        lexical_category=_text(data.get("lexicalCategory")),
        pronunciations=_parse_pronunciations(data.get("pronunciations")),
        entries=[_parse_entry(entry) for entry in data.get("entries") or []],
    )


def parse_response(data: dict[str, Any], source_url: str | None = None) -> WordEntry:
    """
    Parse an entries response into a WordEntry.

    Only the first result is used; the API returns one result per headword id.

    Raises:
        WordNotFoundError: The response carries no results
    """
    results = data.get("results") or []
    if not results:
        raise WordNotFoundError(str(data.get("id") or data.get("word") or ""))

    result = results[0]
    word = result.get("word") or result.get("id") or ""
    if len(results) > 1:
        logger.debug(f"Ignoring {len(results) - 1} extra result(s) for '{word}'")

    return WordEntry(
        word=word,
        lexical_entries=[
            _parse_lexical_entry(lexical, word) for lexical in result.get("lexicalEntries") or []
        ],
        source_url=source_url,
    )
