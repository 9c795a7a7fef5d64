"""Render dictionary entries as Org-mode outlines."""

from collections.abc import Iterable

from oed_org.services.dictionary.base import (
    Example,
    LexicalEntry,
    Pronunciation,
    Sense,
    WordEntry,
)

WORD_LEVEL = 1
CATEGORY_LEVEL = 2
SENSE_LEVEL = 3


def _unique(items: Iterable[str]) -> list[str]:
    """Drop duplicates, keeping first occurrence order."""
    return list(dict.fromkeys(items))


def _heading(level: int, text: str) -> str:
    return f"{'*' * level} {text}"


def _body(level: int, text: str) -> str:
    """Body line indented under a heading of the given level."""
    return f"{' ' * (level + 1)}{text}"


def _tags(tags: Iterable[str]) -> str:
    return " ".join(f"[{tag}]" for tag in _unique(tags))


def format_pronunciation(pronunciation: Pronunciation) -> str:
    details = []
    if pronunciation.notation:
        details.append(pronunciation.notation)
    details.extend(pronunciation.dialects)
    text = pronunciation.spelling
    if details:
        text += f" ({'; '.join(details)})"
    if pronunciation.audio_url:
        text += f" [[{pronunciation.audio_url}][audio]]"
    return text


def format_example(example: Example) -> str:
    text = f'- "{example.text}"'
    tags = _tags([*example.domains, *example.registers, *example.regions])
    if tags:
        text += f" {tags}"
    return text


def _sense_lines(sense: Sense, level: int) -> list[str]:
    lines = [_heading(level, sense.title)]

    tags = _tags(sense.tags)
    if tags:
        lines.append(_body(level, tags))
    for example in sense.examples:
        lines.append(_body(level, format_example(example)))
    for note in sense.notes:
        lines.append(_body(level, f"Note: {note}"))
    if sense.cross_references:
        lines.append(_body(level, f"See also: {', '.join(_unique(sense.cross_references))}"))
    if sense.synonyms:
        lines.append(_body(level, f"Synonyms: {', '.join(_unique(sense.synonyms))}"))
    if sense.antonyms:
        lines.append(_body(level, f"Antonyms: {', '.join(_unique(sense.antonyms))}"))

    for subsense in sense.subsenses:
        lines.extend(_sense_lines(subsense, level + 1))
    return lines


def _lexical_entry_lines(lexical: LexicalEntry) -> list[str]:
    level = CATEGORY_LEVEL
    lines = [_heading(level, lexical.lexical_category or lexical.text)]

    # Org body text has to precede child headings, so every homograph's
    # details are listed before any sense.
    pronunciations = [*lexical.pronunciations]
    etymologies: list[str] = []
    features: list[str] = []
    for entry in lexical.entries:
        pronunciations.extend(entry.pronunciations)
        etymologies.extend(entry.etymologies)
        features.extend(entry.grammatical_features)

    seen = set()
    for pronunciation in pronunciations:
        key = (pronunciation.spelling, pronunciation.notation)
        if key in seen:
            continue
        seen.add(key)
        lines.append(_body(level, f"Pronunciation: {format_pronunciation(pronunciation)}"))
    for etymology in _unique(etymologies):
        lines.append(_body(level, f"Etymology: {etymology}"))
    if features:
        lines.append(_body(level, f"Grammar: {', '.join(_unique(features))}"))

    for entry in lexical.entries:
        for sense in entry.senses:
            lines.extend(_sense_lines(sense, SENSE_LEVEL))
    return lines


def format_org(entry: WordEntry) -> str:
    """Render a word entry as an Org document ending with a single newline."""
    lines = [f"#+TITLE: {entry.word}"]
    if entry.source_url:
        lines.append(f"#+SOURCE: {entry.source_url}")
    lines.append("")
    lines.append(_heading(WORD_LEVEL, entry.word))

    for lexical in entry.lexical_entries:
        lines.extend(_lexical_entry_lines(lexical))

    return "\n".join(lines) + "\n"
