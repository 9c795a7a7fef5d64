"""Dataclasses and exceptions for dictionary lookups."""

from dataclasses import dataclass, field


class DictionaryError(Exception):
    """Base class for lookup failures."""


class MissingCredentialsError(DictionaryError):
    """API id or key is not configured."""


class WordNotFoundError(DictionaryError):
    """The dictionary has no entry for the requested word."""

    def __init__(self, word: str) -> None:
        super().__init__(f"No dictionary entry found for '{word}'")
        self.word = word


class DictionaryAPIError(DictionaryError):
    """The API request failed or returned an unusable body."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass
class Pronunciation:
    spelling: str
    notation: str | None = None  # IPA, respell, ...
    dialects: list[str] = field(default_factory=list)
    audio_url: str | None = None


@dataclass
class Example:
    text: str
    registers: list[str] = field(default_factory=list)
    domains: list[str] = field(default_factory=list)
    regions: list[str] = field(default_factory=list)


@dataclass
class Sense:
    """A single meaning, possibly with nested sub-senses."""

    definitions: list[str] = field(default_factory=list)
    short_definitions: list[str] = field(default_factory=list)
    examples: list[Example] = field(default_factory=list)
    registers: list[str] = field(default_factory=list)
    domains: list[str] = field(default_factory=list)
    regions: list[str] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)
    cross_references: list[str] = field(default_factory=list)
    synonyms: list[str] = field(default_factory=list)
    antonyms: list[str] = field(default_factory=list)
    subsenses: list["Sense"] = field(default_factory=list)

    @property
    def title(self) -> str:
        """Heading text: full definitions, else short ones."""
        if self.definitions:
            return "; ".join(self.definitions)
        if self.short_definitions:
            return "; ".join(self.short_definitions)
        return "(no definition)"

    @property
    def tags(self) -> list[str]:
        return [*self.domains, *self.registers, *self.regions]


@dataclass
class Entry:
    """One homograph within a lexical entry."""

    homograph_number: str | None = None
    etymologies: list[str] = field(default_factory=list)
    grammatical_features: list[str] = field(default_factory=list)
    pronunciations: list[Pronunciation] = field(default_factory=list)
    senses: list[Sense] = field(default_factory=list)


@dataclass
class LexicalEntry:
    """One part-of-speech grouping (noun, verb, ...)."""

    text: str
    lexical_category: str = ""
    pronunciations: list[Pronunciation] = field(default_factory=list)
    entries: list[Entry] = field(default_factory=list)


@dataclass
class WordEntry:
    """Unified lookup result for one word."""

    word: str
    lexical_entries: list[LexicalEntry] = field(default_factory=list)
    source_url: str | None = None
