"""Lookup result domain models."""

from dataclasses import dataclass
from typing import Any, Iterator


@dataclass(frozen=True)
class Word:
    """A single lexical item: the looked-up word or one of its translations.

    Attributes:
        text: The word itself. Always present.
        part_of_speech: Part of speech label (service field ``pos``), if given.
        stress: Transcription with stress mark (service field ``ts``), if given.
    """
    text: str
    part_of_speech: str | None = None
    stress: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert back to the service's field names, omitting absent fields."""
        data: dict[str, Any] = {"text": self.text}
        if self.part_of_speech is not None:
            data["pos"] = self.part_of_speech
        if self.stress is not None:
            data["ts"] = self.stress
        return data


@dataclass(frozen=True)
class Definition:
    """One sense of the headword with its translations in service order."""
    headword: Word
    translations: tuple[Word, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        data = self.headword.to_dict()
        data["tr"] = [word.to_dict() for word in self.translations]
        return data


@dataclass(frozen=True)
class LookupResult:
    """Immutable, ordered result of a structured lookup (Value Object)."""
    definitions: tuple[Definition, ...] = ()

    def __iter__(self) -> Iterator[Definition]:
        return iter(self.definitions)

    def __len__(self) -> int:
        return len(self.definitions)

    def __getitem__(self, index: int) -> Definition:
        return self.definitions[index]

    @property
    def is_empty(self) -> bool:
        return not self.definitions

    def to_dict(self) -> dict[str, Any]:
        return {"def": [definition.to_dict() for definition in self.definitions]}
