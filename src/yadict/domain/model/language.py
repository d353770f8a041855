"""Language pair Value Object.

The service addresses translation directions as ``"<source>-<target>"``
strings, e.g. ``"en-ru"``.
"""

from dataclasses import dataclass

_SEPARATOR = "-"


@dataclass(frozen=True)
class LanguagePair:
    """Immutable translation direction."""

    source: str
    target: str

    def __post_init__(self) -> None:
        for code in (self.source, self.target):
            if not code or _SEPARATOR in code or code.strip() != code:
                raise ValueError(f"Invalid language code: {code!r}")

    @classmethod
    def parse(cls, value: str) -> "LanguagePair":
        """Parse ``"en-ru"`` into a LanguagePair.

        Raises:
            ValueError: If the value is not two codes joined by a single dash.
        """
        parts = value.split(_SEPARATOR)
        if len(parts) != 2:
            raise ValueError(f"Invalid language pair: {value!r}")
        return cls(source=parts[0], target=parts[1])

    def reversed(self) -> "LanguagePair":
        return LanguagePair(source=self.target, target=self.source)

    def __str__(self) -> str:
        return f"{self.source}{_SEPARATOR}{self.target}"
