"""Dictionary port: outbound interface for translation dictionaries."""

from typing import Any, Protocol

from yadict.domain.model.language import LanguagePair
from yadict.domain.model.lookup import LookupResult


class DictionaryPort(Protocol):
    """Port for dictionary lookups.

    lookup_raw() hands back the source's JSON object untouched;
    lookup_structured() returns the same answer as domain types.
    All methods raise RequestError subclasses on failure.
    """

    def list_languages(self) -> list[str]: ...

    def lookup_raw(
        self, lang: str | LanguagePair, text: str, **options: Any,
    ) -> dict[str, Any]: ...

    def lookup_structured(
        self, lang: str | LanguagePair, text: str, **options: Any,
    ) -> LookupResult: ...
