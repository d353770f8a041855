"""In-memory implementation of DictionaryPort for testing."""

import copy
from typing import Any

from yadict.adapter.external.yandex_projection import (
    project_languages,
    project_lookup,
    project_raw_lookup,
)
from yadict.domain.model.errors import RequestError
from yadict.domain.model.language import LanguagePair
from yadict.domain.model.lookup import LookupResult


class FakeDictionaryAdapter:
    """Fake dictionary adapter that returns preconfigured response bodies.

    Bodies go through the same projection as the real client, so a
    malformed body fails the same way it would over the wire.
    """

    def __init__(
        self,
        languages: list[Any] | None = None,
        responses: dict[tuple[str, str], Any] | None = None,
        error: RequestError | None = None,
    ):
        self.languages = languages if languages is not None else []
        self.responses = responses or {}
        self.error = error
        self.calls: list[tuple[str, ...]] = []

    def list_languages(self) -> list[str]:
        self.calls.append(("getLangs",))
        self._raise_if_failing()
        return project_languages(self.languages)

    def lookup_raw(
        self, lang: str | LanguagePair, text: str, **options: Any,
    ) -> dict[str, Any]:
        self.calls.append(("lookup", str(lang), text))
        self._raise_if_failing()
        body = self.responses.get((str(lang), text), {"head": {}, "def": []})
        return project_raw_lookup(copy.deepcopy(body))

    def lookup_structured(
        self, lang: str | LanguagePair, text: str, **options: Any,
    ) -> LookupResult:
        return project_lookup(self.lookup_raw(lang, text, **options))

    def _raise_if_failing(self) -> None:
        if self.error is not None:
            raise self.error
