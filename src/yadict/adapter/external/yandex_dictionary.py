"""Yandex Dictionary API adapter.

Implements DictionaryPort with blocking HTTP calls to the Yandex
Dictionary service. Each call is a single round trip: no retries,
no caching. Failures are raised as domain errors.

API Documentation: https://yandex.com/dev/dictionary/doc/dg/concepts/api-overview.html
"""

import logging
from dataclasses import dataclass, field
from enum import IntFlag
from typing import Any

import httpx

from yadict.adapter.external.yandex_projection import (
    classify_service_error,
    project_languages,
    project_lookup,
    project_raw_lookup,
)
from yadict.config import API_TIMEOUT_SECONDS, API_URL, DEFAULT_TOKEN_ENV, read_token
from yadict.domain.model.errors import (
    ConfigurationError,
    DataFormatError,
    ResponseParseError,
    TransportError,
)
from yadict.domain.model.language import LanguagePair
from yadict.domain.model.lookup import LookupResult
from yadict.utils.json_parsing import parse_json_content

logger = logging.getLogger(__name__)

GET_LANGS_PATH = "getLangs"
LOOKUP_PATH = "lookup"


class LookupFlags(IntFlag):
    """Search options accepted by the ``flags`` lookup parameter."""
    FAMILY = 0x0001
    SHORT_POS = 0x0002
    MORPHO = 0x0004
    POS_FILTER = 0x0008


@dataclass(frozen=True)
class YandexDictionaryClient:
    """Client for the Yandex Dictionary API.

    Immutable after construction, so one instance can be shared between
    threads. A fresh httpx.Client is opened for every call.

    Attributes:
        token: API key sent as ``key`` on every request.
        base_url: Service root; endpoints are appended as sub-paths.
        timeout: Transport timeout in seconds.
        verify: Whether TLS certificates are verified.
        transport: Optional httpx transport, e.g. httpx.MockTransport in tests.
    """
    token: str = field(repr=False)
    base_url: str = API_URL
    timeout: float = API_TIMEOUT_SECONDS
    verify: bool = True
    transport: httpx.BaseTransport | None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.token, str) or not self.token:
            raise ConfigurationError("API token must be a non-empty string")

    @classmethod
    def from_token(cls, token: str, **options: Any) -> "YandexDictionaryClient":
        return cls(token, **options)

    @classmethod
    def from_env(cls, var: str = DEFAULT_TOKEN_ENV, **options: Any) -> "YandexDictionaryClient":
        """Build a client from the API key stored in an environment variable.

        Raises:
            ConfigurationError: If the variable is unset or empty.
        """
        return cls(read_token(var), **options)

    # ── Operations ───────────────────────────────────────────

    def list_languages(self) -> list[str]:
        """Return the supported translation directions, e.g. ``["en-ru", ...]``."""
        data = self._fetch_json(GET_LANGS_PATH, {})
        languages = project_languages(data)
        logger.debug(
            "Yandex Dictionary languages fetched",
            extra={"language_count": len(languages)},
        )
        return languages

    def lookup_raw(
        self,
        lang: str | LanguagePair,
        text: str,
        *,
        ui: str | None = None,
        flags: LookupFlags | int | None = None,
    ) -> dict[str, Any]:
        """Look up text and return the response object as parsed.

        Args:
            lang: Translation direction, e.g. "en-ru".
            text: Word or phrase to look up.
            ui: Language for part-of-speech labels.
            flags: Search options.
        """
        params = {"lang": str(lang), "text": text}
        if ui is not None:
            params["ui"] = ui
        if flags is not None:
            params["flags"] = str(int(flags))
        data = self._fetch_json(LOOKUP_PATH, params)
        return project_raw_lookup(data)

    def lookup_structured(
        self,
        lang: str | LanguagePair,
        text: str,
        *,
        ui: str | None = None,
        flags: LookupFlags | int | None = None,
    ) -> LookupResult:
        """Look up text and project the response into a LookupResult."""
        result = project_lookup(self.lookup_raw(lang, text, ui=ui, flags=flags))
        logger.debug(
            "Yandex Dictionary lookup successful",
            extra={
                "lang": str(lang),
                "definition_count": len(result),
                "translation_count": sum(len(d.translations) for d in result),
            },
        )
        return result

    # ── HTTP helpers ─────────────────────────────────────────

    def _fetch_json(self, path: str, params: dict[str, str]) -> Any:
        """GET an endpoint and return the parsed body of an OK response.

        Raises:
            TransportError: Network failure or non-UTF-8 body.
            ResponseParseError: OK response whose body is not JSON.
            DataFormatError: Non-OK response without a usable service code.
            ServiceError: Non-OK response carrying a service code.
        """
        url = f"{self.base_url.rstrip('/')}/{path}"
        logger.debug(
            "Yandex Dictionary request",
            extra={"endpoint": path, "lang": params.get("lang")},
        )

        try:
            with httpx.Client(timeout=self.timeout, verify=self.verify, transport=self.transport) as client:
                response = client.get(url, params={"key": self.token, **params})
        except httpx.HTTPError as e:
            raise TransportError(f"Request to {path} failed: {type(e).__name__}") from e

        try:
            body = response.content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise TransportError("Response body is not valid UTF-8") from e

        if response.status_code != httpx.codes.OK:
            try:
                data = parse_json_content(body)
            except ValueError as e:
                raise DataFormatError(
                    f"Non-OK response ({response.status_code}) body is not JSON"
                ) from e
            raise classify_service_error(data)

        try:
            return parse_json_content(body)
        except ValueError as e:
            raise ResponseParseError(f"Invalid JSON in {path} response: {e}") from e
