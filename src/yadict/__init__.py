"""Client library for the Yandex Dictionary API."""

from yadict.adapter.external.yandex_dictionary import LookupFlags, YandexDictionaryClient
from yadict.config import API_URL, DEFAULT_TOKEN_ENV, load_env_file
from yadict.domain.model.errors import (
    ConfigurationError,
    DailyLimitExceededError,
    DataFormatError,
    DictionaryError,
    ErrorKind,
    KeyBlockedError,
    KeyInvalidError,
    LangNotSupportedError,
    RequestError,
    ResponseParseError,
    ServiceError,
    TextTooLongError,
    TransportError,
    UnknownServiceError,
)
from yadict.domain.model.language import LanguagePair
from yadict.domain.model.lookup import Definition, LookupResult, Word
from yadict.port.dictionary import DictionaryPort

__all__ = [
    "API_URL",
    "DEFAULT_TOKEN_ENV",
    "ConfigurationError",
    "DailyLimitExceededError",
    "DataFormatError",
    "Definition",
    "DictionaryError",
    "DictionaryPort",
    "ErrorKind",
    "KeyBlockedError",
    "KeyInvalidError",
    "LangNotSupportedError",
    "LanguagePair",
    "LookupFlags",
    "LookupResult",
    "RequestError",
    "ResponseParseError",
    "ServiceError",
    "TextTooLongError",
    "TransportError",
    "UnknownServiceError",
    "Word",
    "YandexDictionaryClient",
    "load_env_file",
]
