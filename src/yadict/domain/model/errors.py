"""Domain-level exceptions.

Every failure surfaced by the client is one of the classes below.
The set is closed: each concrete class maps to exactly one ErrorKind,
so callers can dispatch on ``err.kind`` or on the class itself.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure kinds."""
    CONFIGURATION = "configuration"
    TRANSPORT = "transport"
    PARSE = "parse"
    DATA_FORMAT = "data_format"
    KEY_INVALID = "key_invalid"
    KEY_BLOCKED = "key_blocked"
    DAILY_LIMIT_EXCEEDED = "daily_limit_exceeded"
    TEXT_TOO_LONG = "text_too_long"
    LANG_NOT_SUPPORTED = "lang_not_supported"
    UNKNOWN_SERVICE_ERROR = "unknown_service_error"


class DictionaryError(Exception):
    """Base class for all client errors."""

    kind: ErrorKind


class ConfigurationError(DictionaryError):
    """Credential source is missing or invalid."""

    kind = ErrorKind.CONFIGURATION


class RequestError(DictionaryError):
    """Base class for failures of a single API call."""


class TransportError(RequestError):
    """Network failure or undecodable response body.

    The underlying exception is preserved as ``__cause__``.
    """

    kind = ErrorKind.TRANSPORT


class ResponseParseError(RequestError):
    """Response body is not valid JSON."""

    kind = ErrorKind.PARSE


class DataFormatError(RequestError):
    """JSON parsed, but does not have the expected shape."""

    kind = ErrorKind.DATA_FORMAT


class ServiceError(RequestError):
    """Error reported by the service through the ``code`` field of the body.

    ``code`` is the service's own code, not the HTTP status.
    """

    code: int

    def __init__(self, code: int, message: str | None = None):
        self.code = code
        self.message = message
        super().__init__(message or f"Dictionary service error {code}")


class KeyInvalidError(ServiceError):
    kind = ErrorKind.KEY_INVALID


class KeyBlockedError(ServiceError):
    kind = ErrorKind.KEY_BLOCKED


class DailyLimitExceededError(ServiceError):
    kind = ErrorKind.DAILY_LIMIT_EXCEEDED


class TextTooLongError(ServiceError):
    kind = ErrorKind.TEXT_TOO_LONG


class LangNotSupportedError(ServiceError):
    kind = ErrorKind.LANG_NOT_SUPPORTED


class UnknownServiceError(ServiceError):
    """Service code outside the documented set."""

    kind = ErrorKind.UNKNOWN_SERVICE_ERROR


SERVICE_ERRORS: dict[int, type[ServiceError]] = {
    401: KeyInvalidError,
    402: KeyBlockedError,
    403: DailyLimitExceededError,
    413: TextTooLongError,
    501: LangNotSupportedError,
}


def service_error_from_code(code: int, message: str | None = None) -> ServiceError:
    """Map a service code to its error. Unknown codes keep the raw value."""
    error_class = SERVICE_ERRORS.get(code, UnknownServiceError)
    return error_class(code, message)
