"""Yandex Dictionary response projection.

Pure functions turning parsed JSON bodies into domain results:
service error classification, the language list, and the
``def``/``tr`` walk that builds a LookupResult.

Any structural deviation in a lookup body aborts the whole projection
with DataFormatError; only the language list tolerates bad elements.
"""

from typing import Any

from yadict.domain.model.errors import DataFormatError, ServiceError, service_error_from_code
from yadict.domain.model.lookup import Definition, LookupResult, Word
from yadict.utils.json_parsing import (
    as_array,
    as_object,
    as_string,
    as_unsigned_int,
    require,
)


# ── Error classification ─────────────────────────────────────


def classify_service_error(data: Any) -> ServiceError:
    """Build the error carried by a non-OK response body.

    The body must be an object with a non-negative integer ``code``.
    That code is the service's own, independent of the HTTP status.

    Raises:
        DataFormatError: If the body has no usable ``code``.
    """
    body = require(as_object(data), "error body to be an object")
    code = require(as_unsigned_int(body.get("code")), "integer 'code' in error body")
    return service_error_from_code(code, as_string(body.get("message")))


# ── getLangs ─────────────────────────────────────────────────


def project_languages(data: Any) -> list[str]:
    """Return the string elements of a getLangs array, in order.

    Non-string elements are skipped.
    """
    items = require(as_array(data), "language list to be an array")
    return [item for item in items if isinstance(item, str)]


# ── lookup ───────────────────────────────────────────────────


def project_raw_lookup(data: Any) -> dict[str, Any]:
    return require(as_object(data), "lookup response to be an object")


def extract_word(data: Any) -> Word:
    """Read ``text`` (required) and ``pos``/``ts`` (best-effort) from an object."""
    obj = require(as_object(data), "word entry to be an object")
    return Word(
        text=require(as_string(obj.get("text")), "string 'text' in word entry"),
        part_of_speech=as_string(obj.get("pos")),
        stress=as_string(obj.get("ts")),
    )


def extract_definition(data: Any) -> Definition:
    obj = require(as_object(data), "definition entry to be an object")
    headword = extract_word(obj)
    if not headword.text:
        raise DataFormatError("Expected non-empty headword 'text'")
    translations = require(as_array(obj.get("tr")), "'tr' array in definition entry")
    return Definition(
        headword=headword,
        translations=tuple(extract_word(item) for item in translations),
    )


def project_lookup(data: Any) -> LookupResult:
    """Project a lookup response body into a LookupResult.

    Raises:
        DataFormatError: If any required field is missing or mistyped.
    """
    body = project_raw_lookup(data)
    definitions = require(as_array(body.get("def")), "'def' array in lookup response")
    return LookupResult(
        definitions=tuple(extract_definition(item) for item in definitions),
    )
