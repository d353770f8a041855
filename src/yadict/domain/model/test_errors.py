"""Unit tests for the error taxonomy."""

import unittest

from yadict.domain.model.errors import (
    SERVICE_ERRORS,
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
    service_error_from_code,
)


class TestServiceErrorFromCode(unittest.TestCase):
    """Tests for service code classification."""

    def test_documented_codes(self):
        expected = {
            401: KeyInvalidError,
            402: KeyBlockedError,
            403: DailyLimitExceededError,
            413: TextTooLongError,
            501: LangNotSupportedError,
        }
        for code, error_class in expected.items():
            with self.subTest(code=code):
                error = service_error_from_code(code)
                self.assertIs(type(error), error_class)
                self.assertEqual(error.code, code)

    def test_unknown_code_keeps_value(self):
        error = service_error_from_code(200)
        self.assertIsInstance(error, UnknownServiceError)
        self.assertEqual(error.code, 200)

    def test_message(self):
        self.assertEqual(str(service_error_from_code(403, "Daily limit")), "Daily limit")
        self.assertIn("403", str(service_error_from_code(403)))


class TestErrorKinds(unittest.TestCase):
    """Tests that each concrete error maps to one kind."""

    CONCRETE = [
        ConfigurationError, TransportError, ResponseParseError, DataFormatError,
        KeyInvalidError, KeyBlockedError, DailyLimitExceededError,
        TextTooLongError, LangNotSupportedError, UnknownServiceError,
    ]

    def test_kinds_are_unique_and_complete(self):
        kinds = [error_class.kind for error_class in self.CONCRETE]
        self.assertEqual(len(set(kinds)), len(kinds))
        self.assertEqual(set(kinds), set(ErrorKind))

    def test_hierarchy(self):
        for error_class in self.CONCRETE:
            self.assertTrue(issubclass(error_class, DictionaryError))
        self.assertFalse(issubclass(ConfigurationError, RequestError))
        for error_class in SERVICE_ERRORS.values():
            self.assertTrue(issubclass(error_class, ServiceError))

    def test_kind_is_string(self):
        self.assertEqual(ErrorKind.DATA_FORMAT, "data_format")
