"""Unit tests for FakeDictionaryAdapter: verifies Port contract compliance."""

import unittest

from yadict.adapter.fake.dictionary import FakeDictionaryAdapter
from yadict.domain.model.errors import DataFormatError, KeyBlockedError
from yadict.domain.model.language import LanguagePair
from yadict.domain.model.lookup import LookupResult, Word
from yadict.port.dictionary import DictionaryPort


def lookup_definitions(port: DictionaryPort, lang, text) -> list[str]:
    return [d.headword.text for d in port.lookup_structured(lang, text)]


class TestFakeDictionaryAdapter(unittest.TestCase):
    """Tests that FakeDictionaryAdapter behaves like the real client."""

    def setUp(self):
        self.adapter = FakeDictionaryAdapter(
            languages=["en-ru", 7, "ru-en"],
            responses={
                ("en-ru", "rust"): {"def": [{"text": "rust", "pos": "noun", "tr": [{"text": "ржавчина"}]}]},
                ("en-ru", "broken"): {"def": [{"text": "broken"}]},
            },
        )

    def test_list_languages_filters_non_strings(self):
        self.assertEqual(self.adapter.list_languages(), ["en-ru", "ru-en"])

    def test_lookup_structured(self):
        result = self.adapter.lookup_structured(LanguagePair.parse("en-ru"), "rust")

        self.assertEqual(result[0].headword, Word(text="rust", part_of_speech="noun"))
        self.assertEqual(self.adapter.calls[-1], ("lookup", "en-ru", "rust"))

    def test_usable_through_port(self):
        self.assertEqual(lookup_definitions(self.adapter, "en-ru", "rust"), ["rust"])

    def test_unknown_lookup_returns_empty(self):
        self.assertEqual(self.adapter.lookup_structured("en-ru", "qwzx"), LookupResult())

    def test_raw_lookup_returns_copy(self):
        raw = self.adapter.lookup_raw("en-ru", "rust")
        raw["def"].clear()

        self.assertEqual(len(self.adapter.lookup_structured("en-ru", "rust")), 1)

    def test_malformed_body_fails_like_real_client(self):
        with self.assertRaises(DataFormatError):
            self.adapter.lookup_structured("en-ru", "broken")

    def test_configured_error_is_raised(self):
        adapter = FakeDictionaryAdapter(error=KeyBlockedError(402))

        with self.assertRaises(KeyBlockedError):
            adapter.list_languages()
        with self.assertRaises(KeyBlockedError):
            adapter.lookup_raw("en-ru", "rust")
        self.assertEqual(len(adapter.calls), 2)
