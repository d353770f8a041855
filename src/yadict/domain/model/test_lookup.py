"""Unit tests for lookup domain models: Word, Definition, LookupResult."""

import unittest

from yadict.domain.model.lookup import Definition, LookupResult, Word


class TestWord(unittest.TestCase):
    """Tests for Word serialization."""

    def test_to_dict_omits_absent_fields(self):
        self.assertEqual(Word(text="ржавчина").to_dict(), {"text": "ржавчина"})

    def test_to_dict_uses_service_names(self):
        word = Word(text="rust", part_of_speech="noun", stress="rʌst")
        self.assertEqual(word.to_dict(), {"text": "rust", "pos": "noun", "ts": "rʌst"})

    def test_is_hashable(self):
        self.assertEqual(len({Word("a"), Word("a"), Word("b")}), 2)


class TestLookupResult(unittest.TestCase):
    """Tests for LookupResult sequence behavior."""

    def setUp(self):
        self.first = Definition(headword=Word("run", "verb"), translations=(Word("бежать"),))
        self.second = Definition(headword=Word("run", "noun"))
        self.result = LookupResult(definitions=(self.first, self.second))

    def test_sequence_protocol(self):
        self.assertEqual(len(self.result), 2)
        self.assertIs(self.result[1], self.second)
        self.assertEqual(list(self.result), [self.first, self.second])

    def test_is_empty(self):
        self.assertTrue(LookupResult().is_empty)
        self.assertFalse(self.result.is_empty)

    def test_to_dict(self):
        self.assertEqual(self.result.to_dict(), {"def": [
            {"text": "run", "pos": "verb", "tr": [{"text": "бежать"}]},
            {"text": "run", "pos": "noun", "tr": []},
        ]})
