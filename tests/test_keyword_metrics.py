import sys
import unittest
from pathlib import Path

BACKEND_ROOT = Path(__file__).resolve().parents[1] / "backend"
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from keyword_metrics import (  # noqa: E402
    any_contains_keyword,
    contains_keyword,
    count_keyword,
    count_words,
    keyword_density,
    normalize_keyword,
)


class NormalizeKeywordTests(unittest.TestCase):
    def test_trims_and_lowercases(self):
        self.assertEqual(normalize_keyword("  SEO Tips \n"), "seo tips")

    def test_missing_keyword_is_empty(self):
        self.assertEqual(normalize_keyword(None), "")
        self.assertEqual(normalize_keyword("   "), "")


class CountWordsTests(unittest.TestCase):
    def test_empty_and_blank_text_has_no_words(self):
        self.assertEqual(count_words(""), 0)
        self.assertEqual(count_words(" \n\t "), 0)

    def test_splits_on_whitespace_runs(self):
        self.assertEqual(count_words("  one   two\n\nthree\tfour "), 4)


class CountKeywordTests(unittest.TestCase):
    def test_case_insensitive(self):
        self.assertEqual(count_keyword("SEO tips: seo, SeO and more", "seo"), 3)

    def test_matches_are_non_overlapping(self):
        self.assertEqual(count_keyword("aaaa", "aa"), 2)

    def test_regex_metacharacters_are_literal(self):
        self.assertEqual(count_keyword("Learn C++ today. c++ is fast. cpp is not.", "c++"), 2)
        self.assertEqual(count_keyword("nodeXjs node.js", "node.js"), 1)

    def test_empty_keyword_counts_nothing(self):
        self.assertEqual(count_keyword("anything at all", ""), 0)


class KeywordDensityTests(unittest.TestCase):
    def test_no_words_has_no_density(self):
        self.assertIsNone(keyword_density(2, 0))

    def test_rounds_to_two_decimals(self):
        self.assertEqual(keyword_density(3, 200), 1.5)
        self.assertEqual(keyword_density(1, 3), 33.33)


class ContainsKeywordTests(unittest.TestCase):
    def test_folds_case_of_text(self):
        self.assertTrue(contains_keyword("SEO Guide", "seo"))
        self.assertFalse(contains_keyword("Marketing Guide", "seo"))

    def test_unset_keyword_never_matches(self):
        self.assertFalse(contains_keyword("SEO Guide", ""))

    def test_any_heading(self):
        self.assertTrue(any_contains_keyword(["Intro", "Why SEO matters"], "seo"))
        self.assertFalse(any_contains_keyword(["Intro", "Outro"], "seo"))
        self.assertFalse(any_contains_keyword([], "seo"))


if __name__ == "__main__":
    unittest.main()
