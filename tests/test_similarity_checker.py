"""
Tests for Similarity Checker
============================
Tests name cleaning, Levenshtein distance and normalized similarity.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from similarity_checker import (
    clean_name,
    levenshtein_distance,
    normalized_similarity,
)


class TestCleanName:
    """Tests for name cleaning."""

    def test_lowercases_and_strips(self):
        assert clean_name("My Apple-Store!") == "myapplestore"

    def test_keeps_digits(self):
        assert clean_name("Web 3.0") == "web30"

    def test_non_ascii_letters_dropped(self):
        assert clean_name("Café") == "caf"

    def test_empty(self):
        assert clean_name("") == ""
        assert clean_name("!!!") == ""


class TestLevenshtein:
    """Tests for edit distance."""

    def test_identical(self):
        assert levenshtein_distance("apple", "apple") == 0

    def test_classic_example(self):
        assert levenshtein_distance("kitten", "sitting") == 3

    def test_empty_strings(self):
        assert levenshtein_distance("", "") == 0
        assert levenshtein_distance("abc", "") == 3
        assert levenshtein_distance("", "abcd") == 4

    def test_single_deletion(self):
        assert levenshtein_distance("apple", "aple") == 1


class TestNormalizedSimilarity:
    """Tests for normalized similarity."""

    def test_identity(self):
        """A string is always fully similar to itself."""
        for s in ["apple", "Voltix", "a", ""]:
            assert normalized_similarity(s, s) == 1.0

    def test_symmetry(self):
        pairs = [("apple", "aple"), ("kitten", "sitting"), ("nike", "mike"), ("", "abc")]
        for a, b in pairs:
            assert normalized_similarity(a, b) == normalized_similarity(b, a)

    def test_one_deletion_from_five(self):
        assert normalized_similarity("apple", "aple") == pytest.approx(0.8)

    def test_case_insensitive(self):
        assert normalized_similarity("APPLE", "apple") == 1.0

    def test_range(self):
        assert normalized_similarity("abc", "xyz") == 0.0
        assert 0.0 <= normalized_similarity("kitten", "sitting") <= 1.0

    def test_empty_vs_nonempty(self):
        assert normalized_similarity("", "abc") == 0.0
