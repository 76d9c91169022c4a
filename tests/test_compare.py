"""
Tests for uainspector.versioning.compare module.

Tests version ordering including:
- Ordinal comparison through the semver projection
- Canonicalized comparison with priority classes
- Missing component handling
- Rule constraint helpers and sort keys
"""

from __future__ import annotations

import pytest

from uainspector.versioning import (
    Ordering,
    PriorityClass,
    at_least,
    classify,
    compare,
    compare_canonicalized,
    get_comparator,
    version_key,
)

LESS, EQUAL, GREATER = Ordering.LESS, Ordering.EQUAL, Ordering.GREATER


class TestOrdinalCompare:
    """Tests for the ordinal strategy."""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ("1.0.0", "1.0.1", LESS),
            ("1.0.0", "1.0.0.4", LESS),
            ("1.0.0.0", "1.0.0.1", LESS),
            ("1.2.3", "1.02.03", EQUAL),
            ("1.2.3", "1.020.3", LESS),
            ("2", "1.9.9", GREATER),
            ("1.0.0.beta", "1.0.0.alpha", GREATER),
        ],
    )
    def test_compare(self, a, b, expected):
        """Test ordinal comparison results."""
        assert compare(a, b) is expected

    def test_tags_compare_as_text(self):
        """Test that pre-release tags are ordered as plain strings."""
        assert compare("1.0.0.10", "1.0.0.9") is LESS

    def test_missing_tag_equals_zero_tag(self):
        """Test that the synthetic tag equals an explicit '0' tag."""
        assert compare("1.0.0", "1.0.0.0") is EQUAL

    def test_empty_versions(self):
        """Test that empty versions project onto 0.0.0-0."""
        assert compare("", "") is EQUAL
        assert compare("", "0") is EQUAL
        assert compare("", "1") is LESS

    def test_unparseable_versions(self):
        """Test that unparseable versions order as zero."""
        assert compare("invalid", "0.0.0") is EQUAL
        assert compare("invalid", "0.0.1") is LESS


class TestCanonicalizedCompare:
    """Tests for the canonicalized strategy."""

    @pytest.mark.parametrize(
        "a, b",
        [
            ("1dev", "1alpha"),
            ("1alpha", "1beta"),
            ("1beta", "1rc"),
            ("1rc", "1"),
            ("1", "1patch"),
            ("1beta", "1patch"),
            ("1", "1.0"),
            ("", "1"),
            (".", "1"),
        ],
    )
    def test_less(self, a, b):
        """Test pairs where the first version is older."""
        assert compare_canonicalized(a, b) is LESS
        assert compare_canonicalized(b, a) is GREATER

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ("1.2-3+4.alpha5", "1.2-3+4.alpha1", GREATER),
            ("1.02-03alpha04-05+00", "1.02-03alpha04-05+99", LESS),
            ("1.02.03.04.05.06.alpha", "1.2.3.4.5.6alpha", EQUAL),
            ("", "", EQUAL),
            ("1", "", GREATER),
        ],
    )
    def test_reference_examples(self, a, b, expected):
        """Test results agreeing with PHP's version_compare."""
        assert compare_canonicalized(a, b) is expected

    def test_numeric_tokens_compare_by_value(self):
        """Test that numeric tokens are not compared as text."""
        assert compare_canonicalized("1.10", "1.9") is GREATER
        assert compare_canonicalized("1.010", "1.10") is EQUAL

    def test_same_class_tokens_are_equal(self):
        """Test that tokens of one class are not compared by their text."""
        assert compare_canonicalized("1alpha", "1a") is EQUAL
        assert compare_canonicalized("1x", "1y") is EQUAL

    def test_trailing_lower_class_token(self):
        """Test that a trailing pre-release token makes a version older."""
        assert compare_canonicalized("1.0", "1.0dev") is GREATER
        assert compare_canonicalized("1.0", "1.0pl1") is LESS

    def test_huge_numbers(self):
        """Test that very long digit runs compare without conversion."""
        big = "1" + "0" * 5000
        assert compare_canonicalized(big, "9") is GREATER
        assert compare_canonicalized(big, big) is EQUAL

    def test_ordering_is_int_compatible(self):
        """Test that results behave like -1/0/1."""
        assert compare_canonicalized("1", "2") == -1
        assert compare_canonicalized("2", "2") == 0
        assert compare_canonicalized("3", "2") == 1


class TestClassify:
    """Tests for priority classification of canonical tokens."""

    @pytest.mark.parametrize(
        "token, expected",
        [
            ("dev", PriorityClass.DEV),
            ("devel", PriorityClass.DEV),
            ("a", PriorityClass.ALPHA),
            ("alpha", PriorityClass.ALPHA),
            ("b", PriorityClass.BETA),
            ("beta", PriorityClass.BETA),
            ("rc", PriorityClass.RC),
            ("0", PriorityClass.NUMERIC),
            ("123", PriorityClass.NUMERIC),
            ("p", PriorityClass.PATCH),
            ("pl", PriorityClass.PATCH),
            ("patch", PriorityClass.PATCH),
            ("", PriorityClass.OTHER),
            (".", PriorityClass.OTHER),
            ("x", PriorityClass.OTHER),
            ("d", PriorityClass.OTHER),
            ("RC", PriorityClass.OTHER),
        ],
    )
    def test_classify(self, token, expected):
        """Test the priority class table."""
        assert classify(token) is expected

    def test_class_order(self):
        """Test that the classes are totally ordered."""
        assert (
            PriorityClass.OTHER
            < PriorityClass.DEV
            < PriorityClass.ALPHA
            < PriorityClass.BETA
            < PriorityClass.RC
            < PriorityClass.NUMERIC
            < PriorityClass.PATCH
        )


class TestHelpers:
    """Tests for at_least, version_key and get_comparator."""

    @pytest.mark.parametrize("strategy", ["ordinal", "canonicalized"])
    def test_rule_constraint_satisfied(self, strategy):
        """Test that a UA version 7.0.4 satisfies a rule minimum of 7.0."""
        assert at_least("7.0.4", "7.0", strategy=strategy)
        assert at_least("7.0", "7.0", strategy=strategy)
        assert not at_least("7.0", "7.0.4", strategy=strategy)

    def test_version_key_sorts(self):
        """Test that version keys can be used for sorting."""
        versions = ["1.0", "1.0rc1", "1.0beta", "0.9", "1.0pl1"]
        assert sorted(versions, key=version_key()) == [
            "0.9",
            "1.0beta",
            "1.0rc1",
            "1.0",
            "1.0pl1",
        ]

    def test_version_key_ordinal(self):
        """Test sorting with the ordinal strategy."""
        versions = ["1.2.0", "1.10.0", "1.9.0"]
        assert sorted(versions, key=version_key("ordinal")) == [
            "1.2.0",
            "1.9.0",
            "1.10.0",
        ]

    def test_get_comparator(self):
        """Test strategy lookup."""
        assert get_comparator("ordinal") is compare
        assert get_comparator("canonicalized") is compare_canonicalized

    def test_unknown_strategy_raises(self):
        """Test that unknown strategies are rejected."""
        with pytest.raises(ValueError, match="Unknown comparison strategy"):
            get_comparator("lexical")

    def test_ordering_symbol(self):
        """Test the printable form of orderings."""
        assert [o.symbol for o in Ordering] == ["<", "=", ">"]
