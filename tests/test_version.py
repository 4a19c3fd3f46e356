"""Tests comparaison de versions — ordre, padding, composantes non numériques."""
import pytest

from update_php.core.version import (
    Comparison, VersionComparator, compare_versions, is_up_to_date, parse_version,
)


# ── parse_version ─────────────────────────────────────────────────────────────

def test_parse_simple():
    assert parse_version("7.2") == ["7", "2"]


def test_parse_arbitrary_arity():
    assert parse_version("5.6.40.1") == ["5", "6", "40", "1"]


def test_parse_empty_and_none():
    assert parse_version("") == ["0"]
    assert parse_version(None) == ["0"]


def test_parse_strips_leading_zeros():
    assert parse_version("07.010") == ["7", "10"]
    assert parse_version("000") == ["0"]


@pytest.mark.parametrize("value,expected", [
    ("7.x", ["7", "0"]),
    ("7..2", ["7", "0", "2"]),
    ("7.2.1-ubuntu", ["7", "2", "0"]),
    (" 7 . 2 ", ["7", "2"]),
    ("abc", ["0"]),
])
def test_parse_non_numeric_components_are_zero(value, expected):
    assert parse_version(value) == expected


# ── compare_versions ──────────────────────────────────────────────────────────

def test_compare_greater():
    assert compare_versions("7.2", "5.3") is Comparison.GREATER


def test_compare_equal():
    assert compare_versions("5.3", "5.3") is Comparison.EQUAL


def test_compare_less():
    assert compare_versions("5.3", "7.2") is Comparison.LESS


def test_compare_padding():
    assert compare_versions("5.3", "5.3.1") is Comparison.LESS
    assert compare_versions("5.3", "5.3.0") is Comparison.EQUAL
    assert compare_versions("5.3.0.0", "5.3") is Comparison.EQUAL


def test_compare_numeric_not_lexicographic():
    assert compare_versions("5.10", "5.9") is Comparison.GREATER
    assert compare_versions("10.0", "9.9") is Comparison.GREATER


def test_compare_first_difference_wins():
    assert compare_versions("7.0.99", "7.1") is Comparison.LESS


def test_compare_against_empty_minimum():
    assert compare_versions("5.2", "") is Comparison.GREATER
    assert compare_versions("0", "") is Comparison.EQUAL


def test_compare_non_numeric_never_raises():
    assert compare_versions("not-a-version", "5.3") is Comparison.LESS
    assert compare_versions("7.x", "7.0") is Comparison.EQUAL


def test_compare_leading_zeros():
    assert compare_versions("07.02", "7.2") is Comparison.EQUAL
    assert compare_versions("7.010", "7.9") is Comparison.GREATER


def test_compare_very_long_components_never_raise():
    huge = "9" * 5000
    assert compare_versions(huge, "5.3") is Comparison.GREATER
    assert compare_versions("5.3", huge) is Comparison.LESS
    assert compare_versions(huge, huge) is Comparison.EQUAL
    assert compare_versions("7." + huge, "7." + "8" * 5000) is Comparison.GREATER
    assert compare_versions("7." + "0" * 5000 + "1", "7.1") is Comparison.EQUAL


# ── is_up_to_date / VersionComparator ─────────────────────────────────────────

def test_is_up_to_date():
    assert is_up_to_date("7.2", "5.6")
    assert is_up_to_date("5.6", "5.6")
    assert not is_up_to_date("5.4", "5.6")


def test_comparator_delegates():
    comparator = VersionComparator()
    assert comparator.compare("7.1", "7.0") is Comparison.GREATER
    assert comparator.is_up_to_date("7.0", "7.0.0")
