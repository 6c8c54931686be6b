from datetime import datetime, timezone

import pytest

from string_analyzer.analyzer import compute_properties
from string_analyzer.exceptions import InvalidFilterError
from string_analyzer.filters import apply_filters, matches_filters, parse_query_filters, raw_filters_applied
from string_analyzer.schemas import StringFilters, StringProperties, StringRecord


def make_record(value: str) -> StringRecord:
    props = StringProperties(**compute_properties(value))
    return StringRecord(id=props.sha256_hash, value=value, properties=props, created_at=datetime.now(timezone.utc))


class TestParseQueryFilters:
    def test_no_filters(self):
        assert parse_query_filters().is_empty()

    def test_all_filters(self):
        filters = parse_query_filters("true", "2", "10", "1", "a")
        assert filters.as_dict() == {
            "is_palindrome": True,
            "min_length": 2,
            "max_length": 10,
            "word_count": 1,
            "contains_character": "a",
        }

    def test_false_literal(self):
        assert parse_query_filters(is_palindrome="false").is_palindrome is False

    @pytest.mark.parametrize("raw", ["True", "yes", "1", ""])
    def test_invalid_boolean(self, raw):
        with pytest.raises(InvalidFilterError):
            parse_query_filters(is_palindrome=raw)

    @pytest.mark.parametrize("name", ["min_length", "max_length", "word_count"])
    @pytest.mark.parametrize("raw", ["abc", "1.5", "", "5_0"])
    def test_invalid_integers(self, name, raw):
        with pytest.raises(InvalidFilterError, match=name):
            parse_query_filters(**{name: raw})

    def test_negative_integer_accepted(self):
        assert parse_query_filters(min_length="-1").min_length == -1

    @pytest.mark.parametrize("raw", ["", "ab"])
    def test_invalid_contains_character(self, raw):
        with pytest.raises(InvalidFilterError):
            parse_query_filters(contains_character=raw)


def test_raw_filters_applied_keeps_provided_only():
    assert raw_filters_applied(min_length="5", max_length=None) == {"min_length": "5"}


class TestMatchesFilters:
    @pytest.fixture
    def sample_record(self):
        return make_record("hello world")

    def test_empty_filters_match(self, sample_record):
        assert matches_filters(sample_record, StringFilters()) is True

    def test_palindrome_filter(self, sample_record):
        assert matches_filters(make_record("racecar"), StringFilters(is_palindrome=True)) is True
        assert matches_filters(sample_record, StringFilters(is_palindrome=True)) is False

    def test_length_filters(self, sample_record):
        assert matches_filters(sample_record, StringFilters(min_length=11, max_length=11)) is True
        assert matches_filters(sample_record, StringFilters(min_length=12)) is False
        assert matches_filters(sample_record, StringFilters(max_length=10)) is False

    def test_word_count_filter(self, sample_record):
        assert matches_filters(sample_record, StringFilters(word_count=2)) is True
        assert matches_filters(sample_record, StringFilters(word_count=1)) is False

    def test_contains_character_is_case_sensitive(self, sample_record):
        assert matches_filters(sample_record, StringFilters(contains_character="h")) is True
        assert matches_filters(sample_record, StringFilters(contains_character="H")) is False
        assert matches_filters(sample_record, StringFilters(contains_character=" ")) is True


def test_apply_filters_keeps_order():
    records = [make_record(v) for v in ["hello", "abcde", "hi", "level"]]
    matched = apply_filters(records, StringFilters(min_length=5, max_length=5))
    assert [r.value for r in matched] == ["hello", "abcde", "level"]


def test_min_greater_than_max_matches_nothing():
    records = [make_record(v) for v in ["hello", "hi"]]
    assert apply_filters(records, StringFilters(min_length=10, max_length=2)) == []


def test_integer_too_long_to_convert():
    with pytest.raises(InvalidFilterError, match="min_length"):
        parse_query_filters(min_length="1" * 5000)
