import logging
import re
from typing import Dict, Iterable, List, Optional

from string_analyzer.exceptions import InvalidFilterError
from string_analyzer.schemas import StringFilters, StringRecord

logger = logging.getLogger("string_analyzer.filters")

_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)
_BOOLEANS = {"true": True, "false": False}


def _parse_int(name: str, raw: str) -> int:
    text = raw.strip()
    if not _INTEGER.fullmatch(text):
        raise InvalidFilterError(f"{name} must be an integer")
    try:
        return int(text)
    except ValueError:
        # too many digits for int()
        raise InvalidFilterError(f"{name} must be an integer")


def parse_query_filters(
    is_palindrome: Optional[str] = None,
    min_length: Optional[str] = None,
    max_length: Optional[str] = None,
    word_count: Optional[str] = None,
    contains_character: Optional[str] = None,
) -> StringFilters:
    """Validate raw query-string values and build a typed filter set."""
    filters = StringFilters()

    if is_palindrome is not None:
        if is_palindrome not in _BOOLEANS:
            raise InvalidFilterError("is_palindrome must be 'true' or 'false'")
        filters.is_palindrome = _BOOLEANS[is_palindrome]

    if min_length is not None:
        filters.min_length = _parse_int("min_length", min_length)

    if max_length is not None:
        filters.max_length = _parse_int("max_length", max_length)

    if word_count is not None:
        filters.word_count = _parse_int("word_count", word_count)

    if contains_character is not None:
        if len(contains_character) != 1:
            raise InvalidFilterError("contains_character must be a single character")
        filters.contains_character = contains_character

    return filters


def raw_filters_applied(**raw: Optional[str]) -> Dict[str, str]:
    """Echo back only the filters the caller actually supplied, unconverted."""
    return {name: value for name, value in raw.items() if value is not None}


def matches_filters(record: StringRecord, filters: StringFilters) -> bool:
    props = record.properties

    if filters.is_palindrome is not None and props.is_palindrome != filters.is_palindrome:
        return False

    if filters.min_length is not None and props.length < filters.min_length:
        return False

    if filters.max_length is not None and props.length > filters.max_length:
        return False

    if filters.word_count is not None and props.word_count != filters.word_count:
        return False

    if filters.contains_character is not None and filters.contains_character not in record.value:
        return False

    return True


def apply_filters(records: Iterable[StringRecord], filters: StringFilters) -> List[StringRecord]:
    matched = [r for r in records if matches_filters(r, filters)]
    logger.debug("Filters %s matched %d record(s)", filters.as_dict(), len(matched))
    return matched
