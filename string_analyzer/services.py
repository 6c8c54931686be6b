import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from string_analyzer.analyzer import compute_properties, fingerprint
from string_analyzer.exceptions import (
    StringAlreadyExistsError,
    StringNotFoundError,
    UnparseableQueryError,
)
from string_analyzer.filters import apply_filters, parse_query_filters, raw_filters_applied
from string_analyzer.nlp import interpret_nl_query
from string_analyzer.schemas import StringFilters, StringProperties, StringRecord
from string_analyzer.store import StringStore

logger = logging.getLogger("string_analyzer.services")


def create_string(value: str, store: StringStore) -> StringRecord:
    if not value.strip():
        raise ValueError("'value' must be a non-empty string")

    props = StringProperties(**compute_properties(value))
    record = StringRecord(
        id=props.sha256_hash,
        value=value,
        properties=props,
        created_at=datetime.now(timezone.utc),
    )

    if not store.add(record):
        logger.info("Rejected duplicate string %s", record.id)
        raise StringAlreadyExistsError("String already exists")

    logger.info("Stored string %s (length=%d)", record.id, props.length)
    return record


def get_string_by_value(string_value: str, store: StringStore) -> StringRecord:
    """Lookup record by hashing the exact provided string value."""
    record = store.get(fingerprint(string_value))
    if record is None:
        raise StringNotFoundError("String not found")
    return record


def delete_string_by_value(string_value: str, store: StringStore) -> None:
    string_hash = fingerprint(string_value)
    if not store.delete(string_hash):
        raise StringNotFoundError("String not found")
    logger.info("Deleted string %s", string_hash)


def get_all_strings_with_filters(
    store: StringStore,
    is_palindrome: Optional[str] = None,
    min_length: Optional[str] = None,
    max_length: Optional[str] = None,
    word_count: Optional[str] = None,
    contains_character: Optional[str] = None,
) -> Dict[str, Any]:
    raw = dict(
        is_palindrome=is_palindrome,
        min_length=min_length,
        max_length=max_length,
        word_count=word_count,
        contains_character=contains_character,
    )
    filters = parse_query_filters(**raw)
    records = apply_filters(store.values(), filters)
    return {
        "data": records,
        "count": len(records),
        "filters_applied": raw_filters_applied(**raw),
    }


def get_strings_by_natural_language(store: StringStore, query: Optional[str]) -> Dict[str, Any]:
    if query is None or not query.strip():
        raise UnparseableQueryError("Query is required")

    interpreted = interpret_nl_query(query)
    filters = StringFilters(**interpreted.parsed_filters)
    if filters.is_empty():
        logger.info("No filters derived from query %r", query)
        raise UnparseableQueryError("Unable to parse natural language query")

    records = apply_filters(store.values(), filters)
    return {
        "data": records,
        "count": len(records),
        "interpreted_query": interpreted,
    }
