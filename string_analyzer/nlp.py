import re

from string_analyzer.schemas import InterpretedQuery, StringFilters

_LONGER_THAN = re.compile(r"longer than (\d+)", re.ASCII)
_CONTAINING_LETTER = re.compile(r"containing the letter (\w)", re.ASCII)


def interpret_nl_query(query: str) -> InterpretedQuery:
    """Interpret a free-text query into structured filters.

    Rules run in a fixed order against the lower-cased query and a later rule
    overwrites an earlier one on the same field, so "containing the letter z"
    followed by "containing the first vowel" ends up filtering on "a".
    """
    q = query.lower()
    filters = StringFilters()

    if "palindromic" in q:
        filters.is_palindrome = True

    m = _LONGER_THAN.search(q)
    if m:
        try:
            filters.min_length = int(m.group(1)) + 1
        except ValueError:
            # number too long to convert, rule is skipped
            pass

    if "single word" in q or "one word" in q:
        filters.word_count = 1

    m = _CONTAINING_LETTER.search(q)
    if m:
        filters.contains_character = m.group(1)

    if "containing the first vowel" in q:
        # Heuristic carried over as-is: always the letter "a"
        filters.contains_character = "a"

    return InterpretedQuery(original=query, parsed_filters=filters.as_dict())

