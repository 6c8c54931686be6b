import re
from hashlib import sha256
from typing import Any, Dict

_WHITESPACE = re.compile(r"\s+")


def fingerprint(value: str) -> str:
    """SHA-256 hex digest of the exact string, used as both id and dedupe key."""
    return sha256(value.encode("utf-8")).hexdigest()


def normalize(value: str) -> str:
    """Lower-case and strip every whitespace character; only used for palindromes."""
    return _WHITESPACE.sub("", value.lower())


def count_words(value: str) -> int:
    stripped = value.strip()
    if not stripped:
        return 0
    return len(_WHITESPACE.split(stripped))


def compute_properties(value: str) -> Dict[str, Any]:
    cleaned = normalize(value)

    # dicts keep insertion order, so keys follow first occurrence
    freq: Dict[str, int] = {}
    for c in value:
        freq[c] = freq.get(c, 0) + 1

    return {
        "length": len(value),
        "is_palindrome": cleaned == cleaned[::-1],
        "unique_characters": len(freq),
        "word_count": count_words(value),
        "sha256_hash": fingerprint(value),
        "character_frequency_map": freq,
    }
