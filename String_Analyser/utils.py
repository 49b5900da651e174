import hashlib
import re
from collections import Counter

from .models import StringProperties

_WHITESPACE = re.compile(r'\s+')


def compute_sha256(value: str) -> str:
    """Compute SHA-256 hash for the string."""
    # surrogatepass keeps any Python str hashable, lone surrogates included
    return hashlib.sha256(value.encode('utf-8', 'surrogatepass')).hexdigest()


def is_palindrome(value: str) -> bool:
    """Check if string reads the same forward and backward, ignoring case and whitespace."""
    normalized = _WHITESPACE.sub('', value.lower())
    return normalized == normalized[::-1]


def count_words(value: str) -> int:
    return len(value.split())


def character_frequency(value: str) -> dict:
    return dict(Counter(value))


def analyze_string(value: str) -> StringProperties:
    """Compute all required string properties.

    Counts are over code points of the raw value; only the palindrome
    check normalizes case and whitespace.
    """
    return StringProperties(
        length=len(value),
        is_palindrome=is_palindrome(value),
        unique_characters=len(set(value)),
        word_count=count_words(value),
        sha256_hash=compute_sha256(value),
        character_frequency_map=character_frequency(value),
    )
