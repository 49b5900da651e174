"""Heuristic translation of natural language queries into record filters.

Recognizers run in a fixed order and each may set one filter field. A later
match overwrites an earlier one, so "strings longer than N" wins over the
plain "longer than N" rule. A query nothing recognizes still translates, to
an empty filter.
"""
import re

from .exceptions import EmptyQuery
from .filters import StringRecordFilter

WORD_COUNT_PATTERN = re.compile(r"single word|one word")
LONGER_THAN_PATTERN = re.compile(r"longer than (\d+)")
STRINGS_LONGER_THAN_PATTERN = re.compile(r"strings longer than (\d+)")
CONTAINS_LETTER_PATTERN = re.compile(r"contain(?:ing|s)? the letter (\w)")


def _palindrome(query, parsed):
    if "palindrom" in query:
        parsed["is_palindrome"] = True


def _single_word(query, parsed):
    if WORD_COUNT_PATTERN.search(query):
        parsed["word_count"] = 1


def _longer_than(query, parsed):
    match = LONGER_THAN_PATTERN.search(query)
    if match:
        parsed["min_length"] = int(match.group(1))


def _strings_longer_than(query, parsed):
    match = STRINGS_LONGER_THAN_PATTERN.search(query)
    if match:
        parsed["min_length"] = int(match.group(1))


def _contains_letter(query, parsed):
    match = CONTAINS_LETTER_PATTERN.search(query)
    if match:
        parsed["contains_character"] = match.group(1)


def _first_vowel(query, parsed):
    # heuristic: "first vowel" always means 'a'
    if "first vowel" in query:
        parsed["contains_character"] = "a"


RECOGNIZERS = (
    _palindrome,
    _single_word,
    _longer_than,
    _strings_longer_than,
    _contains_letter,
    _first_vowel,
)


def translate_query(query) -> StringRecordFilter:
    if query is None or not query.strip():
        raise EmptyQuery()

    query_lower = query.lower()
    parsed = {}
    for recognizer in RECOGNIZERS:
        recognizer(query_lower, parsed)
    return StringRecordFilter(**parsed)
