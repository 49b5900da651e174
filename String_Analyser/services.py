"""Operations the HTTP layer calls into.

Each takes the store handle explicitly and raises a
:class:`~String_Analyser.exceptions.StringAnalyzerError` subclass on failure.
"""
import logging

from .exceptions import InvalidInput
from .filters import FilterResult, StringRecordFilter, evaluate, paginate
from .natural_language import translate_query as _translate_query
from .store import StringStore

logger = logging.getLogger(__name__)


def create_string(store: StringStore, value):
    if not isinstance(value, str):
        raise InvalidInput()
    return store.create(value)


def get_string(store: StringStore, value: str):
    return store.get(value)


def list_strings(store: StringStore, spec: StringRecordFilter, offset: int = 0, limit: int = 100) -> FilterResult:
    matches = evaluate(store.list(), spec)
    logger.debug("Filter %s matched %s records", spec.as_dict(), len(matches))
    return paginate(matches, offset, limit)


def translate_query(text) -> StringRecordFilter:
    spec = _translate_query(text)
    logger.debug("Translated %r to %s", text, spec.as_dict())
    return spec


def delete_string(store: StringStore, value: str) -> None:
    store.delete(value)
