from dataclasses import asdict, dataclass
from typing import Iterable, List, Mapping, Optional, Tuple

from django.conf import settings

from .exceptions import InvalidFilter
from .models import StringRecord
from .serializers import StringFilterQuerySerializer


@dataclass(frozen=True)
class StringRecordFilter:
    """Optional predicates over record properties, combined with AND.

    A field left as ``None`` does not filter.
    """
    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[int] = None
    contains_character: Optional[str] = None

    def as_dict(self) -> dict:
        return {key: value for key, value in asdict(self).items() if value is not None}

    def matches(self, record: StringRecord) -> bool:
        props = record.properties
        if self.is_palindrome is not None and props.is_palindrome != self.is_palindrome:
            return False
        if self.min_length is not None and props.length < self.min_length:
            return False
        if self.max_length is not None and props.length > self.max_length:
            return False
        if self.word_count is not None and props.word_count != self.word_count:
            return False
        if (self.contains_character is not None
                and self.contains_character not in props.character_frequency_map):
            return False
        return True


@dataclass(frozen=True)
class FilterResult:
    page: List[StringRecord]
    total: int


FILTER_FIELDS = ('is_palindrome', 'min_length', 'max_length', 'word_count', 'contains_character')


def _validate(params: Mapping) -> dict:
    # QueryDict makes DRF treat an absent BooleanField as False; use plain values
    data = params.dict() if hasattr(params, 'dict') else dict(params)
    serializer = StringFilterQuerySerializer(data=data)
    if not serializer.is_valid():
        name, errors = next(iter(serializer.errors.items()))
        raise InvalidFilter(f"{name}: {errors[0]}")
    return serializer.validated_data


def parse_filters(params: Mapping) -> StringRecordFilter:
    """Build a filter from raw query parameters; unknown keys are ignored."""
    validated = _validate(params)
    return StringRecordFilter(**{name: validated[name] for name in FILTER_FIELDS if name in validated})


def parse_page(params: Mapping) -> Tuple[int, int]:
    validated = _validate(params)
    offset = validated.get('offset', 0)
    limit = validated.get('limit', getattr(settings, 'STRING_LIST_DEFAULT_LIMIT', 100))
    return max(0, offset), max(0, limit)


def evaluate(records: Iterable[StringRecord], spec: StringRecordFilter) -> List[StringRecord]:
    return [record for record in records if spec.matches(record)]


def paginate(records: List[StringRecord], offset: int = 0, limit: int = 100) -> FilterResult:
    # list slicing clamps out-of-range bounds to an empty page
    return FilterResult(page=records[offset:offset + limit], total=len(records))
