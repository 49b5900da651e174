"""Record types for analysed strings.

Records are kept in :class:`String_Analyser.store.StringStore` and persisted
through a :mod:`String_Analyser.persistence` strategy, not the ORM.
"""
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Mapping

from django.utils.dateparse import parse_datetime


@dataclass(frozen=True)
class StringProperties:
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self):
        # read-only view so stored properties cannot be changed in place
        object.__setattr__(
            self, 'character_frequency_map', MappingProxyType(dict(self.character_frequency_map)))

    def to_dict(self) -> dict:
        return {
            'length': self.length,
            'is_palindrome': self.is_palindrome,
            'unique_characters': self.unique_characters,
            'word_count': self.word_count,
            'sha256_hash': self.sha256_hash,
            'character_frequency_map': dict(self.character_frequency_map),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'StringProperties':
        return cls(
            length=int(data['length']),
            is_palindrome=bool(data['is_palindrome']),
            unique_characters=int(data['unique_characters']),
            word_count=int(data['word_count']),
            sha256_hash=data['sha256_hash'],
            character_frequency_map={
                str(char): int(count)
                for char, count in data.get('character_frequency_map', {}).items()
            },
        )


@dataclass(frozen=True)
class StringRecord:
    id: str
    value: str
    properties: StringProperties
    created_at: datetime

    def __str__(self):
        return f"{self.value} - {self.id[:50]}"

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'value': self.value,
            'properties': self.properties.to_dict(),
            'created_at': self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'StringRecord':
        created_at = parse_datetime(data['created_at'])
        if created_at is None:
            raise ValueError(f"Invalid created_at: {data['created_at']!r}")
        return cls(
            id=data['id'],
            value=data['value'],
            properties=StringProperties.from_dict(data['properties']),
            created_at=created_at,
        )
