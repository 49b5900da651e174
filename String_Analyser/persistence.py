"""Persistence strategies for the string store.

Every strategy exposes the same two calls: ``load_all()`` once at startup
and ``save_all(records)`` after each successful mutation, always with the
full id -> record mapping.
"""
import json
import logging
from pathlib import Path
from typing import Dict

from django.conf import settings

from .models import StringRecord

logger = logging.getLogger(__name__)


class StringPersistence:
    def load_all(self) -> Dict[str, StringRecord]:
        raise NotImplementedError

    def save_all(self, records: Dict[str, StringRecord]) -> None:
        raise NotImplementedError


class JSONFilePersistence(StringPersistence):
    """Keep the whole store in one JSON file, rewritten on every save."""

    def __init__(self, path):
        self.path = Path(path)

    def load_all(self) -> Dict[str, StringRecord]:
        if not self.path.exists():
            logger.debug("No store file at %s, starting empty", self.path)
            return {}

        try:
            raw = json.loads(self.path.read_text(encoding='utf-8'))
            records = {
                record_id: StringRecord.from_dict(data)
                for record_id, data in raw.items()
            }
        except (OSError, ValueError, KeyError, TypeError, AttributeError):
            logger.exception("Could not read store file %s, starting empty", self.path)
            return {}

        logger.debug("Loaded %s records from %s", len(records), self.path)
        return records

    def save_all(self, records: Dict[str, StringRecord]) -> None:
        payload = {record_id: record.to_dict() for record_id, record in records.items()}
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(payload, indent=2), encoding='utf-8')
        logger.debug("Saved %s records to %s", len(records), self.path)


class InMemoryPersistence(StringPersistence):
    """Holds the last saved snapshot in memory. Nothing survives the process."""

    def __init__(self, records=None):
        self.saved = dict(records or {})
        self.save_count = 0

    def load_all(self) -> Dict[str, StringRecord]:
        return dict(self.saved)

    def save_all(self, records: Dict[str, StringRecord]) -> None:
        self.saved = dict(records)
        self.save_count += 1


def build_persistence() -> StringPersistence:
    backend = getattr(settings, 'STRING_STORE_BACKEND', 'json')
    if backend == 'memory':
        return InMemoryPersistence()
    if backend == 'json':
        return JSONFilePersistence(settings.STRING_STORE_PATH)
    raise ValueError(f"Unknown STRING_STORE_BACKEND: {backend!r}")
