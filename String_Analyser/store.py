import logging
import threading
from typing import Dict, List

from django.utils import timezone

from .exceptions import AlreadyExists, NotFound
from .models import StringRecord
from .persistence import StringPersistence
from .utils import analyze_string, compute_sha256

logger = logging.getLogger(__name__)


class StringStore:
    """
    Content-addressed mapping of sha256 id -> StringRecord.

    Built once from ``persistence.load_all()``; every successful create or
    delete writes the full mapping back through ``persistence.save_all()``
    while still holding the lock.
    """

    def __init__(self, persistence: StringPersistence):
        self.persistence = persistence
        self._lock = threading.RLock()
        self._records: Dict[str, StringRecord] = persistence.load_all()

    def __len__(self):
        with self._lock:
            return len(self._records)

    def __contains__(self, value):
        record_id = compute_sha256(value)
        with self._lock:
            return record_id in self._records

    def create(self, value: str) -> StringRecord:
        record_id = compute_sha256(value)
        with self._lock:
            if record_id in self._records:
                raise AlreadyExists()

            record = StringRecord(
                id=record_id,
                value=value,
                properties=analyze_string(value),
                created_at=timezone.now(),
            )
            self._records[record_id] = record
            self.persistence.save_all(self._records)

        logger.info("Stored string id=%s length=%s", record_id[:12], record.properties.length)
        return record

    def get(self, value: str) -> StringRecord:
        return self.get_by_id(compute_sha256(value))

    def get_by_id(self, record_id: str) -> StringRecord:
        with self._lock:
            try:
                return self._records[record_id]
            except KeyError:
                raise NotFound() from None

    def delete(self, value: str) -> None:
        record_id = compute_sha256(value)
        with self._lock:
            if record_id not in self._records:
                raise NotFound()
            del self._records[record_id]
            self.persistence.save_all(self._records)

        logger.info("Deleted string id=%s", record_id[:12])

    def list(self) -> List[StringRecord]:
        """All records in insertion order."""
        with self._lock:
            return list(self._records.values())
