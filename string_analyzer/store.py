import threading
from typing import Dict, List, Optional

from string_analyzer.schemas import StringRecord


class StringStore:
    """In-memory record store keyed by fingerprint, in insertion order.

    Handlers run on a thread pool, so compound operations such as
    check-then-insert happen under a single lock.
    """

    def __init__(self) -> None:
        self._records: Dict[str, StringRecord] = {}
        self._lock = threading.RLock()

    def put(self, record: StringRecord) -> None:
        with self._lock:
            self._records[record.id] = record

    def add(self, record: StringRecord) -> bool:
        """Insert the record unless its id is already taken. Returns False on conflict."""
        with self._lock:
            if record.id in self._records:
                return False
            self._records[record.id] = record
            return True

    def get(self, fingerprint: str) -> Optional[StringRecord]:
        with self._lock:
            return self._records.get(fingerprint)

    def has(self, fingerprint: str) -> bool:
        with self._lock:
            return fingerprint in self._records

    def delete(self, fingerprint: str) -> bool:
        with self._lock:
            return self._records.pop(fingerprint, None) is not None

    def values(self) -> List[StringRecord]:
        with self._lock:
            return list(self._records.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
