"""In-memory record store."""

import asyncio

from support_logging.store.base import RecordStore


class MemoryRecordStore(RecordStore):
    """Insertion-ordered list guarded by an asyncio lock."""

    def __init__(self):
        self._records = []
        self._lock = asyncio.Lock()

    async def insert(self, record):
        async with self._lock:
            self._records.append(record)

    async def scan(self, predicate, limit=None):
        async with self._lock:
            result = []
            for record in self._records:
                if predicate(record):
                    result.append(record)
                    if limit is not None and len(result) >= limit:
                        break
            return result

    async def delete_where(self, predicate):
        async with self._lock:
            kept = [r for r in self._records if not predicate(r)]
            removed = len(self._records) - len(kept)
            self._records = kept
            return removed

    async def count(self):
        async with self._lock:
            return len(self._records)
