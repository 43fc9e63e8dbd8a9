"""NDJSON file record store using async file I/O."""

import asyncio
import json
import logging
import os

import aiofiles
import aiofiles.os

from support_logging.errors import StoreError
from support_logging.models import record_from_dict, record_to_dict
from support_logging.store.base import RecordStore

logger = logging.getLogger(__name__)


class FileRecordStore(RecordStore):
    """Persists one record per line in a single NDJSON file.

    Deletes rewrite the surviving lines into a temporary file that then
    replaces the original, so a crash mid-delete leaves the old file intact.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        self._tmp_path = path + ".tmp"
        self._lock = asyncio.Lock()
        directory = os.path.dirname(os.path.abspath(path))
        os.makedirs(directory, exist_ok=True)

    async def insert(self, record):
        line = json.dumps(record_to_dict(record), separators=(",", ":")) + "\n"
        async with self._lock:
            try:
                async with aiofiles.open(self.path, mode="a", encoding="utf-8") as f:
                    await f.write(line)
            except OSError as e:
                raise StoreError(f"failed to append to {self.path}") from e

    async def scan(self, predicate, limit=None):
        async with self._lock:
            result = []
            for record in await self._read_all():
                if predicate(record):
                    result.append(record)
                    if limit is not None and len(result) >= limit:
                        break
            return result

    async def delete_where(self, predicate):
        async with self._lock:
            records = await self._read_all()
            kept = [r for r in records if not predicate(r)]
            removed = len(records) - len(kept)
            if removed == 0:
                return 0

            try:
                async with aiofiles.open(self._tmp_path, mode="w", encoding="utf-8") as f:
                    for record in kept:
                        await f.write(
                            json.dumps(record_to_dict(record), separators=(",", ":")) + "\n"
                        )
                await aiofiles.os.replace(self._tmp_path, self.path)
            except OSError as e:
                raise StoreError(f"failed to rewrite {self.path}") from e

            logger.debug("Removed %d records from %s", removed, self.path)
            return removed

    async def count(self):
        async with self._lock:
            return len(await self._read_all())

    async def _read_all(self):
        """Decode every stored line. Caller must hold the lock."""
        if not await aiofiles.os.path.exists(self.path):
            return []

        records = []
        try:
            async with aiofiles.open(self.path, mode="r", encoding="utf-8") as f:
                line_no = 0
                async for line in f:
                    line_no += 1
                    line = line.strip()
                    if not line:
                        continue
                    try:
                        records.append(record_from_dict(json.loads(line)))
                    except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
                        raise StoreError(
                            f"corrupt record at {self.path}:{line_no}"
                        ) from e
        except OSError as e:
            raise StoreError(f"failed to read {self.path}") from e
        return records
