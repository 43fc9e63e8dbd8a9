"""Record acceptance — stamps server time and persists."""

import dataclasses
import logging
import time

from support_logging.errors import ErrorKind, Result, StoreError
from support_logging.models import LogRecord
from support_logging.store.base import RecordStore

logger = logging.getLogger(__name__)


def _now_millis() -> int:
    return int(time.time() * 1000)


class IngestPath:
    def __init__(self, store: RecordStore, time_func=None) -> None:
        self.store = store
        self._time_func = time_func or _now_millis

    async def accept(self, record: LogRecord) -> Result:
        """Persist record with the current server time; the value is that time.

        Any timestamp the client supplied is discarded.
        """
        timestamp = self._time_func()
        stamped = dataclasses.replace(record, timestamp=timestamp)
        try:
            await self.store.insert(stamped)
        except StoreError as e:
            logger.error("Error adding log record: %s", e, exc_info=True)
            return Result.fail(ErrorKind.SERVICE_FAULT, "record store unavailable", e)

        logger.debug("Accepted record from %s at %d", stamped.origin_service, timestamp)
        return Result.success(timestamp)
