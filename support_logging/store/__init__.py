from support_logging.store.base import RecordStore
from support_logging.store.file import FileRecordStore
from support_logging.store.memory import MemoryRecordStore

__all__ = ["RecordStore", "FileRecordStore", "MemoryRecordStore"]
