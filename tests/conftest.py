import pytest

from support_logging.config import Config
from support_logging.errors import StoreError
from support_logging.models import LogLevel, LogRecord
from support_logging.store import MemoryRecordStore
from support_logging.validator import RecordValidator
from support_logging.web import create_app


def make_record(timestamp=1000, level="INFO", origin="svc-a",
                message="test message", labels=()):
    """Helper to create a LogRecord for testing."""
    return LogRecord(
        timestamp=timestamp,
        level=LogLevel.parse(level),
        origin_service=origin,
        message=message,
        labels=frozenset(labels),
    )


def _offline():
    try:
        raise ConnectionError("store offline")
    except ConnectionError as e:
        raise StoreError("backend unreachable") from e


class FailingStore(MemoryRecordStore):
    """Store whose every operation fails like an unreachable backend."""

    async def insert(self, record):
        _offline()

    async def scan(self, predicate, limit=None):
        _offline()

    async def delete_where(self, predicate):
        _offline()

    async def count(self):
        _offline()


class BuggyStore(MemoryRecordStore):
    """Store with a defect that is not a backend failure."""

    async def scan(self, predicate, limit=None):
        raise AttributeError("scan bug")

    async def delete_where(self, predicate):
        raise AttributeError("delete bug")


class FakeClock:
    def __init__(self, start=1_700_000_000_000):
        self.now = start

    def __call__(self):
        return self.now


@pytest.fixture
def store():
    return MemoryRecordStore()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sample_payload():
    return {
        "level": "ERROR",
        "originService": "svc-x",
        "message": "disk full on /var",
        "labels": ["db", "storage"],
    }


@pytest.fixture
def config():
    return Config()


@pytest.fixture
def validator():
    return RecordValidator()


@pytest.fixture
def app(config, clock):
    """Create a Flask test app backed by an in-memory store."""
    application = create_app(config, store=MemoryRecordStore(), time_func=clock)
    application.config["TESTING"] = True
    yield application
    application.config["components"]["loop"].stop()


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()
