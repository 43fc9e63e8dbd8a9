"""Log record model with dict round-trip helpers."""

from dataclasses import dataclass, field
from enum import Enum


class LogLevel(Enum):
    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    @classmethod
    def parse(cls, value) -> "LogLevel":
        """Accept a LogLevel or a level name in any case."""
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().upper()
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"unknown log level: {value!r}") from None


@dataclass(frozen=True)
class LogRecord:
    timestamp: int
    level: LogLevel
    origin_service: str
    message: str
    labels: frozenset = field(default_factory=frozenset)

    def __post_init__(self):
        if not self.origin_service:
            raise ValueError("origin_service must be a non-empty string")
        object.__setattr__(self, "level", LogLevel.parse(self.level))
        object.__setattr__(self, "labels", frozenset(self.labels))


def record_to_dict(record: LogRecord) -> dict:
    return {
        "timestamp": record.timestamp,
        "level": record.level.value,
        "originService": record.origin_service,
        "message": record.message,
        "labels": sorted(record.labels),
    }


def record_from_dict(data: dict) -> LogRecord:
    """Build a LogRecord from its wire form.

    A missing timestamp defaults to 0 (inbound payloads are re-stamped on
    acceptance) and missing labels default to the empty set.
    """
    return LogRecord(
        timestamp=int(data.get("timestamp", 0)),
        level=LogLevel.parse(data["level"]),
        origin_service=data["originService"],
        message=data["message"],
        labels=frozenset(data.get("labels") or ()),
    )
