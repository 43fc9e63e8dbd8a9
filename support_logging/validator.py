"""Inbound payload checking and conversion to LogRecord."""

import json
import os
import threading
from collections import Counter

import jsonschema

from support_logging.models import LogRecord, record_from_dict

DEFAULT_SCHEMA_PATH = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "schemas", "log_record.json"
)


class InvalidPayload(ValueError):
    """The request body is not an acceptable log record."""

    def __init__(self, errors):
        super().__init__("; ".join(errors))
        self.errors = list(errors)


def _describe(error) -> str:
    location = "/".join(str(part) for part in error.absolute_path)
    return f"{location}: {error.message}" if location else error.message


class RecordValidator:
    """Checks POSTed payloads against the record schema and builds records.

    Counters are shared by every request thread and reported on /health.
    """

    def __init__(self, schema_path=DEFAULT_SCHEMA_PATH):
        with open(schema_path, "r") as f:
            self._validator = jsonschema.Draft202012Validator(json.load(f))

        self._lock = threading.Lock()
        self._accepted = 0
        self._rejected = 0
        self._error_types = Counter()

    def validate(self, payload):
        """Return (is_valid, messages) and update the counters."""
        errors = sorted(
            self._validator.iter_errors(payload),
            key=lambda e: [str(p) for p in e.path],
        )
        with self._lock:
            if not errors:
                self._accepted += 1
            else:
                self._rejected += 1
                self._error_types.update(e.validator for e in errors)
        return not errors, [_describe(e) for e in errors]

    def to_record(self, payload) -> LogRecord:
        """Validate payload and build the record it describes.

        Raises InvalidPayload with every schema violation found.
        """
        is_valid, errors = self.validate(payload)
        if not is_valid:
            raise InvalidPayload(errors)
        return record_from_dict(payload)

    def get_stats(self):
        with self._lock:
            return {
                "total": self._accepted + self._rejected,
                "valid": self._accepted,
                "invalid": self._rejected,
                "error_types": dict(self._error_types),
            }
