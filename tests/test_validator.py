import threading

import pytest

from support_logging.models import LogLevel
from support_logging.validator import InvalidPayload


class TestRecordValidator:
    def test_valid_payload(self, validator, sample_payload):
        is_valid, errors = validator.validate(sample_payload)
        assert is_valid is True
        assert errors == []

    def test_labels_optional(self, validator):
        is_valid, _ = validator.validate({"level": "INFO", "originService": "s", "message": ""})
        assert is_valid is True

    def test_client_timestamp_allowed(self, validator, sample_payload):
        sample_payload["timestamp"] = 12345
        is_valid, _ = validator.validate(sample_payload)
        assert is_valid is True

    def test_missing_required_fields(self, validator):
        is_valid, errors = validator.validate({"message": "hello"})
        assert is_valid is False
        error_text = " ".join(errors)
        assert "level" in error_text or "originService" in error_text

    def test_invalid_level(self, validator, sample_payload):
        sample_payload["level"] = "WARNING"
        is_valid, errors = validator.validate(sample_payload)
        assert is_valid is False
        assert len(errors) > 0

    def test_empty_origin_rejected(self, validator, sample_payload):
        sample_payload["originService"] = ""
        is_valid, _ = validator.validate(sample_payload)
        assert is_valid is False

    def test_non_string_label_rejected(self, validator, sample_payload):
        sample_payload["labels"] = ["ok", 3]
        is_valid, _ = validator.validate(sample_payload)
        assert is_valid is False

    def test_additional_properties_rejected(self, validator, sample_payload):
        sample_payload["extra_field"] = "not allowed"
        is_valid, _ = validator.validate(sample_payload)
        assert is_valid is False

    def test_stats(self, validator, sample_payload):
        validator.validate(sample_payload)
        validator.validate({"message": "missing"})
        stats = validator.get_stats()
        assert stats["total"] == 2
        assert stats["valid"] == 1
        assert stats["invalid"] == 1
        assert stats["error_types"]["required"] >= 1

    def test_error_messages_name_the_field(self, validator, sample_payload):
        sample_payload["labels"] = ["ok", 3]
        _, errors = validator.validate(sample_payload)
        assert errors == ["labels/1: 3 is not of type 'string'"]

    def test_to_record_builds_log_record(self, validator, sample_payload):
        record = validator.to_record(sample_payload)
        assert record.level is LogLevel.ERROR
        assert record.origin_service == "svc-x"
        assert record.labels == frozenset({"db", "storage"})
        assert record.timestamp == 0

    def test_to_record_rejects_invalid(self, validator):
        with pytest.raises(InvalidPayload) as exc_info:
            validator.to_record({"level": "LOUD", "originService": "s", "message": "m"})
        assert len(exc_info.value.errors) == 1
        assert exc_info.value.errors[0].startswith("level: ")

    def test_stats_consistent_across_threads(self, validator, sample_payload):
        def hammer():
            for _ in range(200):
                validator.validate(sample_payload)
                validator.validate({"message": "missing"})

        threads = [threading.Thread(target=hammer) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        stats = validator.get_stats()
        assert stats["valid"] == 1600
        assert stats["invalid"] == 1600
        assert stats["total"] == 3200
