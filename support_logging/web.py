"""Flask transport for the logging service."""

import atexit
import logging

from flask import Flask, jsonify, request

from support_logging.config import Config
from support_logging.errors import ErrorKind
from support_logging.loop import EventLoopThread
from support_logging.models import record_to_dict
from support_logging.paths import PathError, parse_delete_path, parse_read_path
from support_logging.service import LoggingService
from support_logging.store import FileRecordStore, MemoryRecordStore
from support_logging.validator import InvalidPayload, RecordValidator

logger = logging.getLogger(__name__)

_STATUS_BY_KIND = {
    ErrorKind.LIMIT_EXCEEDED: 413,
    ErrorKind.SERVICE_FAULT: 503,
}


def build_store(storage_config: dict):
    backend = storage_config.get("backend", "memory")
    if backend == "memory":
        return MemoryRecordStore()
    if backend == "file":
        return FileRecordStore(storage_config["path"])
    raise ValueError(f"unknown storage backend: {backend!r}")


def _failure_response(failure):
    body = {"status": "error", "kind": failure.kind.value, "message": failure.message}
    return jsonify(body), _STATUS_BY_KIND[failure.kind]


def _client_error(message: str):
    return jsonify({"status": "error", "message": message}), 400


def create_app(config=None, store=None, time_func=None) -> Flask:
    """Flask application factory."""
    app = Flask(__name__)

    if config is None:
        config = Config.from_env()
    if store is None:
        store = build_store(config["storage"])

    service = LoggingService(
        store, max_limit=config["read"]["max_limit"], time_func=time_func
    )
    validator = RecordValidator()
    loop = EventLoopThread()
    loop.start()
    atexit.register(loop.stop)

    # Store components on app for access in tests
    app.config["components"] = {
        "config": config,
        "service": service,
        "validator": validator,
        "loop": loop,
    }

    @app.route("/health")
    def health():
        body = {
            "status": "healthy",
            "max_limit": service.max_limit,
            "validation_stats": validator.get_stats(),
        }
        result = loop.run(service.count())
        if not result.ok:
            body["status"] = "unavailable"
            body["message"] = result.failure.message
            return jsonify(body), 503
        body["stored_records"] = result.value
        return jsonify(body)

    @app.route("/api/v1/logs", methods=["POST"])
    def add_log_record():
        logger.debug("Receiving logging request...")
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            return _client_error("expected a JSON object")

        try:
            record = validator.to_record(payload)
        except InvalidPayload as e:
            return jsonify({"status": "invalid", "errors": e.errors}), 400

        result = loop.run(service.accept(record))
        if not result.ok:
            return _failure_response(result.failure)
        return jsonify(result.value), 202

    @app.route("/api/v1/logs/<path:route>", methods=["GET"])
    def search_log_records(route):
        try:
            criteria, limit = parse_read_path(route)
        except PathError as e:
            return _client_error(str(e))

        result = loop.run(service.search(criteria, limit))
        if not result.ok:
            return _failure_response(result.failure)
        return jsonify([record_to_dict(r) for r in result.value])

    @app.route("/api/v1/logs/<path:route>", methods=["DELETE"])
    def delete_log_records(route):
        try:
            criteria = parse_delete_path(route)
        except PathError as e:
            return _client_error(str(e))

        result = loop.run(service.remove_matching(criteria))
        if not result.ok:
            return _failure_response(result.failure)
        return jsonify(result.value)

    return app
