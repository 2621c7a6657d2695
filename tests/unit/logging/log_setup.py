"""Unit tests for log formatting and the bootstrap stage field."""

from __future__ import annotations

import json
import logging

from inference_router.logging import JsonFormatter, log_stage, current_stage, install_log_context
from inference_router.telemetry import stage_span


def _record(message: str) -> logging.LogRecord:
    install_log_context()
    return logging.getLogger("inference_router.test").makeRecord(
        "inference_router.test", logging.INFO, __file__, 1, message, (), None
    )


def test_stage_defaults_to_dash() -> None:
    assert current_stage() == "-"
    assert _record("hello").stage == "-"


def test_log_stage_tags_records() -> None:
    with log_stage("tokenizer"):
        record = _record("hello")
    assert record.stage == "tokenizer"
    assert current_stage() == "-"


def test_stage_span_sets_log_stage() -> None:
    with stage_span("negotiate", backend="v3"):
        assert current_stage() == "negotiate"
    assert current_stage() == "-"


def test_json_formatter_one_object_per_line() -> None:
    with log_stage("validate"):
        record = _record("Maximum input tokens defaulted to 1024")
    line = JsonFormatter().format(record)
    payload = json.loads(line)
    assert "\n" not in line
    assert payload["level"] == "INFO"
    assert payload["target"] == "inference_router.test"
    assert payload["stage"] == "validate"
    assert payload["message"] == "Maximum input tokens defaulted to 1024"


def test_json_formatter_carries_error_category() -> None:
    record = _record("Backend failed: no shard")
    record.error_category = "backend_connection"
    payload = json.loads(JsonFormatter().format(record))
    assert payload["error_category"] == "backend_connection"
    assert "error_category" not in json.loads(JsonFormatter().format(_record("ok")))
