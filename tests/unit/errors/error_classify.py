"""Unit tests for bootstrap error formatting and classification."""

from __future__ import annotations

from inference_router.errors import (
    BootstrapError,
    ServerFailureError,
    BackendConnectionError,
    ArgumentValidationError,
    ResourceResolutionError,
    classify_error,
)


def test_messages_carry_category_prefix() -> None:
    assert str(ArgumentValidationError("bad")) == "Argument validation error: bad"
    assert str(ResourceResolutionError("none")) == "Tokenizer resolution error: none"
    assert str(BackendConnectionError("refused")) == "Backend failed: refused"
    assert str(ServerFailureError("bind")) == "WebServer error: bind"


def test_message_attribute_is_unprefixed() -> None:
    assert BackendConnectionError("refused").message == "refused"


def test_classify_error_known_categories() -> None:
    assert classify_error(ArgumentValidationError("x")) == "argument_validation"
    assert classify_error(ResourceResolutionError("x")) == "resource_resolution"
    assert classify_error(BackendConnectionError("x")) == "backend_connection"
    assert classify_error(ServerFailureError("x")) == "server_failure"
    assert classify_error(TimeoutError("deadline exceeded")) == "timeout"
    assert classify_error(ConnectionError("socket closed")) == "connection"
    assert classify_error(FileNotFoundError("gone")) == "missing_file"


def test_classify_error_defaults_to_unknown() -> None:
    assert classify_error(RuntimeError("boom")) == "unknown"


def test_all_bootstrap_errors_share_base() -> None:
    for cls in (ArgumentValidationError, ResourceResolutionError, BackendConnectionError, ServerFailureError):
        assert issubclass(cls, BootstrapError)
