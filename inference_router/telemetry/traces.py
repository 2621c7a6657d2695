"""Bootstrap stage spans.

Each bootstrap stage runs inside a span named ``router.bootstrap.<stage>`` and
a matching logging stage. Without a configured TracerProvider the OTel API
hands out no-op spans, so this is safe to use unconditionally.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from opentelemetry import trace
from opentelemetry.trace import Span, Status, StatusCode

from ..errors import classify_error
from ..logging.context import log_stage

_TRACER_NAME = "inference_router.bootstrap"


@contextmanager
def stage_span(stage: str, **attributes: object) -> Iterator[Span]:
    """Run a bootstrap stage inside a span and a logging stage context."""
    tracer = trace.get_tracer(_TRACER_NAME)
    with log_stage(stage), tracer.start_as_current_span(
        f"router.bootstrap.{stage}",
        record_exception=False,
        set_status_on_exception=False,
    ) as span:
        for key, value in attributes.items():
            if value is not None:
                span.set_attribute(key, str(value))
        try:
            yield span
        except Exception as exc:
            span.record_exception(exc)
            span.set_attribute("error.category", classify_error(exc))
            span.set_status(Status(StatusCode.ERROR, str(exc)))
            raise


__all__ = ["stage_span"]
