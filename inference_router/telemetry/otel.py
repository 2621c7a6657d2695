"""TracerProvider setup for OTLP export via OpenTelemetry."""

from __future__ import annotations

import socket
import logging
import uuid as _uuid

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter

logger = logging.getLogger(__name__)

_tracer_provider: TracerProvider | None = None


def _build_resource(service_name: str) -> Resource:
    return Resource.create(
        {
            "service.name": service_name,
            "host.name": socket.gethostname(),
            "service.instance.id": _uuid.uuid4().hex[:12],
        }
    )


def init_otel(endpoint: str, service_name: str) -> None:
    """Create and register the global TracerProvider. Idempotent."""
    global _tracer_provider  # noqa: PLW0603
    if _tracer_provider is not None:
        return

    exporter = OTLPSpanExporter(endpoint=endpoint)
    tp = TracerProvider(resource=_build_resource(service_name))
    tp.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(tp)
    _tracer_provider = tp

    logger.info("OTel initialized: traces=%s service=%s", endpoint, service_name)


def shutdown_otel() -> None:
    """Flush and shutdown the provider. Idempotent."""
    global _tracer_provider  # noqa: PLW0603
    if _tracer_provider is not None:
        _tracer_provider.force_flush()
        _tracer_provider.shutdown()
        _tracer_provider = None


__all__ = ["init_otel", "shutdown_otel"]
