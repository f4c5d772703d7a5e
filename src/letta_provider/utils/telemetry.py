"""OpenTelemetry tracing helpers.

Provides a thin wrapper around the OpenTelemetry API so the rest of the
package can call ``get_tracer()`` without caring whether the SDK is
installed. Without a configured SDK the API hands out no-op tracers.

Usage::

    from letta_provider.utils.telemetry import get_tracer

    _tracer = get_tracer(__name__)

    with _tracer.start_as_current_span("convert.to_ui_messages") as span:
        span.set_attribute(ATTR_EVENT_COUNT, len(events))

To export spans, call :func:`configure_telemetry` once at startup
(requires the ``otel`` extra: ``pip install letta-ai-provider[otel]``).
"""

from __future__ import annotations

from typing import Any

from opentelemetry import trace

# ---------------------------------------------------------------------------
# Semantic attribute keys
# ---------------------------------------------------------------------------

ATTR_AGENT_ID = "letta.agent.id"
ATTR_BASE_URL = "letta.base_url"
ATTR_EVENT_COUNT = "letta.convert.event_count"
ATTR_MESSAGE_COUNT = "letta.convert.message_count"
ATTR_ALLOWED_TYPES = "letta.convert.allowed_types"
ATTR_FINISH_REASON = "letta.finish_reason"
ATTR_TOKENS_PROMPT = "letta.tokens.prompt"
ATTR_TOKENS_COMPLETION = "letta.tokens.completion"
ATTR_TOKENS_TOTAL = "letta.tokens.total"

_INSTRUMENTATION_NAME = "letta_provider"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Return a :class:`~opentelemetry.trace.Tracer` for *name*.

    If the OpenTelemetry SDK has not been configured the returned tracer
    is a no-op.
    """
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(*, service_name: str = "letta-provider", exporter: Any = None) -> None:
    """Install an SDK tracer provider (requires ``letta-ai-provider[otel]``).

    Spans go to *exporter*, any ``SpanExporter`` from the OpenTelemetry SDK,
    through a synchronous span processor. Without one they are printed as
    JSON to stdout.

    Raises
    ------
    ImportError
        If the ``opentelemetry-sdk`` package is not installed.
    """
    try:
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
        from opentelemetry.sdk.trace.export import ConsoleSpanExporter, SimpleSpanProcessor  # pyright: ignore[reportMissingImports,reportUnknownVariableType]
    except ImportError as exc:
        msg = (
            "opentelemetry-sdk is required for configure_telemetry(). "
            "Install it with: pip install letta-ai-provider[otel]"
        )
        raise ImportError(msg) from exc

    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))  # pyright: ignore[reportUnknownVariableType,reportUnknownMemberType]
    provider.add_span_processor(SimpleSpanProcessor(exporter or ConsoleSpanExporter()))  # pyright: ignore[reportUnknownMemberType]
    trace.set_tracer_provider(provider)  # pyright: ignore[reportUnknownArgumentType]
