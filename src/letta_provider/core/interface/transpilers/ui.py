"""Inbound conversion: platform events to UI messages.

Events sharing an ``id`` are fragments of one logical turn and collapse
into a single :class:`UIMessage`. Messages keep the position where their id
first appeared; parts accumulate in event order. The message role is set by
the last event processed for the id: system/user/assistant events set it
directly, reasoning and tool events force ``assistant``.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from letta_provider.core.interface.config import ConvertOptions
from letta_provider.core.interface.events import (
    AssistantMessage,
    LettaMessage,
    LettaMessageBase,
    ReasoningMessage,
    SystemMessage,
    ToolCallMessage,
    ToolReturnMessage,
    UserMessage,
)
from letta_provider.core.interface.models import (
    ReasoningUIPart,
    Role,
    TextUIPart,
    ToolUIPart,
    UIMessage,
    UIPart,
)
from letta_provider.core.interface.transpilers.content import to_ui_parts
from letta_provider.utils.telemetry import (
    ATTR_ALLOWED_TYPES,
    ATTR_EVENT_COUNT,
    ATTR_MESSAGE_COUNT,
    get_tracer,
)

_tracer = get_tracer(__name__)

PROVIDER_KEY = "letta"


@dataclass
class _MessageBuilder:
    id: str
    role: Role = "assistant"
    parts: list[UIPart] = field(default_factory=lambda: list[UIPart]())

    def build(self) -> UIMessage:
        return UIMessage(id=self.id, role=self.role, parts=self.parts)


def convert_to_ui_messages(
    events: Iterable[LettaMessage],
    options: ConvertOptions | None = None,
) -> list[UIMessage]:
    """Group platform events into UI messages, one per distinct id.

    Events whose ``message_type`` is not in ``options.allow_message_types``
    are ignored entirely, so an id seen only in such events produces no
    message.

    Raises:
        UnsupportedContentTypeError: if a user or assistant event carries a
            content fragment of an unknown type. No partial result is returned.
    """
    options = options or ConvertOptions()
    allowed = options.allow_message_types

    with _tracer.start_as_current_span("convert.to_ui_messages") as span:
        span.set_attribute(ATTR_ALLOWED_TYPES, sorted(allowed))

        builders: dict[str, _MessageBuilder] = {}
        event_count = 0
        for event in events:
            if event.message_type not in allowed:
                continue
            event_count += 1
            builder = builders.get(event.id)
            if builder is None:
                builder = builders[event.id] = _MessageBuilder(id=event.id)
            _apply(builder, event)

        span.set_attribute(ATTR_EVENT_COUNT, event_count)
        span.set_attribute(ATTR_MESSAGE_COUNT, len(builders))
        return [builder.build() for builder in builders.values()]


def _apply(builder: _MessageBuilder, event: LettaMessage) -> None:
    """Fold one event into the message being built for its id."""
    if isinstance(event, SystemMessage):
        builder.role = "system"
        builder.parts.append(TextUIPart(text=event.content))
    elif isinstance(event, UserMessage):
        builder.role = "user"
        builder.parts.extend(to_ui_parts(event.content))
    elif isinstance(event, AssistantMessage):
        builder.role = "assistant"
        builder.parts.extend(to_ui_parts(event.content))
    elif isinstance(event, ReasoningMessage):
        builder.role = "assistant"
        builder.parts.append(_reasoning_part(event))
    elif isinstance(event, ToolCallMessage):
        builder.role = "assistant"
        builder.parts.append(_tool_call_part(event))
    else:
        builder.role = "assistant"
        builder.parts.append(_tool_return_part(event))


def _reasoning_part(event: ReasoningMessage) -> ReasoningUIPart:
    metadata = _provenance(event)
    metadata["reasoning"] = event.reasoning
    metadata["source"] = event.source
    return ReasoningUIPart(text=event.reasoning, provider_metadata={PROVIDER_KEY: metadata})


def _tool_call_part(event: ToolCallMessage) -> ToolUIPart:
    # A call carries no result yet; its output stays empty.
    call = event.tool_call
    name = call.name if call is not None and call.name else ""
    tool_call_id = call.tool_call_id if call is not None and call.tool_call_id else ""
    arguments = call.arguments if call is not None and call.arguments else {}
    return ToolUIPart.for_tool(
        name,
        tool_call_id=tool_call_id,
        state="output-available",
        input=arguments,
        output="",
    )


def _tool_return_part(event: ToolReturnMessage) -> ToolUIPart:
    is_error = event.status == "error"
    metadata = _provenance(event)
    metadata.update(
        {
            "toolReturn": event.tool_return,
            "status": event.status,
            "toolCallId": event.tool_call_id,
            "stdout": event.stdout,
            "stderr": event.stderr,
        }
    )
    return ToolUIPart.for_tool(
        event.name or "",
        tool_call_id=event.tool_call_id or "",
        state="output-error" if is_error else "output-available",
        input={},
        output=event.tool_return,
        error_text=_error_text(event.tool_return) if is_error else None,
        call_provider_metadata={PROVIDER_KEY: metadata},
    )


def _provenance(event: LettaMessageBase) -> dict[str, Any]:
    """Fixed-shape provenance record; absent fields are explicit ``None``."""
    return {
        "id": event.id,
        "date": format_date(event.date),
        "name": event.name,
        "messageType": getattr(event, "message_type", None),
        "otid": event.otid,
        "senderId": event.sender_id,
        "stepId": event.step_id,
        "isErr": event.is_err,
        "seqId": event.seq_id,
        "runId": event.run_id,
    }


def _error_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def format_date(value: datetime) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. ``2025-01-02T03:04:05.000Z``.

    Naive datetimes are taken to be UTC already.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
