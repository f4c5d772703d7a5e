"""Platform events: the Letta agent server's message records.

The server reports a conversation as a flat list of typed, timestamped
records. Several records may share one ``id`` when they are fragments of a
single logical turn (for example a reasoning step followed by a tool call).

Keys are accepted both in the REST API's snake_case form and in the
camelCase form used by the JavaScript client.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

MessageType = Literal[
    "system_message",
    "user_message",
    "assistant_message",
    "reasoning_message",
    "tool_call_message",
    "tool_return_message",
]

ALL_MESSAGE_TYPES: frozenset[MessageType] = frozenset(
    (
        "system_message",
        "user_message",
        "assistant_message",
        "reasoning_message",
        "tool_call_message",
        "tool_return_message",
    )
)

# Raw content: either a plain string or a list of typed fragments
# (``text``, ``image_url``, ``input_audio``). Fragments stay mappings so the
# content transform decides what is supported.
MessageContent = str | list[dict[str, Any]]


class _LettaModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LettaMessageBase(_LettaModel):
    """Fields shared by every platform event."""

    id: str
    date: datetime
    name: str | None = None
    otid: str | None = None
    sender_id: str | None = None
    step_id: str | None = None
    is_err: bool | None = None
    seq_id: int | None = None
    run_id: str | None = None


class SystemMessage(LettaMessageBase):
    message_type: Literal["system_message"] = "system_message"
    content: str


class UserMessage(LettaMessageBase):
    message_type: Literal["user_message"] = "user_message"
    content: MessageContent


class AssistantMessage(LettaMessageBase):
    message_type: Literal["assistant_message"] = "assistant_message"
    content: MessageContent


class ReasoningMessage(LettaMessageBase):
    """An internal reasoning step emitted by the agent."""

    message_type: Literal["reasoning_message"] = "reasoning_message"
    reasoning: str
    source: str | None = None


class ToolCall(_LettaModel):
    """The tool invocation carried by a :class:`ToolCallMessage`.

    ``arguments`` is whatever the server sent (usually a JSON string).
    """

    name: str | None = None
    tool_call_id: str | None = None
    arguments: Any = None


class ToolCallMessage(LettaMessageBase):
    message_type: Literal["tool_call_message"] = "tool_call_message"
    tool_call: ToolCall | None = None


class ToolReturnMessage(LettaMessageBase):
    """The result of a tool executed on the server."""

    message_type: Literal["tool_return_message"] = "tool_return_message"
    tool_return: Any = None
    status: str | None = None
    tool_call_id: str | None = None
    stdout: list[str] | None = None
    stderr: list[str] | None = None


LettaMessage = (
    SystemMessage
    | UserMessage
    | AssistantMessage
    | ReasoningMessage
    | ToolCallMessage
    | ToolReturnMessage
)

_MODELS: dict[str, type[LettaMessageBase]] = {
    "system_message": SystemMessage,
    "user_message": UserMessage,
    "assistant_message": AssistantMessage,
    "reasoning_message": ReasoningMessage,
    "tool_call_message": ToolCallMessage,
    "tool_return_message": ToolReturnMessage,
}


def _message_type_of(data: Mapping[str, Any]) -> Any:
    return data.get("message_type", data.get("messageType"))


def parse_event(data: Mapping[str, Any]) -> LettaMessage:
    """Validate one raw record into its platform event model.

    Raises:
        ValueError: if the record's ``message_type`` is not one of the six
            known kinds (pydantic's ``ValidationError`` for malformed fields).
    """
    message_type = _message_type_of(data)
    model = _MODELS.get(str(message_type))
    if model is None:
        msg = f"Unknown message type: {message_type}"
        raise ValueError(msg)
    event: LettaMessage = model.model_validate(data)  # type: ignore[assignment]
    return event


def parse_events(
    items: Iterable[Mapping[str, Any]], *, skip_unknown: bool = True
) -> list[LettaMessage]:
    """Validate a list of raw records, in order.

    The server also emits record kinds this package does not model (hidden
    reasoning, approval requests, ...). With *skip_unknown* those are dropped
    instead of failing the whole list.
    """
    events: list[LettaMessage] = []
    for item in items:
        if skip_unknown and str(_message_type_of(item)) not in _MODELS:
            logger.debug("Skipping unsupported message type %r", _message_type_of(item))
            continue
        events.append(parse_event(item))
    return events
