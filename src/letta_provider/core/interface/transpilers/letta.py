"""Outbound conversion: host SDK prompt to platform message-creation payload.

The platform runs the assistant and its tools itself, so only user and
system messages can be submitted as new input.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from letta_provider.core.interface.errors import UnsupportedRoleError
from letta_provider.core.interface.models import MessageCreate, PromptMessage
from letta_provider.core.interface.transpilers.content import to_text_content
from letta_provider.utils.telemetry import ATTR_MESSAGE_COUNT, get_tracer

_tracer = get_tracer(__name__)


def convert_to_letta_messages(
    prompt: Iterable[PromptMessage | Mapping[str, Any]],
) -> list[MessageCreate]:
    """Convert every prompt message into a :class:`MessageCreate`, in order.

    Raises:
        UnsupportedRoleError: for ``assistant``, ``tool`` or unknown roles.
        UnsupportedContentTypeError: for content parts other than text and
            ``tool-*`` parts.
    """
    with _tracer.start_as_current_span("convert.to_letta_messages") as span:
        result = [_convert_message(_as_prompt_message(message)) for message in prompt]
        span.set_attribute(ATTR_MESSAGE_COUNT, len(result))
        return result


def _convert_message(message: PromptMessage) -> MessageCreate:
    if message.role == "user":
        return MessageCreate(role="user", content=to_text_content(message.content))

    if message.role == "system":
        content = message.content
        if isinstance(content, str):
            return MessageCreate(role="system", content=content)
        if isinstance(content, list):
            return MessageCreate(role="system", content=to_text_content(content))
        return MessageCreate(role="system", content=content)

    if message.role == "assistant":
        raise UnsupportedRoleError("assistant", "assistant turns are managed by the agent")

    if message.role == "tool":
        raise UnsupportedRoleError("tool", "tool results are managed by the agent")

    raise UnsupportedRoleError(message.role)


def _as_prompt_message(message: PromptMessage | Mapping[str, Any]) -> PromptMessage:
    if isinstance(message, PromptMessage):
        return message
    return PromptMessage.model_validate(message)
