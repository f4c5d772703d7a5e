"""UI message schema and outbound request shapes.

UI messages follow the chat SDK's rendering model: one role-tagged message
per logical turn, holding an ordered list of typed parts. Dump them with
``model_dump(by_alias=True)`` to get the SDK's camelCase JSON.
"""

from typing import Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    field_validator,
    model_serializer,
)
from pydantic.alias_generators import to_camel

TOOL_PART_PREFIX = "tool-"

Role = Literal["system", "user", "assistant"]
ToolState = Literal["output-available", "output-error"]


class _UIModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# UI Parts
# ---------------------------------------------------------------------------


class TextUIPart(_UIModel):
    """Plain text part."""

    type: Literal["text"] = "text"
    text: str


class FileUIPart(_UIModel):
    """File reference; ``media_type`` is a wildcard such as ``image/*``."""

    type: Literal["file"] = "file"
    url: str
    media_type: str


class ReasoningUIPart(_UIModel):
    """Reasoning text plus the full provenance record of its source event."""

    type: Literal["reasoning"] = "reasoning"
    text: str
    provider_metadata: dict[str, dict[str, Any]] = Field(
        default_factory=lambda: dict[str, dict[str, Any]]()
    )


class ToolUIPart(_UIModel):
    """A tool invocation or result.

    The part type is built from the tool name at runtime (``tool-<name>``),
    so consumers should match on the prefix rather than on fixed literals.
    """

    type: str
    tool_call_id: str
    state: ToolState
    input: Any = None
    output: Any = None
    error_text: str | None = None
    call_provider_metadata: dict[str, dict[str, Any]] | None = None

    @field_validator("type")
    @classmethod
    def _check_prefix(cls, value: str) -> str:
        if not value.startswith(TOOL_PART_PREFIX):
            msg = f"Tool part type must start with {TOOL_PART_PREFIX!r}: {value!r}"
            raise ValueError(msg)
        return value

    @model_serializer(mode="wrap")
    def _omit_unset(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data: dict[str, Any] = handler(self)
        if self.error_text is None:
            data.pop("errorText", None)
            data.pop("error_text", None)
        if self.call_provider_metadata is None:
            data.pop("callProviderMetadata", None)
            data.pop("call_provider_metadata", None)
        return data

    @classmethod
    def for_tool(cls, tool_name: str, **fields: Any) -> "ToolUIPart":
        """Create a part whose type is derived from *tool_name*."""
        return cls(type=f"{TOOL_PART_PREFIX}{tool_name}", **fields)

    @property
    def tool_name(self) -> str:
        return self.type[len(TOOL_PART_PREFIX) :]


UIPart = TextUIPart | FileUIPart | ReasoningUIPart | ToolUIPart


class UIMessage(_UIModel):
    """One role-tagged message rendered by the chat SDK."""

    id: str
    role: Role
    parts: list[UIPart] = []

    @property
    def text(self) -> str:
        """Concatenated text of all text parts."""
        return "".join(part.text for part in self.parts if isinstance(part, TextUIPart))


# ---------------------------------------------------------------------------
# Prompt (host SDK input) and outbound request (platform input)
# ---------------------------------------------------------------------------


class PromptMessage(BaseModel):
    """One message of the host SDK's prompt.

    ``content`` is a string, a list of typed part mappings, or (for system
    messages that were normalized upstream) any other value.
    """

    role: str
    content: Any = None

    @classmethod
    def user(cls, text: str) -> "PromptMessage":
        return cls(role="user", content=[{"type": "text", "text": text}])

    @classmethod
    def system(cls, text: str) -> "PromptMessage":
        return cls(role="system", content=text)


class TextContentPart(BaseModel):
    """The only fragment kind the platform accepts as new input."""

    type: Literal["text"] = "text"
    text: str


class MessageCreate(BaseModel):
    """A message submitted to the platform's message-creation endpoint.

    ``content`` is a plain string (system only) or a list of text fragments;
    system content that arrived already normalized is passed through as-is.
    """

    role: Literal["user", "system"]
    content: Any
