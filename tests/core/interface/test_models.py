"""Tests for the UI message and outbound request models."""

import pytest
from pydantic import ValidationError

from letta_provider.core.interface.models import (
    FileUIPart,
    MessageCreate,
    PromptMessage,
    ReasoningUIPart,
    TextUIPart,
    ToolUIPart,
    UIMessage,
)


class TestUIParts:
    def test_text_part(self) -> None:
        part = TextUIPart(text="hello")
        assert part.type == "text"

    def test_file_part_serializes_camel_case(self) -> None:
        part = FileUIPart(url="https://example.com/x.png", media_type="image/*")
        assert part.model_dump(by_alias=True) == {
            "type": "file",
            "url": "https://example.com/x.png",
            "mediaType": "image/*",
        }

    def test_reasoning_keeps_none_metadata(self) -> None:
        part = ReasoningUIPart(text="t", provider_metadata={"letta": {"otid": None}})
        dumped = part.model_dump(by_alias=True)
        assert dumped["providerMetadata"] == {"letta": {"otid": None}}


class TestToolUIPart:
    def test_for_tool_builds_type(self) -> None:
        part = ToolUIPart.for_tool("web_search", tool_call_id="c1", state="output-available")
        assert part.type == "tool-web_search"
        assert part.tool_name == "web_search"

    def test_type_requires_prefix(self) -> None:
        with pytest.raises(ValidationError):
            ToolUIPart(type="search", tool_call_id="c1", state="output-available")

    def test_invalid_state(self) -> None:
        with pytest.raises(ValidationError):
            ToolUIPart.for_tool("x", tool_call_id="c1", state="input-streaming")

    def test_unset_fields_omitted(self) -> None:
        part = ToolUIPart.for_tool("x", tool_call_id="c1", state="output-available", input={}, output="")
        assert part.model_dump(by_alias=True) == {
            "type": "tool-x",
            "toolCallId": "c1",
            "state": "output-available",
            "input": {},
            "output": "",
        }

    def test_error_fields_serialized(self) -> None:
        part = ToolUIPart.for_tool(
            "x",
            tool_call_id="c1",
            state="output-error",
            output={"code": 7},
            error_text='{"code":7}',
            call_provider_metadata={"letta": {"stdout": None}},
        )
        dumped = part.model_dump(by_alias=True)
        assert dumped["errorText"] == '{"code":7}'
        assert dumped["callProviderMetadata"] == {"letta": {"stdout": None}}


class TestUIMessage:
    def test_text_property(self) -> None:
        message = UIMessage(
            id="m",
            role="assistant",
            parts=[
                TextUIPart(text="Hello "),
                ToolUIPart.for_tool("x", tool_call_id="c", state="output-available"),
                TextUIPart(text="world"),
            ],
        )
        assert message.text == "Hello world"

    def test_validate_from_json_dict(self) -> None:
        message = UIMessage.model_validate(
            {
                "id": "m",
                "role": "assistant",
                "parts": [
                    {"type": "text", "text": "hi"},
                    {"type": "tool-search", "toolCallId": "c", "state": "output-available"},
                ],
            }
        )
        assert isinstance(message.parts[0], TextUIPart)
        assert isinstance(message.parts[1], ToolUIPart)

    def test_invalid_role(self) -> None:
        with pytest.raises(ValidationError):
            UIMessage(id="m", role="tool")  # type: ignore[arg-type]


class TestPromptAndOutbound:
    def test_prompt_factories(self) -> None:
        assert PromptMessage.user("hi").content == [{"type": "text", "text": "hi"}]
        assert PromptMessage.system("rules").content == "rules"

    def test_message_create_role_restricted(self) -> None:
        with pytest.raises(ValidationError):
            MessageCreate(role="assistant", content="x")  # type: ignore[arg-type]
