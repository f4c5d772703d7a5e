"""Tests for LettaClient with mocked httpx."""

from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from letta_provider.core.interface.client import LettaClient
from letta_provider.core.interface.config import LettaConfig
from letta_provider.core.interface.errors import LettaAPIError
from letta_provider.core.interface.events import AssistantMessage, ReasoningMessage
from letta_provider.core.interface.models import MessageCreate, TextContentPart

BASE_URL = "http://letta.test"


def _history_json() -> list[dict[str, Any]]:
    return [
        {"id": "m-1", "date": "2025-01-01T00:00:00Z", "message_type": "user_message", "content": "hi"},
        {"id": "m-2", "date": "2025-01-01T00:00:01Z", "message_type": "reasoning_message", "reasoning": "greet"},
        {"id": "m-2", "date": "2025-01-01T00:00:02Z", "message_type": "hidden_reasoning_message"},
        {"id": "m-3", "date": "2025-01-01T00:00:03Z", "message_type": "assistant_message", "content": "hello"},
    ]


def _response_json() -> dict[str, Any]:
    return {
        "messages": [
            {"id": "r-1", "date": "2025-01-01T00:00:04Z", "message_type": "reasoning_message", "reasoning": "ok"},
            {"id": "r-2", "date": "2025-01-01T00:00:05Z", "message_type": "assistant_message", "content": "Hi!"},
        ],
        "usage": {"prompt_tokens": 10, "completion_tokens": 3, "total_tokens": 13},
        "stop_reason": {"message_type": "stop_reason", "stop_reason": "end_turn"},
    }


def _response(method: str, url: str, status: int = 200, **kwargs: Any) -> httpx.Response:
    return httpx.Response(status, request=httpx.Request(method, BASE_URL + url), **kwargs)


def _mock_httpx_client(*responses: httpx.Response) -> MagicMock:
    client = AsyncMock()
    client.request = AsyncMock(side_effect=list(responses))
    client.aclose = AsyncMock()
    return client


class TestLettaClientLifecycle:
    async def test_requires_context_manager(self) -> None:
        client = LettaClient(LettaConfig(base_url=BASE_URL))
        with pytest.raises(RuntimeError, match="async context manager"):
            await client.list_messages("agent-1")

    async def test_bearer_token_header(self) -> None:
        mock = _mock_httpx_client()
        config = LettaConfig(base_url=BASE_URL + "/", token="sk-test", headers={"X-Project": "demo"})
        with patch("letta_provider.core.interface.client.httpx.AsyncClient", return_value=mock) as cls:
            async with LettaClient(config):
                pass
        kwargs = cls.call_args.kwargs
        assert kwargs["base_url"] == BASE_URL
        assert kwargs["headers"] == {"X-Project": "demo", "Authorization": "Bearer sk-test"}
        mock.aclose.assert_awaited_once()

    async def test_no_token_no_header(self) -> None:
        mock = _mock_httpx_client()
        with patch("letta_provider.core.interface.client.httpx.AsyncClient", return_value=mock) as cls:
            async with LettaClient(LettaConfig(base_url=BASE_URL)):
                pass
        assert "Authorization" not in cls.call_args.kwargs["headers"]


class TestListMessages:
    async def test_parses_known_events(self) -> None:
        url = "/v1/agents/agent-1/messages"
        mock = _mock_httpx_client(_response("GET", url, json=_history_json()))
        with patch("letta_provider.core.interface.client.httpx.AsyncClient", return_value=mock):
            async with LettaClient(LettaConfig(base_url=BASE_URL)) as client:
                events = await client.list_messages("agent-1", limit=50)

        assert [e.id for e in events] == ["m-1", "m-2", "m-3"]
        assert isinstance(events[1], ReasoningMessage)
        mock.request.assert_awaited_once_with("GET", url, params={"limit": 50})

    async def test_http_status_error(self) -> None:
        url = "/v1/agents/missing/messages"
        mock = _mock_httpx_client(_response("GET", url, status=404, text="agent not found"))
        with patch("letta_provider.core.interface.client.httpx.AsyncClient", return_value=mock):
            async with LettaClient(LettaConfig(base_url=BASE_URL)) as client:
                with pytest.raises(LettaAPIError) as exc_info:
                    await client.list_messages("missing")

        assert exc_info.value.status_code == 404
        assert "agent not found" in str(exc_info.value)

    async def test_connection_error(self) -> None:
        mock = AsyncMock()
        mock.request = AsyncMock(side_effect=httpx.ConnectError("connection refused"))
        mock.aclose = AsyncMock()
        with patch("letta_provider.core.interface.client.httpx.AsyncClient", return_value=mock):
            async with LettaClient(LettaConfig(base_url=BASE_URL)) as client:
                with pytest.raises(LettaAPIError, match="connection refused"):
                    await client.list_messages("agent-1")


class TestCreateMessages:
    async def test_posts_payload_and_parses_response(self) -> None:
        url = "/v1/agents/agent-1/messages"
        mock = _mock_httpx_client(_response("POST", url, json=_response_json()))
        messages = [
            MessageCreate(role="system", content="Be brief."),
            MessageCreate(role="user", content=[TextContentPart(text="Hello")]),
        ]
        with patch("letta_provider.core.interface.client.httpx.AsyncClient", return_value=mock):
            async with LettaClient(LettaConfig(base_url=BASE_URL)) as client:
                response = await client.create_messages("agent-1", messages)

        mock.request.assert_awaited_once_with(
            "POST",
            url,
            json={
                "messages": [
                    {"role": "system", "content": "Be brief."},
                    {"role": "user", "content": [{"type": "text", "text": "Hello"}]},
                ]
            },
        )
        assert len(response.messages) == 2
        assert isinstance(response.messages[1], AssistantMessage)
        assert response.usage == {"prompt_tokens": 10, "completion_tokens": 3, "total_tokens": 13}
        assert response.stop_reason["stop_reason"] == "end_turn"


class TestMalformedResponses:
    async def test_non_json_body(self) -> None:
        url = "/v1/agents/agent-1/messages"
        mock = _mock_httpx_client(_response("POST", url, text="<html>oops</html>"))
        with patch("letta_provider.core.interface.client.httpx.AsyncClient", return_value=mock):
            async with LettaClient(LettaConfig(base_url=BASE_URL)) as client:
                with pytest.raises(LettaAPIError, match="invalid JSON") as exc_info:
                    await client.create_messages("agent-1", [MessageCreate(role="system", content="x")])

        assert exc_info.value.status_code == 200

    async def test_malformed_record(self) -> None:
        url = "/v1/agents/agent-1/messages"
        records = [{"id": "m-1", "message_type": "user_message", "content": "no date"}]
        mock = _mock_httpx_client(_response("GET", url, json=records))
        with patch("letta_provider.core.interface.client.httpx.AsyncClient", return_value=mock):
            async with LettaClient(LettaConfig(base_url=BASE_URL)) as client:
                with pytest.raises(LettaAPIError, match="malformed message record"):
                    await client.list_messages("agent-1")

    async def test_create_response_not_an_object(self) -> None:
        url = "/v1/agents/agent-1/messages"
        mock = _mock_httpx_client(_response("POST", url, json=[]))
        with patch("letta_provider.core.interface.client.httpx.AsyncClient", return_value=mock):
            async with LettaClient(LettaConfig(base_url=BASE_URL)) as client:
                with pytest.raises(LettaAPIError, match="expected a JSON object"):
                    await client.create_messages("agent-1", [MessageCreate(role="system", content="x")])
