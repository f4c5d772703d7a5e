"""LettaClient: minimal async access to the Letta REST API.

Only the two calls the provider needs: reading an agent's message history
and submitting new messages (non-streaming).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import httpx
from pydantic import BaseModel

from letta_provider.core.interface.config import LettaConfig
from letta_provider.core.interface.errors import LettaAPIError
from letta_provider.core.interface.events import LettaMessage, parse_events
from letta_provider.core.interface.models import MessageCreate
from letta_provider.utils.telemetry import ATTR_AGENT_ID, ATTR_BASE_URL, get_tracer

logger = logging.getLogger(__name__)

_tracer = get_tracer(__name__)


class LettaResponse(BaseModel):
    """Result of a message-creation request."""

    messages: list[LettaMessage] = []
    usage: dict[str, Any] | None = None
    stop_reason: Any = None


class LettaClient:
    """Async client for one Letta server.

    Usage::

        async with LettaClient(LettaConfig.from_env()) as client:
            history = await client.list_messages("agent-123")
    """

    def __init__(self, config: LettaConfig | None = None) -> None:
        self.config = config or LettaConfig.from_env()
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> LettaClient:
        headers = dict(self.config.headers)
        if self.config.token:
            headers["Authorization"] = f"Bearer {self.config.token}"
        self._client = httpx.AsyncClient(
            base_url=self.config.base_url.rstrip("/"),
            headers=headers,
            timeout=self.config.timeout,
        )
        return self

    async def __aexit__(self, *_: object) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    def _http(self) -> httpx.AsyncClient:
        if self._client is None:
            msg = "LettaClient must be used as an async context manager"
            raise RuntimeError(msg)
        return self._client

    async def list_messages(self, agent_id: str, *, limit: int | None = None) -> list[LettaMessage]:
        """GET an agent's message history as platform events."""
        params: dict[str, Any] = {}
        if limit is not None:
            params["limit"] = limit

        with _tracer.start_as_current_span("letta.list_messages") as span:
            span.set_attribute(ATTR_AGENT_ID, agent_id)
            span.set_attribute(ATTR_BASE_URL, self.config.base_url)
            logger.debug("Listing messages for agent %s", agent_id)
            data = await self._request("GET", f"/v1/agents/{agent_id}/messages", params=params)

        items: list[dict[str, Any]] = data if isinstance(data, list) else data.get("messages", [])
        return _parse(items)

    async def create_messages(
        self, agent_id: str, messages: Sequence[MessageCreate]
    ) -> LettaResponse:
        """POST new input messages to an agent and wait for its response."""
        payload = {"messages": [m.model_dump(mode="json") for m in messages]}

        with _tracer.start_as_current_span("letta.create_messages") as span:
            span.set_attribute(ATTR_AGENT_ID, agent_id)
            span.set_attribute(ATTR_BASE_URL, self.config.base_url)
            logger.debug("Sending %d message(s) to agent %s", len(messages), agent_id)
            data = await self._request("POST", f"/v1/agents/{agent_id}/messages", json=payload)

        if not isinstance(data, dict):
            msg = f"expected a JSON object, got {type(data).__name__}"
            raise LettaAPIError(msg)
        return LettaResponse(
            messages=_parse(data.get("messages", [])),
            usage=data.get("usage"),
            stop_reason=data.get("stop_reason"),
        )

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            response = await self._http().request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise LettaAPIError(exc.response.text, exc.response.status_code) from exc
        except httpx.HTTPError as exc:
            raise LettaAPIError(str(exc)) from exc

        try:
            return response.json()
        except ValueError as exc:
            raise LettaAPIError(f"invalid JSON response: {exc}", response.status_code) from exc


def _parse(items: list[dict[str, Any]]) -> list[LettaMessage]:
    try:
        return parse_events(items)
    except ValueError as exc:
        raise LettaAPIError(f"malformed message record: {exc}") from exc
