"""Language-model provider facade over a Letta agent.

A Letta agent owns its model, memory and tools, so the provider takes no
model parameters: the agent is picked per call through provider options::

    letta = create_letta()
    model = letta()
    async with letta.client:
        result = await model.generate(
            [PromptMessage.user("Hello")],
            provider_options={"letta": {"agent": {"id": "agent-123"}}},
        )
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, Field

from letta_provider.core.interface.client import LettaClient
from letta_provider.core.interface.config import LOCAL_BASE_URL, ConvertOptions, LettaConfig
from letta_provider.core.interface.errors import MissingAgentError, ModelParametersError
from letta_provider.core.interface.models import PromptMessage, UIMessage
from letta_provider.core.interface.transpilers import (
    convert_to_letta_messages,
    convert_to_ui_messages,
)
from letta_provider.utils.telemetry import (
    ATTR_AGENT_ID,
    ATTR_FINISH_REASON,
    ATTR_TOKENS_COMPLETION,
    ATTR_TOKENS_PROMPT,
    ATTR_TOKENS_TOTAL,
    get_tracer,
)

_tracer = get_tracer(__name__)


class ToolPlaceholder(BaseModel):
    """Stand-in for a tool the Letta server executes itself.

    It only carries a function schema so the chat SDK can list the tool.
    """

    name: str
    description: str | None = None
    input_schema: dict[str, Any] = Field(
        default_factory=lambda: {"type": "object", "properties": {}}
    )

    def to_schema(self) -> dict[str, Any]:
        """Return an OpenAI-compatible function schema."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description or self.name,
                "parameters": self.input_schema,
            },
        }


def tool(
    name: str,
    *,
    description: str | None = None,
    input_schema: dict[str, Any] | None = None,
) -> ToolPlaceholder:
    """Create a placeholder for a server-side Letta tool."""
    if input_schema is None:
        return ToolPlaceholder(name=name, description=description)
    return ToolPlaceholder(name=name, description=description, input_schema=input_schema)


class GenerateResult(BaseModel):
    """Outcome of one non-streaming generation."""

    text: str
    messages: list[UIMessage] = []
    usage: dict[str, Any] | None = None
    finish_reason: Any = None


class LettaChatModel:
    """Chat model backed by a Letta agent."""

    def __init__(self, client: LettaClient, options: ConvertOptions | None = None) -> None:
        self.client = client
        self.options = options or ConvertOptions()

    async def generate(
        self,
        prompt: Sequence[PromptMessage | Mapping[str, Any]],
        provider_options: Mapping[str, Any] | None = None,
    ) -> GenerateResult:
        """Send *prompt* to the agent named in *provider_options* and collect its reply.

        The client must already be open (``async with provider.client``).
        """
        agent_id = _agent_id(provider_options)
        with _tracer.start_as_current_span("model.generate") as span:
            span.set_attribute(ATTR_AGENT_ID, agent_id)

            messages = convert_to_letta_messages(prompt)
            response = await self.client.create_messages(agent_id, messages)
            ui_messages = convert_to_ui_messages(response.messages, self.options)

            usage = response.usage
            if isinstance(usage, dict):
                span.set_attribute(ATTR_TOKENS_PROMPT, int(usage.get("prompt_tokens") or 0))
                span.set_attribute(ATTR_TOKENS_COMPLETION, int(usage.get("completion_tokens") or 0))
                span.set_attribute(ATTR_TOKENS_TOTAL, int(usage.get("total_tokens") or 0))
            if response.stop_reason is not None:
                span.set_attribute(ATTR_FINISH_REASON, str(response.stop_reason))

            text = "".join(m.text for m in ui_messages if m.role == "assistant")
            return GenerateResult(
                text=text,
                messages=ui_messages,
                usage=usage,
                finish_reason=response.stop_reason,
            )


class LettaProvider:
    """Callable provider: ``provider()`` returns a :class:`LettaChatModel`."""

    def __init__(self, client: LettaClient) -> None:
        self.client = client

    def __call__(self, *args: Any, **kwargs: Any) -> LettaChatModel:
        if args or kwargs:
            raise ModelParametersError()
        return LettaChatModel(self.client)

    @staticmethod
    def tool(
        name: str,
        *,
        description: str | None = None,
        input_schema: dict[str, Any] | None = None,
    ) -> ToolPlaceholder:
        return tool(name, description=description, input_schema=input_schema)


def create_letta(config: LettaConfig | None = None, **overrides: Any) -> LettaProvider:
    """Create a provider; unset connection settings come from the environment."""
    if config is None:
        config = LettaConfig.from_env(**overrides)
    else:
        updates = {k: v for k, v in overrides.items() if v}
        if updates:
            config = config.model_copy(update=updates)
    return LettaProvider(LettaClient(config))


def letta_cloud() -> LettaProvider:
    """Provider for Letta Cloud (or ``LETTA_BASE_URL`` when set)."""
    return create_letta()


def letta_local() -> LettaProvider:
    """Provider for a Letta server on localhost."""
    return create_letta(base_url=LOCAL_BASE_URL)


def _agent_id(provider_options: Mapping[str, Any] | None) -> str:
    letta = (provider_options or {}).get("letta") or {}
    agent = letta.get("agent") or {}
    agent_id = agent.get("id")
    if not agent_id:
        raise MissingAgentError()
    return str(agent_id)
