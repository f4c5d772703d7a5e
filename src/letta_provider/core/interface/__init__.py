"""Message models, conversion and the Letta REST client."""

from letta_provider.core.interface.client import LettaClient, LettaResponse
from letta_provider.core.interface.config import ConvertOptions, LettaConfig
from letta_provider.core.interface.errors import (
    ConversionError,
    LettaAPIError,
    MissingAgentError,
    ModelParametersError,
    ProviderError,
    UnsupportedContentTypeError,
    UnsupportedRoleError,
)
from letta_provider.core.interface.events import (
    AssistantMessage,
    LettaMessage,
    ReasoningMessage,
    SystemMessage,
    ToolCallMessage,
    ToolReturnMessage,
    UserMessage,
    parse_event,
    parse_events,
)
from letta_provider.core.interface.models import (
    FileUIPart,
    MessageCreate,
    PromptMessage,
    ReasoningUIPart,
    TextContentPart,
    TextUIPart,
    ToolUIPart,
    UIMessage,
    UIPart,
)

__all__ = [
    "AssistantMessage",
    "ConversionError",
    "ConvertOptions",
    "FileUIPart",
    "LettaAPIError",
    "LettaClient",
    "LettaConfig",
    "LettaMessage",
    "LettaResponse",
    "MessageCreate",
    "MissingAgentError",
    "ModelParametersError",
    "PromptMessage",
    "ProviderError",
    "ReasoningMessage",
    "ReasoningUIPart",
    "SystemMessage",
    "TextContentPart",
    "TextUIPart",
    "ToolCallMessage",
    "ToolReturnMessage",
    "ToolUIPart",
    "UIMessage",
    "UIPart",
    "UnsupportedContentTypeError",
    "UnsupportedRoleError",
    "UserMessage",
    "parse_event",
    "parse_events",
]
