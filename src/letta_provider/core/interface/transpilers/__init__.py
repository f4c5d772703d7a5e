"""Message converters between the platform and the chat SDK."""

from letta_provider.core.interface.transpilers.content import to_text_content, to_ui_parts
from letta_provider.core.interface.transpilers.letta import convert_to_letta_messages
from letta_provider.core.interface.transpilers.ui import convert_to_ui_messages

__all__ = [
    "convert_to_letta_messages",
    "convert_to_ui_messages",
    "to_text_content",
    "to_ui_parts",
]
