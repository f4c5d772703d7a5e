"""Provider configuration and conversion options."""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field

from letta_provider.core.interface.events import ALL_MESSAGE_TYPES, MessageType

CLOUD_BASE_URL = "https://api.letta.com"
LOCAL_BASE_URL = "http://localhost:8283"

ENV_API_KEY = "LETTA_API_KEY"
ENV_BASE_URL = "LETTA_BASE_URL"


class LettaConfig(BaseModel):
    """Connection settings for a Letta server.

    Use :meth:`from_env` to pick up ``LETTA_API_KEY`` and ``LETTA_BASE_URL``;
    explicit values always win over the environment.
    """

    token: str | None = None
    base_url: str = CLOUD_BASE_URL
    timeout: float = 60.0
    headers: dict[str, str] = Field(default_factory=lambda: dict[str, str]())

    @classmethod
    def from_env(cls, **overrides: Any) -> LettaConfig:
        """Build a config from the environment, then apply non-empty *overrides*."""
        values: dict[str, Any] = {
            "token": os.environ.get(ENV_API_KEY) or None,
            "base_url": os.environ.get(ENV_BASE_URL) or CLOUD_BASE_URL,
        }
        values.update({k: v for k, v in overrides.items() if v})
        return cls(**values)


class ConvertOptions(BaseModel):
    """Options for converting platform events into UI messages."""

    allow_message_types: frozenset[MessageType] = ALL_MESSAGE_TYPES
