"""Shared CLI output formatters."""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.table import Table

from letta_provider.core.interface.models import (  # noqa: TC001
    FileUIPart,
    MessageCreate,
    ReasoningUIPart,
    TextUIPart,
    UIMessage,
    UIPart,
)

console = Console()


def print_ui_messages(messages: list[UIMessage], *, as_json: bool = False) -> None:
    """Pretty-print converted UI messages, one row per part."""
    if as_json:
        data = [m.model_dump(mode="json", by_alias=True) for m in messages]
        console.print_json(json.dumps(data))
        return

    table = Table(title="UI Messages")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Role", no_wrap=True)
    table.add_column("Part", no_wrap=True)
    table.add_column("Content")

    for message in messages:
        if not message.parts:
            table.add_row(message.id, message.role, "-", "")
        for index, part in enumerate(message.parts):
            table.add_row(
                message.id if index == 0 else "",
                message.role if index == 0 else "",
                part.type,
                _truncate(_describe(part)),
            )

    console.print(table)


def print_outbound_messages(messages: list[MessageCreate], *, as_json: bool = False) -> None:
    """Pretty-print outbound message payloads."""
    data: list[dict[str, Any]] = [m.model_dump(mode="json") for m in messages]
    if as_json:
        console.print_json(json.dumps(data))
        return

    table = Table(title="Outbound Messages")
    table.add_column("Role", style="cyan")
    table.add_column("Content")

    for item in data:
        content = item["content"]
        if isinstance(content, list):
            content = " ".join(str(p.get("text", "")) for p in content)
        table.add_row(item["role"], _truncate(str(content)))

    console.print(table)


def _describe(part: UIPart) -> str:
    if isinstance(part, TextUIPart | ReasoningUIPart):
        return part.text
    if isinstance(part, FileUIPart):
        return f"{part.media_type} {part.url}"
    if part.state == "output-error":
        return f"error: {part.error_text}"
    return f"input={part.input!r} output={part.output!r}"


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
