"""``letta-provider convert``: run the message converters on JSON files."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import click

from letta_provider.cli_commands._output import (
    console,
    print_outbound_messages,
    print_ui_messages,
)
from letta_provider.core.interface.config import ConvertOptions
from letta_provider.core.interface.errors import ConversionError
from letta_provider.core.interface.events import ALL_MESSAGE_TYPES, parse_events
from letta_provider.core.interface.transpilers import (
    convert_to_letta_messages,
    convert_to_ui_messages,
)


@click.group()
def convert() -> None:
    """Convert between Letta messages and chat UI messages."""


@convert.command("ui")
@click.argument("events_file", type=click.Path(exists=True))
@click.option(
    "--allow",
    "allow",
    multiple=True,
    type=click.Choice(sorted(ALL_MESSAGE_TYPES)),
    help="Message type to include (repeatable). Defaults to all.",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def to_ui(events_file: str, allow: tuple[str, ...], as_json: bool) -> None:
    """Convert Letta messages to UI messages.

    EVENTS_FILE is a JSON array of Letta message records.
    """
    try:
        events = parse_events(_load_list(Path(events_file)))
        options = ConvertOptions(allow_message_types=frozenset(allow)) if allow else ConvertOptions()
        messages = convert_to_ui_messages(events, options)
    except (ValueError, ConversionError) as exc:
        console.print(f"[red]Conversion error:[/red] {exc}")
        sys.exit(1)

    print_ui_messages(messages, as_json=as_json)


@convert.command("letta")
@click.argument("prompt_file", type=click.Path(exists=True))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def to_letta(prompt_file: str, as_json: bool) -> None:
    """Convert a chat prompt to Letta message-creation payloads.

    PROMPT_FILE is a JSON array of ``{"role": ..., "content": ...}`` messages.
    """
    try:
        messages = convert_to_letta_messages(_load_list(Path(prompt_file)))
    except (ValueError, ConversionError) as exc:
        console.print(f"[red]Conversion error:[/red] {exc}")
        sys.exit(1)

    print_outbound_messages(messages, as_json=as_json)


def _load_list(path: Path) -> list[Any]:
    """Read a JSON array; json/pydantic errors surface as ``ValueError``."""
    data = json.loads(path.read_text())
    if not isinstance(data, list):
        msg = f"{path.name}: expected a JSON array"
        raise ValueError(msg)
    return data
