"""``letta-provider smoke``: one real round-trip against a Letta agent."""

from __future__ import annotations

import asyncio
import sys

import click

from letta_provider.cli_commands._output import console, print_ui_messages
from letta_provider.core.interface.config import LOCAL_BASE_URL
from letta_provider.core.interface.errors import ConversionError, ProviderError
from letta_provider.core.interface.models import PromptMessage
from letta_provider.provider import GenerateResult, LettaProvider, create_letta


@click.command()
@click.option("--agent-id", envvar="LETTA_AGENT_ID", required=True, help="Agent to talk to.")
@click.option("--base-url", default=None, help="Server URL (defaults to LETTA_BASE_URL or cloud).")
@click.option("--local", is_flag=True, help=f"Use a local server at {LOCAL_BASE_URL}.")
@click.option(
    "--prompt",
    "-p",
    default="Say hello in one short sentence.",
    show_default=True,
    help="User prompt to send.",
)
@click.option("--show-messages", is_flag=True, help="Print the converted UI messages.")
def smoke(
    agent_id: str,
    base_url: str | None,
    local: bool,
    prompt: str,
    show_messages: bool,
) -> None:
    """Send one prompt to a live agent and print the reply."""
    if base_url is None and local:
        base_url = LOCAL_BASE_URL
    provider = create_letta(base_url=base_url)
    console.print(f"Using agent: {agent_id} ({provider.client.config.base_url})")

    try:
        result = asyncio.run(_generate(provider, agent_id, prompt))
    except (ProviderError, ConversionError) as exc:
        console.print(f"[red]Smoke test failed:[/red] {exc}")
        sys.exit(1)

    console.print(f"[bold]Text:[/bold] {result.text}")
    if show_messages:
        print_ui_messages(result.messages)


async def _generate(provider: LettaProvider, agent_id: str, prompt: str) -> GenerateResult:
    async with provider.client:
        return await provider().generate(
            [PromptMessage.user(prompt)],
            provider_options={"letta": {"agent": {"id": agent_id}}},
        )
