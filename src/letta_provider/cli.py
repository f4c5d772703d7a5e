"""letta-provider CLI entrypoint."""

from __future__ import annotations

import logging

import click

from letta_provider import __version__


@click.group()
@click.version_option(version=__version__, prog_name="letta-provider")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """letta-provider: Letta agents as a chat model backend."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Register subcommands
from letta_provider.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
