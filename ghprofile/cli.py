"""Defines the top-level ghprofile CLI."""

import logging

import click
import colorlogging

from ghprofile.utils.cli import recursive_help
from ghprofile.web.cli.user import cli as user_cli


@click.group()
def cli() -> None:
    """Command line interface for reading a GitHub user profile."""
    colorlogging.configure()

    # Suppress per-request logging
    logging.getLogger("httpx").setLevel(logging.WARNING)


cli.add_command(user_cli, "user")

if __name__ == "__main__":
    # python -m ghprofile.cli
    print(recursive_help(cli))
