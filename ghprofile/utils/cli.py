"""Defines utilities for working with click."""

import textwrap

import click


def recursive_help(cmd: click.Command, parent: click.Context | None = None, indent: int = 0) -> str:
    ctx = click.core.Context(cmd, info_name=cmd.name, parent=parent)
    help_text = cmd.get_help(ctx)
    commands = getattr(cmd, "commands", {})
    for sub in commands.values():
        help_text += recursive_help(sub, ctx, indent + 2)
    return textwrap.indent(help_text, " " * indent)
