"""Subcommand modules for wikinote.

Provides register_commands() which uses deferred imports to keep
``wikinote --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from wikinote.commands.parse import parse
    from wikinote.commands.render import render

    cli.add_command(parse)
    cli.add_command(render)
