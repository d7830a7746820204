"""Subcommand modules for needful.

Provides register_commands() which uses deferred imports to keep
``needful --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from needful.commands.check import check
    from needful.commands.describe import describe
    from needful.commands.lint import lint

    cli.add_command(describe)
    cli.add_command(check)
    cli.add_command(lint)
