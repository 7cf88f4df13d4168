"""Subcommand modules for citectl."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from citectl.commands.evaluate import evaluate
    from citectl.commands.laws import laws

    cli.add_command(evaluate)
    cli.add_command(laws)
