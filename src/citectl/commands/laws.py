"""Command: list the laws an issuer runs, in evaluation order."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from citectl.commands._base import CiteCommand

if TYPE_CHECKING:
    from citectl.commands._context import AppContext


@click.command(
    cls=CiteCommand,
    examples="""\
  citectl laws
  citectl -v laws
  citectl --json laws""",
)
@click.pass_obj
def laws(app: AppContext) -> None:
    """List enabled laws, including those contributed by plugins."""
    app.emit(app.citation_service().list_laws())
