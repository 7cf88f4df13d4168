"""Command: evaluate one incident against the configured laws."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click
from pydantic import ValidationError

from citectl.commands._base import CiteCommand

if TYPE_CHECKING:
    from citectl.commands._context import AppContext

_DATE = click.DateTime(formats=["%Y-%m-%d"])


@click.command(
    cls=CiteCommand,
    examples="""\
  citectl evaluate
  citectl evaluate --speed 50 --limit 35 --location "Santa Monica Blvd"
  citectl evaluate --name "Holly Gennero" --birth-date 1990-12-24 --today 2026-12-24
  citectl evaluate --issuer "Sgt. Al Powell" --speed 61 --limit 35""",
)
@click.option("--speed", type=int, default=50, show_default=True, help="Recorded incident speed.")
@click.option("--limit", type=int, default=35, show_default=True, help="Posted speed limit.")
@click.option(
    "--location",
    default="Santa Monica Blvd",
    show_default=True,
    help="Where the incident happened.",
)
@click.option("--name", default="John McClane", show_default=True, help="Citee name.")
@click.option(
    "--birth-date",
    type=_DATE,
    default="1988-01-01",
    show_default=True,
    help="Citee birth date (YYYY-MM-DD).",
)
@click.option("--issuer", default=None, help="Issuer name (default: [issuer] name from config).")
@click.option("--today", type=_DATE, default=None, help="Evaluate as of this date (YYYY-MM-DD).")
@click.pass_obj
def evaluate(
    app: AppContext,
    speed: int,
    limit: int,
    location: str,
    name: str,
    birth_date: datetime,
    issuer: str | None,
    today: datetime | None,
) -> None:
    """Evaluate a speeding incident and print any citations issued."""
    from citectl.domain.clock import FixedClock
    from citectl.domain.models import Entity, Incident

    try:
        entity = Entity(name=name, birth_date=birth_date.date())
    except ValidationError as exc:
        raise click.BadParameter(exc.errors()[0]["msg"], param_hint="--name") from exc
    incident = Incident(incident_speed=speed, speed_limit=limit, location=location)

    clock = FixedClock(today.date()) if today is not None else None
    app.emit(app.citation_service(clock).evaluate(incident, entity, issuer_name=issuer))
