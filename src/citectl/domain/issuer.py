"""Issuer — runs every configured law against one incident."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from citectl.domain.errors import InvalidConfigurationError, require

if TYPE_CHECKING:
    import datetime

    from citectl.domain.clock import Clock
    from citectl.domain.laws import Law
    from citectl.domain.models import Citation, Entity, Incident


class Issuer:
    """An officer holding a fixed, ordered set of laws.

    The law sequence is frozen at construction. An empty sequence is
    valid and yields no citations for any incident. The clock mirrors
    the officer holding a calendar: each call to :meth:`issue_citations`
    reads it once and hands that date to every law.
    """

    def __init__(self, name: str, clock: Clock, laws: Iterable[Law]) -> None:
        require(name, "name")
        require(clock, "clock")
        require(laws, "laws")
        if not name.strip():
            msg = "name must not be empty"
            raise InvalidConfigurationError(msg)
        self._name = name
        self._clock = clock
        self._laws: tuple[Law, ...] = tuple(laws)

    @property
    def name(self) -> str:
        return self._name

    @property
    def clock(self) -> Clock:
        """The officer's calendar; it dates every citation from one evaluation."""
        return self._clock

    @property
    def laws(self) -> tuple[Law, ...]:
        return self._laws

    def issue_citations(
        self,
        incident: Incident,
        entity: Entity,
        *,
        today: datetime.date | None = None,
    ) -> list[Citation]:
        """Evaluate each law in order and collect the citations that fire.

        Every law sees the same date: *today* when given, otherwise one
        reading of the issuer's clock.
        """
        if today is None:
            today = self._clock.today()
        citations: list[Citation] = []
        for law in self._laws:
            citation = law.evaluate(incident, entity, self, today=today)
            if citation is not None:
                citations.append(citation)
        return citations

    def __repr__(self) -> str:
        return f"Issuer(name={self._name!r}, laws={len(self._laws)})"
