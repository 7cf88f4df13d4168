"""Date sources.

Laws and issuers read "today" through a :class:`Clock` so severity
calculation stays deterministic. :class:`SystemClock` is the only place
that touches wall-clock time.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Supplies the current calendar date."""

    def today(self) -> date: ...


class SystemClock:
    """Clock backed by the local system date."""

    def today(self) -> date:
        return date.today()

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock:
    """Clock that always reports the same date."""

    def __init__(self, day: date) -> None:
        self._day = day

    def today(self) -> date:
        return self._day

    def __repr__(self) -> str:
        return f"FixedClock({self._day.isoformat()})"
