"""Traffic laws — pluggable rules that decide whether and how to cite.

Every law implements the same two-step contract over
``(incident, entity)`` and the current date:

- ``should_cite()``: does this law fire?
- ``create_citation()``: build the citation; raises
  :class:`InvalidStateError` when the law would not fire.

``evaluate()`` merges both steps against one date and returns ``None``
when the law does not fire. The :class:`~citectl.domain.issuer.Issuer`
only ever calls ``evaluate()``.

Laws are stateless apart from the clock they are bound to. New laws are
added by subclassing :class:`Law` and calling :func:`register_law`, or by
returning instances from the ``register_laws`` plugin hook.
"""

from __future__ import annotations

import datetime
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from citectl.domain.errors import InvalidStateError, require
from citectl.domain.models import Citation, Entity, Incident, Severity

if TYPE_CHECKING:
    from citectl.domain.clock import Clock
    from citectl.domain.issuer import Issuer

# ---------------------------------------------------------------------------
# Speeding thresholds
# ---------------------------------------------------------------------------

BIRTHDAY_ALLOWANCE = 5


@dataclass(frozen=True)
class SpeedThresholds:
    """Exclusive lower bounds on the diff for each severity.

    A diff must be strictly greater than a bound to reach that bucket, so
    values sitting exactly on a bound fall into the lower bucket.
    """

    small_over: int = 0
    medium_over: int = 10
    large_over: int = 25

    def __post_init__(self) -> None:
        if not self.small_over <= self.medium_over <= self.large_over:
            msg = (
                "thresholds must be ascending: "
                f"small={self.small_over}, medium={self.medium_over}, large={self.large_over}"
            )
            raise ValueError(msg)


DEFAULT_THRESHOLDS = SpeedThresholds()


def calculate_severity(diff: int, thresholds: SpeedThresholds = DEFAULT_THRESHOLDS) -> Severity:
    """Classify an adjusted speed diff."""
    if diff > thresholds.large_over:
        return Severity.LARGE
    if diff > thresholds.medium_over:
        return Severity.MEDIUM
    if diff > thresholds.small_over:
        return Severity.SMALL
    return Severity.NONE


# ---------------------------------------------------------------------------
# Law contract
# ---------------------------------------------------------------------------


class Law(ABC):
    """Base class for all traffic laws.

    Subclasses set :attr:`name` and implement :meth:`calculate_severity`
    for a given evaluation date. The default :meth:`should_cite`,
    :meth:`create_citation` and :meth:`evaluate` derive from it, each
    reading the clock at most once.
    """

    name: ClassVar[str] = ""

    def __init__(self, clock: Clock) -> None:
        require(clock, "clock")
        self._clock = clock

    @property
    def clock(self) -> Clock:
        return self._clock

    @abstractmethod
    def calculate_severity(
        self, incident: Incident, entity: Entity, today: datetime.date
    ) -> Severity:
        """Return the severity this law assigns on *today*, ``Severity.NONE`` if none."""

    def should_cite(self, incident: Incident, entity: Entity) -> bool:
        today = self._clock.today()
        return self.calculate_severity(incident, entity, today) is not Severity.NONE

    def create_citation(self, incident: Incident, entity: Entity, issuer: Issuer) -> Citation:
        """Build the citation for a firing law.

        Raises:
            InvalidStateError: If the law does not fire for these inputs.
        """
        today = self._clock.today()
        severity = self.calculate_severity(incident, entity, today)
        if severity is Severity.NONE:
            msg = f"{self.name or type(self).__name__} does not apply to this incident"
            raise InvalidStateError(msg)
        return self._cite(incident, entity, issuer, today, severity)

    def evaluate(
        self,
        incident: Incident,
        entity: Entity,
        issuer: Issuer,
        *,
        today: datetime.date | None = None,
    ) -> Citation | None:
        """Return a citation, or None when the law does not fire.

        Severity and citation date come from one date: *today* when given,
        otherwise a single clock reading.
        """
        if today is None:
            today = self._clock.today()
        severity = self.calculate_severity(incident, entity, today)
        if severity is Severity.NONE:
            return None
        return self._cite(incident, entity, issuer, today, severity)

    def _cite(
        self,
        incident: Incident,
        entity: Entity,
        issuer: Issuer,
        today: datetime.date,
        severity: Severity,
    ) -> Citation:
        return Citation(
            date=today,
            issuer_name=issuer.name,
            citee=entity,
            severity=severity,
            law=self.name,
            location=incident.location,
        )

    def describe(self) -> dict[str, Any]:
        """Summary used by ``citectl laws``."""
        return {"name": self.name, "class": type(self).__name__}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(clock={self._clock!r})"


class SpeedingLaw(Law):
    """Cites drivers over the posted limit, with a birthday allowance."""

    name = "speeding"

    def __init__(
        self,
        clock: Clock,
        *,
        thresholds: SpeedThresholds = DEFAULT_THRESHOLDS,
        birthday_allowance: int = BIRTHDAY_ALLOWANCE,
    ) -> None:
        super().__init__(clock)
        self.thresholds = thresholds
        self.birthday_allowance = birthday_allowance

    def speed_diff(self, incident: Incident, entity: Entity, today: datetime.date) -> int:
        """Diff after the birthday allowance."""
        diff = incident.speed_over_limit
        if entity.has_birthday_on(today):
            diff -= self.birthday_allowance
        return diff

    def calculate_severity(
        self, incident: Incident, entity: Entity, today: datetime.date
    ) -> Severity:
        return calculate_severity(self.speed_diff(incident, entity, today), self.thresholds)

    def describe(self) -> dict[str, Any]:
        return {
            **super().describe(),
            "birthday_allowance": self.birthday_allowance,
            "small_over": self.thresholds.small_over,
            "medium_over": self.thresholds.medium_over,
            "large_over": self.thresholds.large_over,
        }


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

LAW_REGISTRY: dict[str, type[Law]] = {}

_BUILTIN_LAWS: dict[str, type[Law]] = {SpeedingLaw.name: SpeedingLaw}


def get_law(name: str) -> type[Law]:
    """Look up a registered law class by name.

    Raises:
        KeyError: If no law is registered under *name*.
    """
    if name in LAW_REGISTRY:
        return LAW_REGISTRY[name]
    msg = f"No law registered under {name!r}"
    raise KeyError(msg)


def register_law(name: str, law_cls: type[Law]) -> None:
    """Register a custom law class.

    Built-in names are reserved and cannot be overridden.
    """
    normalized_name = name.strip()
    if not normalized_name:
        msg = "Law name must not be empty"
        raise ValueError(msg)
    if not isinstance(law_cls, type) or not issubclass(law_cls, Law):
        msg = f"Law {normalized_name!r} must subclass Law"
        raise TypeError(msg)
    if normalized_name in _BUILTIN_LAWS and _BUILTIN_LAWS[normalized_name] is not law_cls:
        msg = f"Built-in law {normalized_name!r} cannot be overridden"
        raise ValueError(msg)

    existing = LAW_REGISTRY.get(normalized_name)
    if existing is not None and existing is not law_cls:
        msg = f"Law {normalized_name!r} is already registered"
        raise ValueError(msg)

    LAW_REGISTRY[normalized_name] = law_cls


LAW_REGISTRY.update(_BUILTIN_LAWS)
