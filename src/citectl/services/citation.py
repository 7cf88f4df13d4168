"""CitationService — wires settings, laws, and plugins into an Issuer.

This is the composition root for the domain layer. It resolves the
enabled law names from config, appends laws contributed by plugins, and
exposes operations returning :class:`ServiceResult`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from citectl.domain.clock import Clock, SystemClock
from citectl.domain.errors import CitationError, UnknownLawError
from citectl.domain.issuer import Issuer
from citectl.domain.laws import Law, SpeedingLaw, SpeedThresholds, get_law
from citectl.services.result import ServiceResult

if TYPE_CHECKING:
    from citectl.config.settings import CiteSettings
    from citectl.domain.models import Citation, Entity, Incident
    from citectl.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


def citation_payload(citation: Citation) -> dict[str, Any]:
    """Serializable summary of a citation."""
    return {
        "law": citation.law,
        "severity": citation.severity.label,
        "date": citation.date.isoformat(),
        "issuer": citation.issuer_name,
        "citee": citation.citee.name,
        "location": citation.location,
    }


class CitationService:
    """Evaluate incidents against the configured laws.

    Args:
        settings: Resolved CLI/TOML/env settings.
        clock: Date source; defaults to :class:`SystemClock`.
        plugins: Optional plugin manager contributing extra laws.
    """

    def __init__(
        self,
        settings: CiteSettings,
        *,
        clock: Clock | None = None,
        plugins: PluginManager | None = None,
    ) -> None:
        self._settings = settings
        self._clock: Clock = clock or SystemClock()
        self._plugins = plugins

    @property
    def clock(self) -> Clock:
        return self._clock

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def _build_law(self, name: str) -> Law:
        try:
            law_cls = get_law(name)
        except KeyError as exc:
            msg = f"Unknown law {name!r}"
            raise UnknownLawError(msg) from exc
        if law_cls is SpeedingLaw:
            cfg = self._settings.speeding
            return SpeedingLaw(
                self._clock,
                thresholds=SpeedThresholds(
                    small_over=cfg.small_over,
                    medium_over=cfg.medium_over,
                    large_over=cfg.large_over,
                ),
                birthday_allowance=cfg.birthday_allowance,
            )
        return law_cls(self._clock)

    def build_laws(self) -> list[Law]:
        """Instantiate enabled laws in config order, then plugin laws."""
        laws = [self._build_law(name) for name in self._settings.laws.enabled]
        if self._plugins is not None:
            laws.extend(self._plugins.collect_laws(self._clock))
        return laws

    def build_issuer(self, name: str | None = None) -> Issuer:
        return Issuer(name or self._settings.issuer.name, self._clock, self.build_laws())

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def evaluate(
        self,
        incident: Incident,
        entity: Entity,
        *,
        issuer_name: str | None = None,
    ) -> ServiceResult:
        """Run every law against one incident and collect the citations.

        The clock is read once; that date drives every law and the result.
        """
        op = "evaluate"
        try:
            issuer = self.build_issuer(issuer_name)
            today = self._clock.today()
            citations = issuer.issue_citations(incident, entity, today=today)
        except CitationError as exc:
            logger.warning("Evaluation failed: %s", exc)
            return ServiceResult.from_error(op, exc)

        logger.debug(
            "Evaluated incident at %r for %s: %d law(s), %d citation(s)",
            incident.location,
            entity.name,
            len(issuer.laws),
            len(citations),
        )
        if self._plugins is not None:
            self._plugins.notify_evaluated(issuer.name, entity.name, len(citations))

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "issuer": issuer.name,
                "date": today.isoformat(),
                "citee": {"name": entity.name, "birth_date": entity.birth_date.isoformat()},
                "incident": incident.model_dump(),
                "count": len(citations),
                "citations": [citation_payload(c) for c in citations],
            },
        )

    def list_laws(self) -> ServiceResult:
        """Describe the laws an issuer would run, in evaluation order."""
        op = "list_laws"
        try:
            laws = self.build_laws()
        except CitationError as exc:
            return ServiceResult.from_error(op, exc)
        if not laws:
            return ServiceResult(
                ok=True,
                op=op,
                data={"count": 0, "items": []},
                warnings=["No laws enabled; every incident yields zero citations"],
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={"count": len(laws), "items": [law.describe() for law in laws]},
        )

