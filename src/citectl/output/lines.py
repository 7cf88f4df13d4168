"""Plain-text citation line.

Presentation only: nothing in the domain depends on this format.
"""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from citectl.domain.models import Citation, Severity

CITATION_LINE = "{issuer_name} issued {severity} citation to {citee_name} on {date}."


def format_citation_line(
    issuer_name: str,
    severity: Severity | str,
    citee_name: str,
    date: datetime.date | str,
) -> str:
    """Format the human-readable citation sentence."""
    label = severity if isinstance(severity, str) else severity.label
    day = date.isoformat() if isinstance(date, datetime.date) else date
    return CITATION_LINE.format(
        issuer_name=issuer_name,
        severity=label,
        citee_name=citee_name,
        date=day,
    )


def render_citation(citation: Citation) -> str:
    return format_citation_line(
        citation.issuer_name,
        citation.severity,
        citation.citee.name,
        citation.date,
    )


def render_citation_payload(payload: dict[str, Any]) -> str:
    """Same line, built from a ``citation_payload()`` dict."""
    return format_citation_line(
        payload["issuer"],
        payload["severity"],
        payload["citee"],
        payload["date"],
    )
