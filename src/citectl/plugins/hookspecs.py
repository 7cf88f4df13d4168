"""Pluggy hook specifications for citectl.

One setup-time hook lets plugins contribute laws; one notification hook
fires after each evaluation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from citectl.domain.clock import Clock
    from citectl.domain.laws import Law

hookspec = pluggy.HookspecMarker("citectl")
hookimpl = pluggy.HookimplMarker("citectl")


class CitectlHookSpec:
    """Hook specifications for the citectl plugin system."""

    @hookspec
    def register_laws(self, clock: Clock) -> list[Law] | None:
        """Return law instances bound to *clock* to append to the issuer."""

    @hookspec
    def post_evaluate(
        self,
        issuer_name: str,
        citee_name: str,
        citation_count: int,
    ) -> None:
        """Called after an incident has been evaluated."""
