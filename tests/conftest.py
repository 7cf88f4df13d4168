"""Shared pytest fixtures and test helpers for citectl tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from datetime import date
from pathlib import Path

import pytest
from click.testing import CliRunner

from citectl.config.settings import CiteSettings
from citectl.domain.clock import FixedClock
from citectl.domain.issuer import Issuer
from citectl.domain.laws import SpeedingLaw
from citectl.domain.models import Entity, Incident

TODAY = date(2026, 10, 17)
YESTERDAY = date(2026, 10, 16)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(TODAY)


class RolloverClock:
    """Reports the day before TODAY on its first read and TODAY afterwards.

    Stands in for a system clock crossing midnight mid-evaluation.
    """

    def __init__(self) -> None:
        self.reads = 0

    def today(self) -> date:
        self.reads += 1
        return YESTERDAY if self.reads == 1 else TODAY


@pytest.fixture
def rollover_clock() -> RolloverClock:
    return RolloverClock()


@pytest.fixture
def citee() -> Entity:
    """Citee whose birthday is not TODAY."""
    return Entity(name="John McClane", birth_date=date(1988, 1, 1))


@pytest.fixture
def birthday_citee() -> Entity:
    """Citee whose birthday falls on TODAY (different year)."""
    return Entity(name="Holly Gennero", birth_date=date(1990, 10, 17))


@pytest.fixture
def speeding_law(clock: FixedClock) -> SpeedingLaw:
    return SpeedingLaw(clock)


@pytest.fixture
def issuer(clock: FixedClock, speeding_law: SpeedingLaw) -> Issuer:
    return Issuer("Sgt. Al Powell", clock, [speeding_law])


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> CiteSettings:
    """Default settings with no TOML file and no env overrides."""
    monkeypatch.delenv("CITECTL_CONFIG", raising=False)
    return CiteSettings.from_cli(start=tmp_path)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from an empty temp directory so no citectl.toml is found.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test classes.
    """
    monkeypatch.delenv("CITECTL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def make_incident() -> Callable[..., Incident]:
    """Factory for incidents at a fixed location."""

    def _make(speed: int, limit: int, location: str = "Santa Monica Blvd") -> Incident:
        return Incident(incident_speed=speed, speed_limit=limit, location=location)

    return _make


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo configure_logging() so one test's handlers never leak into the next."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    cite = logging.getLogger("citectl")
    cite_level = cite.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    cite.setLevel(cite_level)
