"""Tests for CitationService — settings-driven issuer composition."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from typing import Any

from citectl.config.settings import CiteSettings
from citectl.domain.clock import Clock, FixedClock
from citectl.domain.issuer import Issuer
from citectl.domain.laws import Law, SpeedingLaw
from citectl.domain.models import Entity, Incident, Severity
from citectl.plugins.hookspecs import hookimpl
from citectl.plugins.manager import PluginManager
from citectl.services.citation import CitationService, citation_payload

MakeIncident = Callable[..., Incident]


class _SeatbeltLaw(Law):
    name = "seatbelt"

    def calculate_severity(self, incident: Incident, entity: Entity, today: date) -> Severity:
        return Severity.SMALL


class _SeatbeltPlugin:
    def __init__(self) -> None:
        self.evaluated: list[tuple[str, str, int]] = []

    @hookimpl
    def register_laws(self, clock: Clock) -> list[Law]:
        return [_SeatbeltLaw(clock)]

    @hookimpl
    def post_evaluate(self, issuer_name: str, citee_name: str, citation_count: int) -> None:
        self.evaluated.append((issuer_name, citee_name, citation_count))


class TestEvaluate:
    def test_medium_citation(
        self,
        settings: CiteSettings,
        clock: FixedClock,
        citee: Entity,
        make_incident: MakeIncident,
    ) -> None:
        svc = CitationService(settings, clock=clock)
        result = svc.evaluate(make_incident(50, 35), citee)
        assert result.ok
        assert result.op == "evaluate"
        assert result.data["count"] == 1
        assert result.data["issuer"] == "Sgt. Al Powell"
        assert result.data["date"] == "2026-10-17"
        assert result.data["citations"] == [
            {
                "law": "speeding",
                "severity": "Medium",
                "date": "2026-10-17",
                "issuer": "Sgt. Al Powell",
                "citee": "John McClane",
                "location": "Santa Monica Blvd",
            }
        ]

    def test_no_citation(
        self,
        settings: CiteSettings,
        clock: FixedClock,
        citee: Entity,
        make_incident: MakeIncident,
    ) -> None:
        result = CitationService(settings, clock=clock).evaluate(make_incident(65, 65), citee)
        assert result.ok
        assert result.data["count"] == 0
        assert result.data["citations"] == []
        assert result.warnings == []

    def test_issuer_name_override(
        self,
        settings: CiteSettings,
        clock: FixedClock,
        citee: Entity,
        make_incident: MakeIncident,
    ) -> None:
        svc = CitationService(settings, clock=clock)
        result = svc.evaluate(make_incident(50, 35), citee, issuer_name="Lt. Dwayne Robinson")
        assert result.data["issuer"] == "Lt. Dwayne Robinson"
        assert result.data["citations"][0]["issuer"] == "Lt. Dwayne Robinson"

    def test_incident_echoed(
        self,
        settings: CiteSettings,
        clock: FixedClock,
        citee: Entity,
        make_incident: MakeIncident,
    ) -> None:
        result = CitationService(settings, clock=clock).evaluate(make_incident(50, 35), citee)
        assert result.data["incident"] == {
            "incident_speed": 50,
            "speed_limit": 35,
            "location": "Santa Monica Blvd",
        }
        assert result.data["citee"] == {"name": "John McClane", "birth_date": "1988-01-01"}

    def test_unknown_law_is_error_result(
        self, clock: FixedClock, citee: Entity, make_incident: MakeIncident
    ) -> None:
        settings = CiteSettings(laws={"enabled": ["speeding", "jaywalking"]})
        result = CitationService(settings, clock=clock).evaluate(make_incident(50, 35), citee)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "UNKNOWN_LAW"
        assert "jaywalking" in result.error.message

    def test_no_laws_enabled(
        self, clock: FixedClock, citee: Entity, make_incident: MakeIncident
    ) -> None:
        settings = CiteSettings(laws={"enabled": []})
        result = CitationService(settings, clock=clock).evaluate(make_incident(120, 35), citee)
        assert result.ok
        assert result.data["citations"] == []

    def test_one_date_across_midnight(
        self,
        settings: CiteSettings,
        rollover_clock: Any,
        birthday_citee: Entity,
        make_incident: MakeIncident,
    ) -> None:
        svc = CitationService(settings, clock=rollover_clock)
        result = svc.evaluate(make_incident(40, 35), birthday_citee)
        assert result.ok
        assert result.data["date"] == "2026-10-16"
        assert [c["date"] for c in result.data["citations"]] == ["2026-10-16"]
        assert [c["severity"] for c in result.data["citations"]] == ["Small"]
        assert rollover_clock.reads == 1

    def test_defaults_to_system_clock(self, settings: CiteSettings) -> None:
        from citectl.domain.clock import SystemClock

        assert isinstance(CitationService(settings).clock, SystemClock)


class TestConfiguredSpeeding:
    def test_thresholds_from_settings(
        self, clock: FixedClock, citee: Entity, make_incident: MakeIncident
    ) -> None:
        settings = CiteSettings(speeding={"small_over": 5, "medium_over": 20, "large_over": 40})
        svc = CitationService(settings, clock=clock)
        (law,) = svc.build_laws()
        assert isinstance(law, SpeedingLaw)
        assert law.thresholds.medium_over == 20
        result = svc.evaluate(make_incident(50, 35), citee)
        assert result.data["citations"][0]["severity"] == "Small"

    def test_allowance_from_settings(
        self, clock: FixedClock, birthday_citee: Entity, make_incident: MakeIncident
    ) -> None:
        settings = CiteSettings(speeding={"birthday_allowance": 20})
        result = CitationService(settings, clock=clock).evaluate(
            make_incident(50, 35), birthday_citee
        )
        assert result.data["count"] == 0


class TestPluginLaws:
    def test_plugin_laws_appended_after_configured(
        self,
        settings: CiteSettings,
        clock: FixedClock,
        citee: Entity,
        make_incident: MakeIncident,
    ) -> None:
        pm = PluginManager()
        plugin = _SeatbeltPlugin()
        pm.register_plugin(plugin, name="seatbelt")
        svc = CitationService(settings, clock=clock, plugins=pm)

        result = svc.evaluate(make_incident(50, 35), citee)

        assert [c["law"] for c in result.data["citations"]] == ["speeding", "seatbelt"]
        assert plugin.evaluated == [("Sgt. Al Powell", "John McClane", 2)]

    def test_list_laws_includes_plugins(self, settings: CiteSettings, clock: FixedClock) -> None:
        pm = PluginManager()
        pm.register_plugin(_SeatbeltPlugin(), name="seatbelt")
        result = CitationService(settings, clock=clock, plugins=pm).list_laws()
        assert [item["name"] for item in result.data["items"]] == ["speeding", "seatbelt"]


class TestListLaws:
    def test_default(self, settings: CiteSettings) -> None:
        result = CitationService(settings).list_laws()
        assert result.ok
        assert result.data["count"] == 1
        assert result.data["items"][0]["name"] == "speeding"
        assert result.data["items"][0]["birthday_allowance"] == 5

    def test_empty_warns(self) -> None:
        result = CitationService(CiteSettings(laws={"enabled": []})).list_laws()
        assert result.ok
        assert result.data["items"] == []
        assert result.warnings

    def test_unknown_law(self) -> None:
        result = CitationService(CiteSettings(laws={"enabled": ["parking"]})).list_laws()
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "UNKNOWN_LAW"


class TestCitationPayload:
    def test_payload_fields(
        self, issuer: Issuer, citee: Entity, make_incident: MakeIncident
    ) -> None:
        (citation,) = issuer.issue_citations(make_incident(61, 35), citee)
        assert citation_payload(citation)["severity"] == "Large"
        assert citation_payload(citation)["date"] == "2026-10-17"
