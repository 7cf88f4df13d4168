"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, citectl.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

# --- citectl.toml sections ---


class IssuerConfig(BaseModel):
    """[issuer] section."""

    model_config = {"frozen": True}

    name: str = "Sgt. Al Powell"


class LawsConfig(BaseModel):
    """[laws] section."""

    model_config = {"frozen": True}

    enabled: list[str] = Field(default_factory=lambda: ["speeding"])


class SpeedingConfig(BaseModel):
    """[speeding] section."""

    model_config = {"frozen": True}

    birthday_allowance: int = 5
    small_over: int = 0
    medium_over: int = 10
    large_over: int = 25

    @model_validator(mode="after")
    def _ascending(self) -> SpeedingConfig:
        if not self.small_over <= self.medium_over <= self.large_over:
            msg = "speeding thresholds must satisfy small_over <= medium_over <= large_over"
            raise ValueError(msg)
        return self
