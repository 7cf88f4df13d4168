"""ServiceResult and ServiceError — the contract between services and the CLI.

Services never raise domain errors to their callers. A
:class:`~citectl.domain.errors.CitationError` becomes a failed result
carrying the error's ``code``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from citectl.domain.errors import CitationError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for every service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"evaluate"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def from_error(
        cls,
        op: str,
        exc: CitationError,
        *,
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        """Build a failed result from a domain error."""
        return cls(
            ok=False,
            op=op,
            warnings=warnings or [],
            error=ServiceError(code=exc.code, message=str(exc)),
        )
