"""ServiceResult and ServiceError — the contract between services and the CLI.

INVARIANT: ZoneService methods never raise domain errors; they return a
ServiceResult with ``ok=False`` and the error's stable code instead.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from tzchain.domain.errors import TzChainError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: TzChainError) -> ServiceError:
        detail: dict[str, Any] = {}
        for attr in ("zone", "text", "reason"):
            if hasattr(exc, attr):
                detail[attr] = str(getattr(exc, attr))
        return cls(code=exc.code, message=str(exc), detail=detail)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"diff_multi"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, exc: TzChainError) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError.from_exception(exc))
