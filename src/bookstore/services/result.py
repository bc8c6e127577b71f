"""ServiceResult and ServiceError — the contract between services and the CLI.

INVARIANT: Every registry and facade operation returns ServiceResult.
Diagnostics such as ``Book already exists`` travel as ``error.message``;
action and notification text travels as ``data["lines"]``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"add_book"``).
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

    @property
    def lines(self) -> list[str]:
        """Output lines produced by a successful operation."""
        return list(self.data.get("lines", []))


def success(op: str, *, lines: list[str] | None = None, **data: Any) -> ServiceResult:
    """Build a successful result, optionally carrying output lines."""
    payload = dict(data)
    if lines is not None:
        payload["lines"] = lines
    return ServiceResult(ok=True, op=op, data=payload)


def failure(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
    """Build a failed result whose message is the literal diagnostic text."""
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=detail),
    )
