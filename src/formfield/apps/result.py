"""AppResult and AppError — the contract between example apps and the CLI.

INVARIANT: Every app operation returns AppResult.
The CLI formatter and renderers consume only this type.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class AppError(BaseModel):
    """Structured error payload within an AppResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class AppResult(BaseModel):
    """Return type for form submissions and format checks.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"signup"``).
        data: Operation-specific payload (present on failure too, so the
            form can still be rendered).
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: AppError | None = None
