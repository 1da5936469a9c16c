"""Standalone format checks backed by the recognizers."""

from __future__ import annotations

from collections.abc import Callable

from formfield.apps.result import AppError, AppResult
from formfield.domain.recognizers import is_email, is_non_numeric, is_numeric

RECOGNIZERS: dict[str, Callable[[str], bool]] = {
    "email": is_email,
    "numeric": is_numeric,
    "non-numeric": is_non_numeric,
}


def check_format(kind: str, value: str) -> AppResult:
    """Run the *kind* recognizer over *value*.

    Unknown kinds and non-matching values both fail; the caller tells
    them apart by ``error.code``.
    """
    recognizer = RECOGNIZERS.get(kind)
    if recognizer is None:
        return AppResult(
            ok=False,
            op="check",
            error=AppError(
                code="UNKNOWN_FORMAT",
                message=f"Unknown format '{kind}'",
                detail={"known": sorted(RECOGNIZERS)},
            ),
        )

    data = {"format": kind, "value": value}
    if recognizer(value):
        return AppResult(ok=True, op="check", data={**data, "matches": True})
    return AppResult(
        ok=False,
        op="check",
        data={**data, "matches": False},
        error=AppError(code="NO_MATCH", message=f"{value!r} is not a valid {kind} value"),
    )
