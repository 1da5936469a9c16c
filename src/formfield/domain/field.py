"""Field values — a value, its interaction metadata, and its validity.

A field always holds exactly one value and exactly one metadata record.
Validity is a separate sum type (``Valid | Invalid``) so that an invalid
field never loses the value the user typed, and so that interaction
flags (touched/active/disabled) stay orthogonal to validity.

Every function here is pure: transformations return a new ``Field`` and
never mutate their input.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any, Generic, TypeVar

from formfield.domain.result import Err, Ok

V = TypeVar("V")
E = TypeVar("E")
R = TypeVar("R")


@dataclass(frozen=True)
class Metadata:
    """UI-facing interaction flags for a single field."""

    touched: bool = False
    active: bool = False
    disabled: bool = False


@dataclass(frozen=True)
class Valid:
    """Status of a field whose value passed every validator run so far."""


@dataclass(frozen=True)
class Invalid(Generic[E]):
    """Status of a field that failed a validator, carrying its error."""

    error: E


@dataclass(frozen=True)
class Field(Generic[V, E]):
    """A form field value with metadata and validity status.

    Construct with :func:`init` rather than directly so the starting
    state is always valid.
    """

    value: V
    metadata: Metadata = Metadata()
    status: Valid | Invalid[E] = Valid()


# ---------------------------------------------------------------------------
# Construction and mutation
# ---------------------------------------------------------------------------


def init(value: V, metadata: Metadata | None = None) -> Field[V, Any]:
    """Create a valid field holding *value*.

    Metadata defaults to all flags off.
    """
    return Field(value=value, metadata=metadata or Metadata())


def reset_value(field: Field[V, E], value: V, metadata: Metadata | None = None) -> Field[V, E]:
    """Replace the value and force the field back to valid.

    Any previous error is discarded even if the new value would fail the
    same validator; the caller re-validates afterwards. The current
    metadata is kept unless *metadata* is given.
    """
    return Field(
        value=value,
        metadata=field.metadata if metadata is None else metadata,
        status=Valid(),
    )


def reset_metadata(field: Field[V, E], metadata: Metadata) -> Field[V, E]:
    """Replace the metadata; value and status are untouched."""
    return replace(field, metadata=metadata)


def update_metadata(field: Field[V, E], **changes: bool) -> Field[V, E]:
    """Flip individual metadata flags, e.g. ``update_metadata(f, touched=True)``."""
    return reset_metadata(field, replace(field.metadata, **changes))


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------


def extract_value(field: Field[V, E]) -> V:
    """Return the held value regardless of validity."""
    return field.value


def extract_metadata(field: Field[V, E]) -> Metadata:
    return field.metadata


def with_default(default: V, field: Field[V, E]) -> V:
    """Return the value if the field is valid, otherwise *default*."""
    if is_valid(field):
        return field.value
    return default


def to_maybe(field: Field[V, E]) -> V | None:
    """Return the value if the field is valid, otherwise ``None``.

    The error is discarded. Use :func:`to_result` when the value type
    itself admits ``None``.
    """
    if is_valid(field):
        return field.value
    return None


def to_result(field: Field[V, E]) -> Ok[V] | Err[E]:
    """Return ``Ok(value)`` for a valid field, ``Err(error)`` otherwise."""
    status = field.status
    if isinstance(status, Invalid):
        return Err(status.error)
    return Ok(field.value)


def is_valid(field: Field[V, E]) -> bool:
    return isinstance(field.status, Valid)


def is_invalid(field: Field[V, E]) -> bool:
    return isinstance(field.status, Invalid)


# ---------------------------------------------------------------------------
# Rendering hook
# ---------------------------------------------------------------------------


def view(
    field: Field[V, E],
    on_valid: Callable[[Metadata, V], R],
    on_invalid: Callable[[Metadata, V, E], R],
) -> R:
    """Dispatch to the render callback matching the field's status."""
    status = field.status
    if isinstance(status, Invalid):
        return on_invalid(field.metadata, field.value, status.error)
    return on_valid(field.metadata, field.value)
