"""Validator construction and short-circuit composition.

A validator is a pure function ``Field -> Field``. Validators compose
left to right and the first failure wins: once a field is invalid, every
later validator returns it unchanged without evaluating its predicate.
The recorded error stays until the value is replaced via
:func:`~formfield.domain.field.reset_value`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from typing import Any, TypeAlias, TypeVar

from formfield.domain.field import Field, Invalid, is_invalid

V = TypeVar("V")
E = TypeVar("E")

Validator: TypeAlias = Callable[[Field[V, E]], Field[V, E]]


def create_validator(predicate: Callable[[V], bool], error: E) -> Validator[V, E]:
    """Build a validator that records *error* when *predicate* rejects the value.

    A passing value returns the identical field object. An already-invalid
    field is returned as is and *predicate* is never called.
    """

    def apply(field: Field[V, E]) -> Field[V, E]:
        if is_invalid(field):
            return field
        if predicate(field.value):
            return field
        return replace(field, status=Invalid(error))

    return apply


def chain(*validators: Validator[V, E]) -> Validator[V, E]:
    """Compose *validators* left to right into a single validator."""

    def apply(field: Field[V, E]) -> Field[V, E]:
        for validator in validators:
            field = validator(field)
        return field

    return apply


def validate(field: Field[V, E], *validators: Validator[V, E]) -> Field[V, E]:
    """Run *validators* over *field* in order and return the result."""
    return chain(*validators)(field)


def traced(validator: Validator[V, E], logger: Any, name: str) -> Validator[V, E]:
    """Wrap *validator* so each run is reported to *logger*.

    *logger* is any structlog-style logger accepting ``debug(event, **kw)``.
    Events: ``validator.skip`` (field was already invalid),
    ``validator.pass`` and ``validator.fail``.
    """

    def apply(field: Field[V, E]) -> Field[V, E]:
        if is_invalid(field):
            logger.debug("validator.skip", validator=name)
            return field
        result = validator(field)
        status = result.status
        if isinstance(status, Invalid):
            logger.debug("validator.fail", validator=name, error=status.error)
        else:
            logger.debug("validator.pass", validator=name)
        return result

    return apply
