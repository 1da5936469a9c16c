"""Validators for floating-point fields.

Plain float comparison semantics apply: NaN fails every bound.
"""

from __future__ import annotations

from typing import TypeAlias, TypeVar

from formfield.domain.field import Field
from formfield.domain.validators import Validator, create_validator

E = TypeVar("E")

FloatField: TypeAlias = Field[float, E]


def greater_than(bound: float, error: E) -> Validator[float, E]:
    return create_validator(lambda value: value > bound, error)


def greater_than_or_equal(bound: float, error: E) -> Validator[float, E]:
    return create_validator(lambda value: value >= bound, error)


def less_than(bound: float, error: E) -> Validator[float, E]:
    return create_validator(lambda value: value < bound, error)


def less_than_or_equal(bound: float, error: E) -> Validator[float, E]:
    return create_validator(lambda value: value <= bound, error)
