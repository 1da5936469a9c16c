"""Messages a host UI would dispatch to a form's ``update`` function."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias


@dataclass(frozen=True)
class Focus:
    """The named input gained focus."""

    name: str


@dataclass(frozen=True)
class Blur:
    """The named input lost focus."""

    name: str


@dataclass(frozen=True)
class Input:
    """The user changed the named input's value."""

    name: str
    value: Any


@dataclass(frozen=True)
class SetDisabled:
    """Enable or disable the named input."""

    name: str
    disabled: bool


@dataclass(frozen=True)
class Submit:
    """The user pressed submit."""


Msg: TypeAlias = Focus | Blur | Input | SetDisabled | Submit


def edit(name: str, value: Any) -> list[Msg]:
    """Messages for a user focusing an input, typing *value*, and leaving it."""
    return [Focus(name), Input(name, value), Blur(name)]
