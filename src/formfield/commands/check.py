"""Command: run a single format recognizer over a value."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from formfield.commands._base import FormfieldCommand

if TYPE_CHECKING:
    from formfield.commands._context import AppContext


@click.command(
    cls=FormfieldCommand,
    examples="""\
  formfield check email ab@cd.ef
  formfield check numeric 12345
  formfield --json check non-numeric abc""",
)
@click.argument("kind", type=click.Choice(["email", "numeric", "non-numeric"]))
@click.argument("value")
@click.pass_obj
def check(app: AppContext, kind: str, value: str) -> None:
    """Check VALUE against the KIND format recognizer."""
    from formfield.apps.check import check_format

    app.emit(check_format(kind, value))
