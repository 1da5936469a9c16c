"""Command: fill in and submit the example signup form."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from formfield.commands._base import FormfieldCommand

if TYPE_CHECKING:
    from formfield.commands._context import AppContext


@click.command(
    cls=FormfieldCommand,
    examples="""\
  formfield signup --email ab@cd.ef --password hunter2hunter2 --age 30 --accept-terms
  formfield signup --email nope --age 9
  formfield --json signup --email ab@cd.ef --password s3cretpass --age 21 --accept-terms
  formfield signup --email ab@cd.ef --password s3cretpass --disable age --accept-terms""",
)
@click.option("--email", default=None, help="Email address.")
@click.option("--password", default=None, help="Account password.")
@click.option("--age", type=int, default=None, help="Age in years.")
@click.option("--accept-terms", is_flag=True, help="Accept the terms of service.")
@click.option(
    "--disable",
    "disabled",
    multiple=True,
    type=click.Choice(["email", "password", "age", "terms"]),
    help="Disable a field (skipped on submit). Repeatable.",
)
@click.pass_obj
def signup(
    app: AppContext,
    email: str | None,
    password: str | None,
    age: int | None,
    accept_terms: bool,
    disabled: tuple[str, ...],
) -> None:
    """Validate and submit the signup form."""
    from formfield.apps.messages import Msg, SetDisabled, edit
    from formfield.apps.signup import SignupForm

    form = SignupForm(app.settings.signup)
    messages: list[Msg] = [SetDisabled(name, True) for name in disabled]
    provided: dict[str, Any] = {"email": email, "password": password, "age": age}
    for name, value in provided.items():
        if value is not None:
            messages.extend(edit(name, value))
    if accept_terms:
        messages.extend(edit("terms", True))

    app.emit(form.submit(form.run(messages)))
