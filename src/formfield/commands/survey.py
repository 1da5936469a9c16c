"""Command: fill in and submit the example household survey."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from formfield.commands._base import FormfieldCommand

if TYPE_CHECKING:
    from formfield.commands._context import AppContext


@click.command(
    cls=FormfieldCommand,
    examples="""\
  formfield survey --name Ada --zip-code 12345 --household 3 --rating 4.5
  formfield survey --name Ada --zip-code 12345 --phone 5551234567
  formfield -v survey --name R2D2 --zip-code 1234
  formfield survey --name Ada --zip-code 12345 --disable rating""",
)
@click.option("--name", default=None, help="Respondent name (no digits).")
@click.option("--zip-code", default=None, help="Postal code, digits only.")
@click.option("--phone", default=None, help="Phone number, digits only (optional).")
@click.option("--household", type=int, default=None, help="Number of people in the household.")
@click.option("--rating", type=float, default=None, help="Satisfaction rating.")
@click.option(
    "--disable",
    "disabled",
    multiple=True,
    type=click.Choice(["name", "zip_code", "phone", "household", "rating"]),
    help="Disable a field (skipped on submit). Repeatable.",
)
@click.pass_obj
def survey(
    app: AppContext,
    name: str | None,
    zip_code: str | None,
    phone: str | None,
    household: int | None,
    rating: float | None,
    disabled: tuple[str, ...],
) -> None:
    """Validate and submit the household survey."""
    from formfield.apps.messages import Msg, SetDisabled, edit
    from formfield.apps.survey import SurveyForm

    form = SurveyForm(app.settings.survey)
    messages: list[Msg] = [SetDisabled(field, True) for field in disabled]
    provided: dict[str, Any] = {
        "name": name,
        "zip_code": zip_code,
        "phone": phone,
        "household": household,
        "rating": rating,
    }
    for field, value in provided.items():
        if value is not None:
            messages.extend(edit(field, value))

    app.emit(form.submit(form.run(messages)))
