"""Subcommand modules for formfield.

Provides register_commands() which uses deferred imports so
``formfield --help`` never loads the example apps.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from formfield.commands.check import check
    from formfield.commands.signup import signup
    from formfield.commands.survey import survey

    cli.add_command(signup)
    cli.add_command(survey)
    cli.add_command(check)
