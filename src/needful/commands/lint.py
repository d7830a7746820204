"""Command: report contract authoring problems across a class hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from needful.commands._base import NeedfulCommand

if TYPE_CHECKING:
    from needful.commands._context import AppContext


@click.command(
    cls=NeedfulCommand,
    examples="""\
  needful lint myapp.widgets:FancyForm
  needful --json lint myapp.widgets:FancyForm""",
)
@click.argument("target")
@click.pass_obj
def lint(app: AppContext, target: str) -> None:
    """Check the contract chain of TARGET (module:Class) for authoring mistakes."""
    cls = app.load(target, op="lint_contract")
    app.emit(app.service.lint(cls))
