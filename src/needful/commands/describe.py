"""Command: show the resolved parameter contract of a class."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from needful.commands._base import NeedfulCommand

if TYPE_CHECKING:
    from needful.commands._context import AppContext


@click.command(
    cls=NeedfulCommand,
    examples="""\
  needful describe myapp.widgets:FancyForm
  needful --json describe myapp.widgets:FancyForm
  needful -v describe myapp.widgets:Page.Header""",
)
@click.argument("target")
@click.pass_obj
def describe(app: AppContext, target: str) -> None:
    """Show the parameters TARGET (module:Class) accepts."""
    cls = app.load(target, op="describe_contract")
    app.emit(app.service.describe(cls))
