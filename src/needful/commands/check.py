"""Command: construct a class from command-line parameters."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from needful.commands._base import NeedfulCommand

if TYPE_CHECKING:
    from needful.commands._context import AppContext


def parse_params(
    _ctx: click.Context | None,
    _param: click.Parameter | None,
    values: tuple[str, ...],
) -> dict[str, Any]:
    """Turn ``name=value`` pairs into a parameter bag.

    Values are decoded as JSON when possible (``3``, ``true``, ``[1, 2]``)
    and kept as plain strings otherwise.
    """
    bag: dict[str, Any] = {}
    for raw in values:
        name, sep, value = raw.partition("=")
        if not sep or not name:
            msg = f"Expected name=value, got '{raw}'"
            raise click.BadParameter(msg)
        try:
            bag[name] = json.loads(value)
        except json.JSONDecodeError:
            bag[name] = value
    return bag


@click.command(
    cls=NeedfulCommand,
    examples="""\
  needful check myapp.widgets:FancyForm -p title=Login
  needful check myapp.widgets:FancyForm -p title=Login -p show_cancel=true
  needful --json check myapp.widgets:FancyForm""",
)
@click.argument("target")
@click.option(
    "-p",
    "--param",
    "params",
    multiple=True,
    callback=parse_params,
    help="Parameter as name=value (repeatable).",
)
@click.pass_obj
def check(app: AppContext, target: str, params: dict[str, Any]) -> None:
    """Construct TARGET (module:Class) with the given parameters."""
    cls = app.load(target, op="construct")
    app.emit(app.service.construct(cls, params))
