"""Command: compare two sequences lexicographically."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from strctl.commands._base import StrCommand

if TYPE_CHECKING:
    from strctl.commands._context import AppContext


@click.command(
    cls=StrCommand,
    examples="""\
  strctl compare abc abd
  strctl --json compare ab abc""",
)
@click.argument("text")
@click.argument("other")
@click.pass_obj
def compare(app: AppContext, text: str, other: str) -> None:
    """Compare TEXT with OTHER (equal / less / greater)."""
    app.emit(app.service(text).compare(app.token(other)))
