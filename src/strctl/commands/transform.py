"""Commands: upper, transform (element-wise character transformers)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from strctl.commands._base import StrCommand

if TYPE_CHECKING:
    from strctl.commands._context import AppContext


@click.command(
    cls=StrCommand,
    examples="""\
  strctl upper hello
  strctl upper abc-123""",
)
@click.argument("text")
@click.pass_obj
def upper(app: AppContext, text: str) -> None:
    """Upper-case the ASCII letters of TEXT."""
    app.emit(app.service(text).upper())


@click.command(
    cls=StrCommand,
    examples="""\
  strctl transform hello upper
  strctl transform HELLO lower""",
)
@click.argument("text")
@click.argument("name")
@click.pass_obj
def transform(app: AppContext, text: str, name: str) -> None:
    """Apply the transformer registered as NAME to TEXT."""
    app.load_plugins()
    app.emit(app.service(text).transform(name))
