"""Commands: append, concat, repeat (build a new sequence from TEXT)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from strctl.commands._base import StrCommand

if TYPE_CHECKING:
    from strctl.commands._context import AppContext


@click.command(
    cls=StrCommand,
    examples="""\
  strctl append hell o
  strctl -q append abc d""",
)
@click.argument("text")
@click.argument("char")
@click.pass_obj
def append(app: AppContext, text: str, char: str) -> None:
    """Append the single character CHAR to TEXT."""
    app.emit(app.service(text).append(char))


@click.command(
    cls=StrCommand,
    examples="""\
  strctl concat ab cd
  echo ab | strctl concat - cd""",
)
@click.argument("text")
@click.argument("other")
@click.pass_obj
def concat(app: AppContext, text: str, other: str) -> None:
    """Concatenate TEXT and OTHER."""
    svc = app.service(text)
    app.emit(svc.concat(app.token(other)))


@click.command(
    cls=StrCommand,
    examples="""\
  strctl repeat xy 3
  strctl repeat xy 0      # empty result
  strctl repeat xy -- -2  # negative counts also give an empty result""",
)
@click.argument("text")
@click.argument("times", type=int)
@click.pass_obj
def repeat(app: AppContext, text: str, times: int) -> None:
    """Repeat TEXT TIMES times."""
    app.emit(app.service(text).repeat(times))
