"""Commands: show, length, at, slice (read-only access)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from strctl.commands._base import StrCommand

if TYPE_CHECKING:
    from strctl.commands._context import AppContext


@click.command(
    cls=StrCommand,
    examples="""\
  strctl show hello
  echo hello | strctl show -
  strctl --json show hello""",
)
@click.argument("text")
@click.pass_obj
def show(app: AppContext, text: str) -> None:
    """Print the sequence read from TEXT (``-`` reads stdin)."""
    app.emit(app.service(text).show())


@click.command(
    cls=StrCommand,
    examples="""\
  strctl length hello
  strctl -q length hello""",
)
@click.argument("text")
@click.pass_obj
def length(app: AppContext, text: str) -> None:
    """Report the number of characters in TEXT."""
    app.emit(app.service(text).length())


@click.command(
    cls=StrCommand,
    examples="""\
  strctl at hello 1
  strctl at hello 9      # fails: index out of range""",
)
@click.argument("text")
@click.argument("index", type=int)
@click.pass_obj
def at(app: AppContext, text: str, index: int) -> None:
    """Print the character of TEXT at INDEX."""
    app.emit(app.service(text).char_at(index))


@click.command(
    "slice",
    cls=StrCommand,
    examples="""\
  strctl slice hello 1 3
  strctl slice hello 5 2      # empty: start == length is allowed
  strctl slice hello 2 100    # length is clamped""",
)
@click.argument("text")
@click.argument("start", type=int)
@click.argument("count", metavar="LENGTH", type=int)
@click.pass_obj
def slice_cmd(app: AppContext, text: str, start: int, count: int) -> None:
    """Print up to LENGTH characters of TEXT starting at START."""
    app.emit(app.service(text).substring(start, count))
