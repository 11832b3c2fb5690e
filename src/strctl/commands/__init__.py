"""Subcommand modules for strctl.

Provides register_commands() which uses deferred imports to keep
``strctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every standalone command on the root CLI group."""
    from strctl.commands.access import at, length, show, slice_cmd
    from strctl.commands.compare import compare
    from strctl.commands.edit import append, concat, repeat
    from strctl.commands.transform import transform, upper

    cli.add_command(show)
    cli.add_command(length)
    cli.add_command(at)
    cli.add_command(slice_cmd)
    cli.add_command(append)
    cli.add_command(concat)
    cli.add_command(repeat)
    cli.add_command(upper)
    cli.add_command(transform)
    cli.add_command(compare)
