"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Turns TEXT arguments into sequences, loads plugins
lazily, and centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

import click

from strctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from typing import TextIO

    from strctl.config.settings import StrSettings
    from strctl.plugins.manager import PluginManager
    from strctl.services.result import ServiceResult
    from strctl.services.sequence import SequenceService

STDIN_MARKER = "-"


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Plugins are loaded on first use so ``--help`` and ``--version`` never
    import entry points.
    """

    def __init__(self, settings: StrSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None

        from strctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from strctl.services.telemetry import enable_telemetry

            enable_telemetry()

    def load_plugins(self) -> PluginManager:
        """Discover plugins once and return the manager."""
        if self._plugins is None:
            from strctl.plugins.manager import PluginManager

            self._plugins = PluginManager()
            if self.settings.plugins.enabled:
                self._plugins.discover_and_load()
        return self._plugins

    def service(self, text: str) -> SequenceService:
        """Build a SequenceService whose current sequence is read from *text*.

        *text* goes through the token reader, so only its first
        whitespace-delimited token is kept. ``-`` reads from stdin instead.
        """
        from strctl.services.sequence import SequenceService

        svc = SequenceService(limits=self.settings.limits)
        result = svc.read(self._stream(text))
        self._warn(result)
        return svc

    def token(self, text: str) -> str:
        """First whitespace-delimited token of *text* (``-`` reads stdin).

        Used for second operands: an empty operand is just ``""``, with no
        warning about the current sequence.
        """
        from strctl.domain.sequence import Sequence
        from strctl.domain.textio import read_token

        operand: Sequence[str] = Sequence()
        read_token(self._stream(text), operand)
        return operand.c_str()

    def _stream(self, text: str) -> TextIO:
        if text == STDIN_MARKER:
            return click.get_text_stream("stdin")
        return io.StringIO(text)

    def _output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            width=self.settings.output.width,
        )

    def _warn(self, result: ServiceResult) -> None:
        if self.settings.json_output or self.settings.quiet:
            return
        for warning in result.warnings:
            click.echo(f"WARNING: {warning}", err=True)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(result, settings=self._output_settings())
        if result.ok:
            click.echo(output)
            self._warn(result)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
