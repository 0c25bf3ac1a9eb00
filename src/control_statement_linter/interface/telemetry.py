"""Console telemetry: progress and problems on stderr, styled through Typer."""

import logging

import typer

from control_statement_linter.domain.protocols import TelemetryPort

logger = logging.getLogger(__name__)


class ConsoleTelemetry(TelemetryPort):
    """TelemetryPort that writes to stderr so stdout stays a clean report."""

    def __init__(self, name: str) -> None:
        self._name = name

    def step(self, message: str) -> None:
        logger.debug(message)
        typer.secho(f"[{self._name}] {message}", err=True, fg=typer.colors.CYAN)

    def warning(self, message: str) -> None:
        logger.debug(message)
        typer.secho(f"[{self._name}] WARNING: {message}", err=True, fg=typer.colors.YELLOW)

    def error(self, message: str) -> None:
        logger.debug(message)
        typer.secho(f"[{self._name}] ERROR: {message}", err=True, fg=typer.colors.RED)
