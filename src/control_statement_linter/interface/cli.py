"""CLI entry points - Thin Controller using Typer."""

import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import typer

from control_statement_linter.domain.config import ConfigurationLoader
from control_statement_linter.domain.protocols import (
    FileSystemProtocol,
    SourceFileProtocol,
    SyntaxClassifierProtocol,
    TelemetryPort,
)
from control_statement_linter.domain.rules import Correctable
from control_statement_linter.interface.reporters import ViolationReporter
from control_statement_linter.use_cases.autocorrect import AutocorrectUseCase
from control_statement_linter.use_cases.lint import LintUseCase

# Exit status when at least one violation has error severity.
EXIT_ERROR_VIOLATIONS = 2


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    telemetry: TelemetryPort
    filesystem: FileSystemProtocol
    rules: list[Correctable]
    load_config: Callable[[str | None], ConfigurationLoader]
    create_reporter: Callable[[str], ViolationReporter]
    file_factory: Callable[[str], SourceFileProtocol]
    classifier_factory: Callable[[str], SyntaxClassifierProtocol]


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def resolve_target_paths(paths: list[Path] | None) -> list[str]:
        """Explicit paths as given, else the current directory."""
        if paths:
            return [str(p) for p in paths]
        return ["."]

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="control-statement-lint",
            help="Find and remove redundant parentheses around Swift control statement conditions.",
            add_completion=False,
        )

        @app.callback()
        def main(
            verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
        ) -> None:
            """Configure logging before any command runs."""
            if verbose:
                logging.basicConfig(
                    level=logging.DEBUG,
                    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
                )

        def _load_config(config: Path | None) -> ConfigurationLoader:
            try:
                return deps.load_config(str(config) if config else None)
            except (OSError, ValueError) as e:
                deps.telemetry.error(f"Invalid configuration: {e}")
                sys.exit(1)

        @app.command()
        def lint(
            paths: list[Path] | None = typer.Argument(None, help="Files or directories to lint (default: .)"),  # noqa: B008
            config: Path | None = typer.Option(None, "--config", help="Path to a .swiftlint.yml"),  # noqa: B008
            reporter: str | None = typer.Option(None, "--reporter", help="Output format: xcode or json"),
        ) -> None:
            """Report redundant parentheses around control statement conditions."""
            config_loader = _load_config(config)
            try:
                output = deps.create_reporter(reporter or config_loader.reporter)
            except ValueError as e:
                deps.telemetry.error(str(e))
                sys.exit(1)
            use_case = LintUseCase(
                rules=list(deps.rules),
                config_loader=config_loader,
                filesystem=deps.filesystem,
                file_factory=deps.file_factory,
                classifier_factory=deps.classifier_factory,
                telemetry=deps.telemetry,
            )
            try:
                result = use_case.execute(CLIAppFactory.resolve_target_paths(paths))
            except (OSError, UnicodeDecodeError) as e:
                deps.telemetry.error(str(e))
                sys.exit(1)
            report = output.generate_report(result.violations)
            if report:
                typer.echo(report)
            deps.telemetry.step(
                f"Done linting! Found {len(result.violations)} violation(s) "
                f"in {result.files_scanned} file(s)."
            )
            sys.exit(EXIT_ERROR_VIOLATIONS if result.has_errors() else 0)

        @app.command()
        def autocorrect(
            paths: list[Path] | None = typer.Argument(None, help="Files or directories to correct (default: .)"),  # noqa: B008
            config: Path | None = typer.Option(None, "--config", help="Path to a .swiftlint.yml"),  # noqa: B008
        ) -> None:
            """Rewrite `if (condition) {` as `if condition {` in place."""
            config_loader = _load_config(config)
            use_case = AutocorrectUseCase(
                rules=list(deps.rules),
                config_loader=config_loader,
                filesystem=deps.filesystem,
                file_factory=deps.file_factory,
                classifier_factory=deps.classifier_factory,
                telemetry=deps.telemetry,
            )
            try:
                result = use_case.execute(CLIAppFactory.resolve_target_paths(paths))
            except (OSError, UnicodeDecodeError) as e:
                deps.telemetry.error(str(e))
                sys.exit(1)
            log = deps.create_reporter("xcode").generate_correction_report(result.corrections)
            if log:
                typer.echo(log)
            deps.telemetry.step(
                f"Done correcting {result.files_scanned} file(s)! "
                f"{len(result.corrections)} correction(s) in {result.files_corrected} file(s)."
            )
            sys.exit(0)

        @app.command()
        def rules() -> None:
            """List the available rules."""
            for rule in deps.rules:
                description = rule.description
                correctable = "yes" if hasattr(rule, "correct") else "no"
                typer.echo(
                    f"{description.identifier}: {description.name} "
                    f"(correctable: {correctable})\n    {description.description}"
                )

        return app
