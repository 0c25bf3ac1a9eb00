"""Use Case: Lint - run every enabled rule over every Swift file and collect violations."""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from control_statement_linter.domain.protocols import (
    FileSystemProtocol,
    SourceFileProtocol,
    SyntaxClassifierProtocol,
    TelemetryPort,
)
from control_statement_linter.domain.results import LintResult
from control_statement_linter.domain.rules import Checkable, Violation
from control_statement_linter.domain.services.command_regions import (
    CommandRegionService,
)

if TYPE_CHECKING:
    from control_statement_linter.domain.config import ConfigurationLoader

logger = logging.getLogger(__name__)


class LintUseCase:
    """Orchestrate rule validation across files and drop violations in disabled regions."""

    def __init__(
        self,
        rules: list[Checkable],
        config_loader: "ConfigurationLoader",
        filesystem: FileSystemProtocol,
        file_factory: Callable[[str], SourceFileProtocol],
        classifier_factory: Callable[[str], SyntaxClassifierProtocol],
        telemetry: TelemetryPort,
    ) -> None:
        self.rules = rules
        self.config_loader = config_loader
        self.filesystem = filesystem
        self.file_factory = file_factory
        self.classifier_factory = classifier_factory
        self.telemetry = telemetry

    def collect_files(self, paths: list[str]) -> list[str]:
        """Expand paths to Swift files and apply included/excluded from configuration."""
        files: list[str] = []
        for path in paths:
            files.extend(self.filesystem.glob_swift_files(path))
        kept = self.filesystem.filter_paths(
            files, self.config_loader.included, self.config_loader.excluded
        )
        if not kept:
            self.telemetry.warning(f"No Swift files found in {', '.join(paths)}")
        return kept

    def enabled_rules(self) -> list[Checkable]:
        return [
            rule
            for rule in self.rules
            if self.config_loader.is_rule_enabled(rule.description.identifier)
        ]

    def lint_file(self, file: SourceFileProtocol) -> list[Violation]:
        """Validate one file with every enabled rule."""
        syntax = self.classifier_factory(file.contents)
        regions = CommandRegionService(file, syntax)
        violations: list[Violation] = []
        for rule in self.enabled_rules():
            configuration = self.config_loader.severity_configuration(
                rule.description.identifier
            )
            for violation in rule.validate(file, syntax, configuration):
                if regions.is_enabled(violation.location.offset, violation.rule_id):
                    violations.append(violation)
        return violations

    def execute(self, paths: list[str]) -> LintResult:
        files = self.collect_files(paths)
        self.telemetry.step(f"Linting {len(files)} Swift file(s)...")
        violations: list[Violation] = []
        for path in files:
            try:
                file = self.file_factory(path)
            except (OSError, UnicodeDecodeError):
                logger.error("Could not read %s", path)
                raise
            found = self.lint_file(file)
            logger.debug("%s: %d violation(s)", path, len(found))
            violations.extend(found)
        return LintResult(violations=violations, files_scanned=len(files))
