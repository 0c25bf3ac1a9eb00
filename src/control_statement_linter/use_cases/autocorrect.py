"""Use Case: Autocorrect - rewrite Swift files with every enabled correctable rule."""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from control_statement_linter.domain.entities import Correction
from control_statement_linter.domain.protocols import (
    FileSystemProtocol,
    SourceFileProtocol,
    SyntaxClassifierProtocol,
    TelemetryPort,
)
from control_statement_linter.domain.results import AutocorrectResult
from control_statement_linter.domain.rules import Correctable
from control_statement_linter.domain.services.command_regions import (
    CommandRegionService,
)
from control_statement_linter.use_cases.lint import LintUseCase

if TYPE_CHECKING:
    from control_statement_linter.domain.config import ConfigurationLoader

logger = logging.getLogger(__name__)


class AutocorrectUseCase:
    """
    Apply corrections file by file.

    Each rule re-reads the file's current contents, so rules run in sequence see
    the output of the previous one. Write failures propagate unchanged.
    """

    def __init__(
        self,
        rules: list[Correctable],
        config_loader: "ConfigurationLoader",
        filesystem: FileSystemProtocol,
        file_factory: Callable[[str], SourceFileProtocol],
        classifier_factory: Callable[[str], SyntaxClassifierProtocol],
        telemetry: TelemetryPort,
    ) -> None:
        self.rules = rules
        self.config_loader = config_loader
        self.file_factory = file_factory
        self.classifier_factory = classifier_factory
        self.telemetry = telemetry
        self._lint = LintUseCase(
            rules=list(rules),
            config_loader=config_loader,
            filesystem=filesystem,
            file_factory=file_factory,
            classifier_factory=classifier_factory,
            telemetry=telemetry,
        )

    def correct_file(self, file: SourceFileProtocol) -> list[Correction]:
        corrections: list[Correction] = []
        for rule in self._lint.enabled_rules():
            syntax = self.classifier_factory(file.contents)
            regions = CommandRegionService(file, syntax)
            corrections.extend(rule.correct(file, syntax, regions))
        return corrections

    def execute(self, paths: list[str]) -> AutocorrectResult:
        files = self._lint.collect_files(paths)
        self.telemetry.step(f"Correcting {len(files)} Swift file(s)...")
        corrections: list[Correction] = []
        files_corrected = 0
        for path in files:
            try:
                file = self.file_factory(path)
                found = self.correct_file(file)
            except (OSError, UnicodeDecodeError):
                logger.error("Could not correct %s", path)
                raise
            if found:
                files_corrected += 1
                logger.debug("%s: %d correction(s)", path, len(found))
            corrections.extend(found)
        return AutocorrectResult(
            corrections=corrections,
            files_scanned=len(files),
            files_corrected=files_corrected,
        )
