"""Text reporters for violations and corrections."""

import json
from typing import TypedDict

from control_statement_linter.domain.entities import Correction
from control_statement_linter.domain.rules import Violation
from control_statement_linter.interface.reporters import ViolationReporter


class ViolationRow(TypedDict):
    """Row for the JSON reporter."""

    file: str | None
    line: int
    character: int
    severity: str
    type: str
    rule_id: str
    reason: str


class XcodeReporter(ViolationReporter):
    """One `path:line:character: severity: ...` line per violation, as Xcode parses it."""

    identifier = "xcode"

    def generate_report(self, violations: list[Violation]) -> str:
        return "\n".join(self.format_violation(v) for v in violations)

    @staticmethod
    def format_violation(violation: Violation) -> str:
        return (
            f"{violation.location}: {violation.severity.value}: "
            f"{violation.rule_name} Violation: {violation.reason} ({violation.rule_id})"
        )

    def generate_correction_report(self, corrections: list[Correction]) -> str:
        return "\n".join(
            f"{c.location} Corrected {c.rule_name}" for c in corrections
        )


class JSONReporter(XcodeReporter):
    """JSON array of violations. Corrections use the plain text log."""

    identifier = "json"

    def generate_report(self, violations: list[Violation]) -> str:
        return json.dumps([self.to_row(v) for v in violations], indent=2)

    @staticmethod
    def to_row(violation: Violation) -> ViolationRow:
        return {
            "file": violation.location.file,
            "line": violation.location.line,
            "character": violation.location.character,
            "severity": violation.severity.value.capitalize(),
            "type": violation.rule_name,
            "rule_id": violation.rule_id,
            "reason": violation.reason,
        }


class ReporterFactory:
    """Maps a reporter identifier from configuration or the CLI to an instance."""

    _REPORTERS: dict[str, type[XcodeReporter]] = {
        XcodeReporter.identifier: XcodeReporter,
        JSONReporter.identifier: JSONReporter,
    }

    @staticmethod
    def create(identifier: str) -> ViolationReporter:
        reporter_cls = ReporterFactory._REPORTERS.get(identifier)
        if reporter_cls is None:
            raise ValueError(
                f"Unknown reporter {identifier!r}; expected one of "
                f"{', '.join(ReporterFactory._REPORTERS)}"
            )
        return reporter_cls()
