"""Unit tests for the Xcode and JSON reporters."""

import json

import pytest

from control_statement_linter.domain.entities import Correction, Location, Severity
from control_statement_linter.domain.rules import Violation
from control_statement_linter.infrastructure.reporters import (
    JSONReporter,
    ReporterFactory,
    XcodeReporter,
)


def _violation(severity: Severity = Severity.WARNING) -> Violation:
    return Violation(
        rule_id="control_statement",
        severity=severity,
        location=Location(file="A.swift", offset=10, line=2, character=3),
        reason="Redundant parentheses.",
        rule_name="Control Statement",
    )


class TestXcodeReporter:
    def test_formats_violation(self) -> None:
        report = XcodeReporter().generate_report([_violation(Severity.ERROR)])

        assert report == (
            "A.swift:2:3: error: Control Statement Violation: "
            "Redundant parentheses. (control_statement)"
        )

    def test_empty_report(self) -> None:
        assert XcodeReporter().generate_report([]) == ""

    def test_correction_log(self) -> None:
        correction = Correction(
            rule_id="control_statement",
            rule_name="Control Statement",
            location=Location(file="A.swift", offset=0, line=1, character=1),
        )
        log = XcodeReporter().generate_correction_report([correction])
        assert log == "A.swift:1:1 Corrected Control Statement"


class TestJSONReporter:
    def test_rows(self) -> None:
        rows = json.loads(JSONReporter().generate_report([_violation()]))

        assert rows == [{
            "file": "A.swift",
            "line": 2,
            "character": 3,
            "severity": "Warning",
            "type": "Control Statement",
            "rule_id": "control_statement",
            "reason": "Redundant parentheses.",
        }]

    def test_empty_is_empty_array(self) -> None:
        assert json.loads(JSONReporter().generate_report([])) == []


class TestReporterFactory:
    def test_known_identifiers(self) -> None:
        assert isinstance(ReporterFactory.create("xcode"), XcodeReporter)
        assert isinstance(ReporterFactory.create("json"), JSONReporter)

    def test_unknown_identifier_raises(self) -> None:
        with pytest.raises(ValueError):
            ReporterFactory.create("html")
