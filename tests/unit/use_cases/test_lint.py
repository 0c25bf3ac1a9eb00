"""Unit tests for LintUseCase."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from control_statement_linter.domain.config import ConfigurationLoader
from control_statement_linter.domain.entities import Severity
from control_statement_linter.use_cases.lint import LintUseCase


class TestLintUseCase:
    """Lint across files with configuration and inline suppression."""

    def test_collects_violations_from_all_files(
        self, swift_project: Path, use_case_deps
    ) -> None:
        use_case = LintUseCase(config_loader=ConfigurationLoader(), **use_case_deps())

        result = use_case.execute([str(swift_project)])

        assert result.files_scanned == 3
        located = sorted(
            (Path(v.location.file or "").name, v.location.line) for v in result.violations
        )
        assert located == [("A.swift", 1), ("A.swift", 3), ("B.swift", 1), ("C.swift", 1)]
        assert not result.has_errors()

    def test_excluded_paths_are_skipped(self, swift_project: Path, use_case_deps) -> None:
        config = ConfigurationLoader({"excluded": [str(swift_project / "Pods")]})
        use_case = LintUseCase(config_loader=config, **use_case_deps())

        result = use_case.execute([str(swift_project)])

        assert result.files_scanned == 2
        assert all("Pods" not in (v.location.file or "") for v in result.violations)

    def test_disabled_rule_reports_nothing(self, swift_project: Path, use_case_deps) -> None:
        config = ConfigurationLoader({"disabled_rules": ["control_statement"]})
        use_case = LintUseCase(config_loader=config, **use_case_deps())

        result = use_case.execute([str(swift_project)])

        assert result.violations == []
        assert not result.has_violations()

    def test_configured_severity(self, swift_project: Path, use_case_deps) -> None:
        config = ConfigurationLoader({"control_statement": {"severity": "error"}})
        use_case = LintUseCase(config_loader=config, **use_case_deps())

        result = use_case.execute([str(swift_project / "Sources" / "A.swift")])

        assert {v.severity for v in result.violations} == {Severity.ERROR}
        assert result.has_errors()

    def test_inline_suppression(self, tmp_path: Path, use_case_deps) -> None:
        target = tmp_path / "A.swift"
        target.write_text(
            "if (a) {} // swiftlint:disable:this control_statement\nif (b) {}\n",
            encoding="utf-8",
        )
        use_case = LintUseCase(config_loader=ConfigurationLoader(), **use_case_deps())

        result = use_case.execute([str(target)])

        assert [v.location.line for v in result.violations] == [2]

    def test_lint_is_read_only(self, swift_project: Path, use_case_deps) -> None:
        target = swift_project / "Sources" / "A.swift"
        before = target.read_text(encoding="utf-8")
        LintUseCase(config_loader=ConfigurationLoader(), **use_case_deps()).execute(
            [str(target)]
        )
        assert target.read_text(encoding="utf-8") == before

    def test_unreadable_file_propagates(self, tmp_path: Path, use_case_deps) -> None:
        target = tmp_path / "A.swift"
        target.write_bytes(b"\xff\xfe if (a) {}")
        use_case = LintUseCase(config_loader=ConfigurationLoader(), **use_case_deps())

        with pytest.raises(UnicodeDecodeError):
            use_case.execute([str(target)])

    def test_reports_progress(self, swift_project: Path, use_case_deps) -> None:
        telemetry = MagicMock()
        use_case = LintUseCase(
            config_loader=ConfigurationLoader(), **use_case_deps(telemetry=telemetry)
        )

        use_case.execute([str(swift_project)])

        telemetry.step.assert_called_once_with("Linting 3 Swift file(s)...")
        telemetry.warning.assert_not_called()

    def test_warns_when_no_swift_files(self, tmp_path: Path, use_case_deps) -> None:
        (tmp_path / "README.md").write_text("", encoding="utf-8")
        telemetry = MagicMock()
        use_case = LintUseCase(
            config_loader=ConfigurationLoader(), **use_case_deps(telemetry=telemetry)
        )

        result = use_case.execute([str(tmp_path)])

        assert result.files_scanned == 0
        telemetry.warning.assert_called_once_with(f"No Swift files found in {tmp_path}")
