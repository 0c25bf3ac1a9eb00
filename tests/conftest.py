"""Pytest configuration and shared fixtures.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/ on
the import path.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from control_statement_linter.domain.rules.control_statement import (
    ControlStatementRule,
)
from control_statement_linter.infrastructure.gateways.filesystem_gateway import (
    FileSystemGateway,
)
from control_statement_linter.infrastructure.gateways.swift_file import SwiftFile
from control_statement_linter.infrastructure.gateways.syntax_classifier import (
    SwiftSyntaxClassifier,
)


def use_case_required_deps(**overrides: object) -> dict[str, object]:
    """Return real collaborators for LintUseCase / AutocorrectUseCase. Pass overrides to customize."""
    base: dict[str, object] = {
        "rules": [ControlStatementRule()],
        "filesystem": FileSystemGateway(),
        "file_factory": SwiftFile.from_path,
        "classifier_factory": SwiftSyntaxClassifier,
        "telemetry": MagicMock(),
    }
    base.update(overrides)
    return base


@pytest.fixture
def use_case_deps():
    return use_case_required_deps


@pytest.fixture
def swift_project(tmp_path: Path) -> Path:
    """A small project: two offending files under Sources/, one under Pods/."""
    sources = tmp_path / "Sources"
    sources.mkdir()
    (sources / "A.swift").write_text(
        "if (condition) {\n}\nwhile (x) {\n}\n", encoding="utf-8"
    )
    (sources / "B.swift").write_text(
        "if ((a || b) && (c || d)) {}\n"
        "if (a || b) && (c || d) {}\n", encoding="utf-8"
    )
    pods = tmp_path / "Pods"
    pods.mkdir()
    (pods / "C.swift").write_text("if (vendor) {}\n", encoding="utf-8")
    return tmp_path
