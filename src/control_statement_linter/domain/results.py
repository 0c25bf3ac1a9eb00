from dataclasses import dataclass, field

from control_statement_linter.domain.entities import Correction, Severity
from control_statement_linter.domain.rules import Violation


@dataclass(frozen=True)
class LintResult:
    """Violations across all scanned files."""

    violations: list[Violation] = field(default_factory=list)
    files_scanned: int = 0

    def has_violations(self) -> bool:
        return bool(self.violations)

    def has_errors(self) -> bool:
        """True if any violation has ERROR severity (fails CI)."""
        return any(v.severity is Severity.ERROR for v in self.violations)


@dataclass(frozen=True)
class AutocorrectResult:
    """Corrections applied across all scanned files."""

    corrections: list[Correction] = field(default_factory=list)
    files_scanned: int = 0
    files_corrected: int = 0
