"""Protocol for violation reporting - no infrastructure imports."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from control_statement_linter.domain.entities import Correction
    from control_statement_linter.domain.rules import Violation


class ViolationReporter(Protocol):
    """Protocol for rendering violations and corrections as text."""

    identifier: str

    def generate_report(self, violations: list["Violation"]) -> str:
        """Render violations in scan order."""
        ...

    def generate_correction_report(self, corrections: list["Correction"]) -> str:
        """Render the correction log."""
        ...
