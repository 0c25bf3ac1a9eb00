"""Domain models for rules and violations."""

from dataclasses import dataclass

__all__ = [
    "Checkable",
    "Correctable",
    "Violation",
]

from typing import TYPE_CHECKING, Protocol

from control_statement_linter.domain.entities import (
    Correction,
    Location,
    RuleDescription,
    Severity,
)

if TYPE_CHECKING:
    from control_statement_linter.domain.config import SeverityConfiguration
    from control_statement_linter.domain.protocols import (
        RuleEnablementProtocol,
        SourceFileProtocol,
        SyntaxClassifierProtocol,
    )


@dataclass(frozen=True)
class Violation:
    """A rule violation with rule id, severity, location and reason."""

    rule_id: str
    severity: Severity
    location: Location
    reason: str
    rule_name: str = ""

    @classmethod
    def from_description(
        cls,
        *,
        description: RuleDescription,
        severity: Severity,
        location: Location,
    ) -> "Violation":
        """Build a Violation whose id, name and reason come from the rule description."""
        return cls(
            rule_id=description.identifier,
            severity=severity,
            location=location,
            reason=description.description,
            rule_name=description.name,
        )


# -----------------------------------------------------------------------------
# Rule protocols: Checkable (report only) and Correctable (report + rewrite).
# Rules hold no per-file state; the file, its classification and configuration
# are passed into every call.
# -----------------------------------------------------------------------------


class Checkable(Protocol):
    """Rule that reports violations over one source file."""

    description: RuleDescription

    def validate(
        self,
        file: "SourceFileProtocol",
        syntax: "SyntaxClassifierProtocol",
        configuration: "SeverityConfiguration",
    ) -> list[Violation]:
        """Return every violation in file. Read-only."""
        ...


class Correctable(Checkable, Protocol):
    """Rule that can also rewrite the file to remove its violations."""

    def correct(
        self,
        file: "SourceFileProtocol",
        syntax: "SyntaxClassifierProtocol",
        enablement: "RuleEnablementProtocol",
    ) -> list[Correction]:
        """
        Rewrite eligible occurrences in file and persist the result once.

        Returns one Correction per rewritten occurrence, or [] when nothing was
        written.
        """
        ...
