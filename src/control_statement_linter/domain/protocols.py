from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from control_statement_linter.domain.entities import (
        Location,
        SyntaxKind,
        SyntaxToken,
    )


class SourceFileProtocol(Protocol):
    """Protocol for a source file the rules read and, when correcting, rewrite."""

    @property
    def path(self) -> str | None:
        ...

    @property
    def contents(self) -> str:
        ...

    def write(self, new_contents: str) -> None:
        """Persist new_contents. Raises OSError on failure."""
        ...

    def location(self, offset: int) -> "Location":
        """Convert a character offset into a Location with 1-based line/character."""
        ...


class SyntaxClassifierProtocol(Protocol):
    """Protocol for the per-offset lexical classification of a source file."""

    def classification_at(self, offset: int) -> "SyntaxKind":
        ...

    def comment_tokens(self) -> Iterator["SyntaxToken"]:
        ...


class RuleEnablementProtocol(Protocol):
    """Protocol for inline suppression: which ranges may a rule act on."""

    def filter_enabled(self, ranges: Iterable[range], rule_id: str) -> list[range]:
        """Return the subset of ranges where rule_id is not disabled."""
        ...

    def is_enabled(self, offset: int, rule_id: str) -> bool:
        ...


class TelemetryPort(Protocol):
    """Protocol for telemetry/UI updates."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...


class FileSystemProtocol(Protocol):
    """Protocol for filesystem operations - abstracts Path usage."""

    def glob_swift_files(self, path: str) -> list[str]:
        """Get all Swift files in path (recursive if directory)."""
        ...

    def filter_paths(
        self, paths: list[str], included: list[str], excluded: list[str]
    ) -> list[str]:
        """Keep paths under an included prefix (if any) and under no excluded prefix."""
        ...
