"""Domain entities: statement kinds, syntax kinds, matches, locations and corrections."""

from dataclasses import dataclass, field
from enum import Enum


class StatementKind(Enum):
    """Control statements whose condition may be wrapped in parentheses."""
    IF = "if"
    FOR = "for"
    GUARD = "guard"
    SWITCH = "switch"
    WHILE = "while"


class SyntaxKind(Enum):
    """Lexical classification of a token in Swift source."""
    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    STRING = "string"
    COMMENT = "comment"
    NUMBER = "number"
    OTHER = "other"


class Severity(Enum):
    """Severity attached to every violation a rule emits."""
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class SyntaxToken:
    """A classified span of source text."""

    start: int
    length: int
    kind: SyntaxKind

    @property
    def end(self) -> int:
        return self.start + self.length


@dataclass(frozen=True)
class Match:
    """
    A candidate wrapped conditional found by a statement pattern.

    Lives only for the duration of one scan. ``captured`` holds the text inside
    the outer parentheses when the pattern captures it, else None.
    """

    start: int
    length: int
    text: str
    syntax_kind: SyntaxKind
    captured: str | None = None

    @property
    def end(self) -> int:
        return self.start + self.length

    @property
    def range(self) -> range:
        return range(self.start, self.end)


@dataclass(frozen=True)
class Location:
    """Position in a source file. Line and character are 1-based."""

    file: str | None
    offset: int
    line: int
    character: int

    def __str__(self) -> str:
        return f"{self.file or '<nopath>'}:{self.line}:{self.character}"


@dataclass(frozen=True)
class Correction:
    """One rewritten occurrence, located in the text as it was before the rewrite."""

    rule_id: str
    rule_name: str
    location: Location


@dataclass(frozen=True)
class RuleDescription:
    """Static metadata for a rule: identity plus example tables used by tests and `rules`."""

    identifier: str
    name: str
    description: str
    non_triggering_examples: tuple[str, ...] = ()
    triggering_examples: tuple[str, ...] = ()
    corrections: dict[str, str] = field(default_factory=dict)
