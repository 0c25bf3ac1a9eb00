"""Control Statement rule: control statements shouldn't wrap their conditionals in parentheses."""

import re
from collections.abc import Iterator

from control_statement_linter.domain.config import SeverityConfiguration
from control_statement_linter.domain.entities import (
    Correction,
    Match,
    RuleDescription,
    StatementKind,
    SyntaxKind,
)
from control_statement_linter.domain.protocols import (
    RuleEnablementProtocol,
    SourceFileProtocol,
    SyntaxClassifierProtocol,
)
from control_statement_linter.domain.rules import Correctable, Violation


class ControlStatementRule(Correctable):
    """Rule for control_statement: `if (x) {` should read `if x {`. Corrects `if` only."""

    description = RuleDescription(
        identifier="control_statement",
        name="Control Statement",
        description=(
            "if,for,while,do statements shouldn't wrap their conditionals in parentheses."
        ),
        non_triggering_examples=(
            "if condition {\n",
            "if (a, b) == (0, 1) {\n",
            "if (a || b) && (c || d) {\n",
            "if (min...max).contains(value) {\n",
            "if renderGif(data) {\n",
            "renderGif(data)\n",
            "for item in collection {\n",
            "for (key, value) in dictionary {\n",
            "for (index, value) in enumerate(array) {\n",
            "for var index = 0; index < 42; index++ {\n",
            "guard condition else {\n",
            "while condition {\n",
            "} while condition {\n",
            "do { ; } while condition {\n",
            "switch foo {\n",
        ),
        triggering_examples=(
            "↓if (condition) {\n",
            "↓if(condition) {\n",
            "↓if ((a || b) && (c || d)) {\n",
            "↓if ((min...max).contains(value)) {\n",
            "↓for (item in collection) {\n",
            "↓for (var index = 0; index < 42; index++) {\n",
            "↓for(item in collection) {\n",
            "↓for(var index = 0; index < 42; index++) {\n",
            "↓guard (condition) else {\n",
            "↓while (condition) {\n",
            "↓while(condition) {\n",
            "} ↓while (condition) {\n",
            "} ↓while(condition) {\n",
            "do { ; } ↓while(condition) {\n",
            "do { ; } ↓while (condition) {\n",
            "↓switch (foo) {\n",
        ),
        corrections={
            "if (condition) {}\n": "if condition {}\n",
            "if ((a || b) && (c || d)) {}\n": "if (a || b) && (c || d) {}\n",
            "if ((min...max).contains(value)) {\n": "if (min...max).contains(value) {\n",
        },
    )

    # -- matching ---------------------------------------------------------

    @staticmethod
    def pattern_for(kind: StatementKind) -> str:
        """Pattern for `kind (...) {`; guard also requires `else` before the brace."""
        # Commas are excluded so tuple conditions like `(a, b) == (0, 1)` never match.
        if kind is StatementKind.GUARD:
            return rf"{kind.value}\s*\([^,{{]*\)\s*else\s*\{{"
        return rf"{kind.value}\s*\([^,{{]*\)\s*\{{"

    @staticmethod
    def correction_pattern() -> str:
        """Capturing `if` pattern; group 1 is the text inside the outer parentheses."""
        return r"if\s*\(([^,{]*)\)\s*\{"

    @staticmethod
    def scan(
        contents: str, syntax: SyntaxClassifierProtocol, pattern: str
    ) -> Iterator[Match]:
        """Yield non-overlapping matches of pattern, tagged with the kind at their start."""
        for found in re.finditer(pattern, contents):
            start = found.start()
            yield Match(
                start=start,
                length=found.end() - start,
                text=found.group(0),
                syntax_kind=syntax.classification_at(start),
                captured=found.group(1) if found.re.groups else None,
            )

    @staticmethod
    def is_false_positive(content: str, syntax_kind: SyntaxKind | None) -> bool:
        """
        True when the match is not a real wrapped conditional.

        Either the leading token is not a keyword (string, comment, identifier),
        or the first-opened parenthesis closes before the final `)`, e.g.
        `if (a || b) && (c || d) {` or `if (min...max).contains(value) {`.
        """
        if syntax_kind is not SyntaxKind.KEYWORD:
            return True

        last_closing = content.rfind(")")
        if last_closing == -1:
            return False

        depth = 0
        for index, char in enumerate(content):
            if char == ")":
                if index != last_closing and depth == 1:
                    return True
                depth -= 1
            elif char == "(":
                depth += 1
        return False

    # -- reporting --------------------------------------------------------

    def validate(
        self,
        file: SourceFileProtocol,
        syntax: SyntaxClassifierProtocol,
        configuration: SeverityConfiguration,
    ) -> list[Violation]:
        """Report every wrapped conditional, kind by kind, in source order."""
        contents = file.contents
        violations: list[Violation] = []
        for kind in StatementKind:
            for match in self.scan(contents, syntax, self.pattern_for(kind)):
                if self.is_false_positive(match.text, match.syntax_kind):
                    continue
                violations.append(
                    Violation.from_description(
                        description=self.description,
                        severity=configuration.severity,
                        location=file.location(match.start),
                    )
                )
        return violations

    # -- correcting -------------------------------------------------------

    def correct(
        self,
        file: SourceFileProtocol,
        syntax: SyntaxClassifierProtocol,
        enablement: RuleEnablementProtocol,
    ) -> list[Correction]:
        """
        Rewrite every eligible `if (condition) {` to `if condition {`.

        Enablement filtering happens after false-positive filtering and before
        any mutation. Matches are rewritten last-first so the offsets of earlier
        ones stay valid. The file is written once; if that raises, nothing is
        reported.
        """
        contents = file.contents
        matches = [
            match
            for match in self.scan(contents, syntax, self.correction_pattern())
            if not self.is_false_positive(match.text, match.syntax_kind)
        ]
        if not matches:
            return []

        enabled = set(
            (r.start, r.stop)
            for r in enablement.filter_enabled(
                [m.range for m in matches], self.description.identifier
            )
        )
        eligible = [m for m in matches if (m.start, m.end) in enabled]
        if not eligible:
            return []

        corrections: list[Correction] = []
        for match in sorted(eligible, key=lambda m: m.start, reverse=True):
            corrections.append(
                Correction(
                    rule_id=self.description.identifier,
                    rule_name=self.description.name,
                    location=file.location(match.start),
                )
            )
            contents = f"{contents[:match.start]}if {match.captured} {{{contents[match.end:]}"
        file.write(contents)
        return corrections
