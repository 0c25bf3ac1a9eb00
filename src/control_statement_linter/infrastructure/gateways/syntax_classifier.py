"""Swift lexical classifier: a flat token scan, no parse tree."""

import re
from bisect import bisect_right
from collections.abc import Iterator

from control_statement_linter.domain.entities import SyntaxKind, SyntaxToken
from control_statement_linter.domain.protocols import SyntaxClassifierProtocol

SWIFT_KEYWORDS = frozenset({
    # declarations
    "associatedtype", "class", "deinit", "enum", "extension", "fileprivate",
    "func", "import", "init", "inout", "internal", "let", "open", "operator",
    "private", "protocol", "public", "rethrows", "static", "struct",
    "subscript", "typealias", "var",
    # statements
    "break", "case", "continue", "default", "defer", "do", "else",
    "fallthrough", "for", "guard", "if", "in", "repeat", "return", "switch",
    "where", "while",
    # expressions and types
    "as", "Any", "catch", "false", "is", "nil", "super", "self", "Self",
    "throw", "throws", "true", "try",
})

_TOKEN_RE = re.compile(
    r"""
    (?P<line_comment>//[^\n]*)
    |(?P<block_comment>/\*)
    |(?P<multiline_string>\"\"\"(?:\\.|[^\\])*?\"\"\")
    |(?P<string>"(?:\\.|[^"\\\n])*"?)
    |(?P<number>\d[\d_]*(?:\.\d[\d_]*)?)
    |(?P<escaped_identifier>`[^`\n]+`)
    |(?P<directive>[@\#][A-Za-z_]\w*)
    |(?P<identifier>[A-Za-z_][A-Za-z0-9_]*)
    """,
    re.VERBOSE,
)

_GROUP_KINDS = {
    "line_comment": SyntaxKind.COMMENT,
    "block_comment": SyntaxKind.COMMENT,
    "multiline_string": SyntaxKind.STRING,
    "string": SyntaxKind.STRING,
    "number": SyntaxKind.NUMBER,
    "escaped_identifier": SyntaxKind.IDENTIFIER,
    "directive": SyntaxKind.OTHER,
}


class SwiftSyntaxClassifier(SyntaxClassifierProtocol):
    """Tokenizes Swift source once and answers per-offset classification queries."""

    def __init__(self, contents: str) -> None:
        self._tokens = self.tokenize(contents)
        self._starts = [token.start for token in self._tokens]

    @staticmethod
    def tokenize(contents: str) -> list[SyntaxToken]:
        """Return classified tokens in source order. Whitespace and punctuation are skipped."""
        tokens: list[SyntaxToken] = []
        pos = 0
        while True:
            found = _TOKEN_RE.search(contents, pos)
            if found is None:
                break
            group = found.lastgroup or ""
            start = found.start()
            end = found.end()
            if group == "block_comment":
                end = SwiftSyntaxClassifier._block_comment_end(contents, start)
            if group == "identifier":
                kind = (
                    SyntaxKind.KEYWORD
                    if found.group(0) in SWIFT_KEYWORDS
                    else SyntaxKind.IDENTIFIER
                )
            else:
                kind = _GROUP_KINDS[group]
            tokens.append(SyntaxToken(start=start, length=end - start, kind=kind))
            pos = end
        return tokens

    @staticmethod
    def _block_comment_end(contents: str, start: int) -> int:
        """End offset of the block comment opening at start. Swift block comments nest."""
        depth = 0
        index = start
        length = len(contents)
        while index < length:
            pair = contents[index:index + 2]
            if pair == "/*":
                depth += 1
                index += 2
            elif pair == "*/":
                depth -= 1
                index += 2
                if depth == 0:
                    return index
            else:
                index += 1
        # Unterminated: the comment runs to the end of the file.
        return length

    @property
    def tokens(self) -> list[SyntaxToken]:
        return list(self._tokens)

    def classification_at(self, offset: int) -> SyntaxKind:
        """Kind of the token covering offset; OTHER for whitespace and punctuation."""
        index = bisect_right(self._starts, offset) - 1
        if index < 0:
            return SyntaxKind.OTHER
        token = self._tokens[index]
        if token.start <= offset < token.end:
            return token.kind
        return SyntaxKind.OTHER

    def comment_tokens(self) -> Iterator[SyntaxToken]:
        return (t for t in self._tokens if t.kind is SyntaxKind.COMMENT)
