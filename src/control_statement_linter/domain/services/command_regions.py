"""
Inline suppression: `swiftlint:disable` / `swiftlint:enable` commands in comments.

    // swiftlint:disable control_statement
    // swiftlint:enable control_statement
    // swiftlint:disable:next control_statement
    // swiftlint:disable:this control_statement
    // swiftlint:disable:previous control_statement

A plain command takes effect from its own position onward. The `next`, `this`
and `previous` modifiers act on a single whole line and revert at its end.
"""

import re
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from control_statement_linter.domain.constants import COMMAND_PREFIX
from control_statement_linter.domain.protocols import (
    RuleEnablementProtocol,
    SourceFileProtocol,
    SyntaxClassifierProtocol,
)

_COMMAND_RE = re.compile(
    re.escape(COMMAND_PREFIX)
    + r"(?P<action>enable|disable)(?::(?P<modifier>previous|this|next))?"
    + r"(?P<rules>(?:[ \t]+[\w.-]+)+)"
)

_END_OF_LINE = sys.maxsize


class CommandAction(Enum):
    ENABLE = "enable"
    DISABLE = "disable"

    @property
    def inverse(self) -> "CommandAction":
        if self is CommandAction.ENABLE:
            return CommandAction.DISABLE
        return CommandAction.ENABLE


class CommandModifier(Enum):
    PREVIOUS = "previous"
    THIS = "this"
    NEXT = "next"


@dataclass(frozen=True)
class Command:
    """A parsed command positioned at the 1-based line/character of its text."""

    action: CommandAction
    rule_ids: tuple[str, ...]
    line: int
    character: int
    modifier: CommandModifier | None = None

    def expand(self) -> list["Command"]:
        """Lower modifiers into plain commands bracketing the affected line."""
        if self.modifier is None:
            return [self]
        target = self.line
        if self.modifier is CommandModifier.PREVIOUS:
            target -= 1
        elif self.modifier is CommandModifier.NEXT:
            target += 1
        return [
            Command(self.action, self.rule_ids, target, 0),
            Command(self.action.inverse, self.rule_ids, target, _END_OF_LINE),
        ]


class CommandRegionService(RuleEnablementProtocol):
    """Answers whether a rule is enabled at an offset, from the commands in one file."""

    def __init__(
        self, file: SourceFileProtocol, syntax: SyntaxClassifierProtocol
    ) -> None:
        self._file = file
        commands: list[Command] = []
        for command in self.parse_commands(file, syntax):
            commands.extend(command.expand())
        # sorted() is stable, so commands at the same position keep source order.
        self._commands = sorted(commands, key=lambda c: (c.line, c.character))

    @staticmethod
    def parse_commands(
        file: SourceFileProtocol, syntax: SyntaxClassifierProtocol
    ) -> list[Command]:
        """Commands are only honoured inside comment tokens."""
        contents = file.contents
        commands: list[Command] = []
        for token in syntax.comment_tokens():
            text = contents[token.start:token.end]
            for found in _COMMAND_RE.finditer(text):
                location = file.location(token.start + found.start())
                modifier = found.group("modifier")
                commands.append(
                    Command(
                        action=CommandAction(found.group("action")),
                        rule_ids=tuple(found.group("rules").split()),
                        line=location.line,
                        character=location.character,
                        modifier=CommandModifier(modifier) if modifier else None,
                    )
                )
        return commands

    @property
    def commands(self) -> list[Command]:
        return list(self._commands)

    def is_enabled(self, offset: int, rule_id: str) -> bool:
        location = self._file.location(offset)
        position = (location.line, location.character)
        disabled: set[str] = set()
        for command in self._commands:
            if (command.line, command.character) > position:
                break
            if command.action is CommandAction.DISABLE:
                disabled.update(command.rule_ids)
            else:
                disabled.difference_update(command.rule_ids)
        return rule_id not in disabled

    def filter_enabled(self, ranges: Iterable[range], rule_id: str) -> list[range]:
        """Keep ranges whose start is not inside a region disabling rule_id."""
        if not self._commands:
            return list(ranges)
        return [r for r in ranges if self.is_enabled(r.start, rule_id)]
