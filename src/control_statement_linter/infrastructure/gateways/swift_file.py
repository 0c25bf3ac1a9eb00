"""SwiftFile - Infrastructure implementation of SourceFileProtocol."""

import logging
from bisect import bisect_right
from pathlib import Path

from control_statement_linter.domain.entities import Location
from control_statement_linter.domain.protocols import SourceFileProtocol

logger = logging.getLogger(__name__)


class SwiftFile(SourceFileProtocol):
    """
    Source text plus its path. Offsets are indices into ``contents``.

    Files built with from_string have no path; write() then only replaces the
    in-memory contents.
    """

    def __init__(self, contents: str, path: str | None = None) -> None:
        self._path = path
        self._set_contents(contents)

    @classmethod
    def from_path(cls, path: str, encoding: str = "utf-8") -> "SwiftFile":
        """Read path. OSError and UnicodeDecodeError propagate."""
        return cls(Path(path).read_text(encoding=encoding), path=path)

    @classmethod
    def from_string(cls, contents: str) -> "SwiftFile":
        return cls(contents)

    @property
    def path(self) -> str | None:
        return self._path

    @property
    def contents(self) -> str:
        return self._contents

    def write(self, new_contents: str) -> None:
        """Write new_contents to disk (if backed by a path), then adopt them."""
        if self._path is not None:
            Path(self._path).write_text(new_contents, encoding="utf-8")
            logger.debug("Wrote %d characters to %s", len(new_contents), self._path)
        self._set_contents(new_contents)

    def location(self, offset: int) -> Location:
        index = bisect_right(self._line_starts, offset) - 1
        return Location(
            file=self._path,
            offset=offset,
            line=index + 1,
            character=offset - self._line_starts[index] + 1,
        )

    def _set_contents(self, contents: str) -> None:
        self._contents = contents
        self._line_starts = [0]
        self._line_starts.extend(
            i + 1 for i, char in enumerate(contents) if char == "\n"
        )
