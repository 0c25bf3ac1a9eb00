"""Unit tests for SwiftFile."""

from pathlib import Path

import pytest

from control_statement_linter.infrastructure.gateways.swift_file import SwiftFile


class TestLocation:
    """Offset to line/character conversion."""

    def test_first_character(self) -> None:
        location = SwiftFile.from_string("if (a) {}\n").location(0)
        assert (location.line, location.character) == (1, 1)
        assert location.file is None

    def test_later_lines(self) -> None:
        file = SwiftFile.from_string("a\nbc\n\ndef")
        assert (file.location(3).line, file.location(3).character) == (2, 2)
        assert (file.location(5).line, file.location(5).character) == (3, 1)
        assert (file.location(8).line, file.location(8).character) == (4, 3)

    def test_str_uses_path(self) -> None:
        file = SwiftFile("x\ny", path="Sources/A.swift")
        assert str(file.location(2)) == "Sources/A.swift:2:1"


class TestReadWrite:
    """Disk-backed files."""

    def test_from_path_reads_utf8(self, tmp_path: Path) -> None:
        target = tmp_path / "A.swift"
        target.write_text("if (a) {}\n", encoding="utf-8")

        file = SwiftFile.from_path(str(target))

        assert file.contents == "if (a) {}\n"
        assert file.path == str(target)

    def test_write_persists_and_reindexes(self, tmp_path: Path) -> None:
        target = tmp_path / "A.swift"
        target.write_text("x", encoding="utf-8")
        file = SwiftFile.from_path(str(target))

        file.write("a\nb")

        assert target.read_text(encoding="utf-8") == "a\nb"
        assert file.contents == "a\nb"
        assert file.location(2).line == 2

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            SwiftFile.from_path(str(tmp_path / "missing.swift"))

    def test_in_memory_write_only_updates_contents(self) -> None:
        file = SwiftFile.from_string("if (a) {}")
        file.write("if a {}")
        assert file.contents == "if a {}"
