"""Filesystem Gateway - Infrastructure implementation of FileSystemProtocol."""

from pathlib import Path

from control_statement_linter.domain.constants import SWIFT_FILE_SUFFIX
from control_statement_linter.domain.protocols import FileSystemProtocol


class FileSystemGateway(FileSystemProtocol):
    """Infrastructure implementation of FileSystemProtocol using pathlib."""

    def glob_swift_files(self, path: str) -> list[str]:
        """Get all Swift files in path (recursive if directory), sorted."""
        path_obj = Path(path)
        if path_obj.is_dir():
            return sorted(str(p) for p in path_obj.glob(f"**/*{SWIFT_FILE_SUFFIX}") if p.is_file())
        return [str(path_obj)] if path_obj.suffix == SWIFT_FILE_SUFFIX else []

    def filter_paths(
        self, paths: list[str], included: list[str], excluded: list[str]
    ) -> list[str]:
        """Keep paths under an included prefix (if any) and under no excluded prefix."""
        resolved_included = [Path(p).resolve() for p in included]
        resolved_excluded = [Path(p).resolve() for p in excluded]
        kept: list[str] = []
        for path in paths:
            resolved = Path(path).resolve()
            if resolved_included and not any(
                self._is_under(resolved, root) for root in resolved_included
            ):
                continue
            if any(self._is_under(resolved, root) for root in resolved_excluded):
                continue
            kept.append(path)
        return kept

    @staticmethod
    def _is_under(path: Path, root: Path) -> bool:
        return path == root or root in path.parents
