"""Best-effort mapping of relative import specifiers to files on disk."""

import os
from pathlib import Path
from typing import List, Optional, Sequence, Set, Union

from ..logging_config import get_logger
from .dependencies import DependencyDetector

logger = get_logger(__name__)

# Tried in order, first as "<spec>.<ext>", then as "<spec>/index.<ext>"
RESOLVE_EXTENSIONS: tuple[str, ...] = ("js", "jsx", "ts", "tsx", "css", "scss", "json", "py", "rs")


class ImportResolver:
    """Resolves the path-like dependencies of one file.

    Specifiers not starting with ``.`` or ``/`` are treated as package
    imports and skipped. Unresolvable specifiers are dropped silently.
    """

    def __init__(
        self,
        detector: Optional[DependencyDetector] = None,
        extensions: Sequence[str] = RESOLVE_EXTENSIONS,
    ):
        self.detector = detector or DependencyDetector()
        self.extensions = tuple(extensions)

    def resolve(self, filepath: Union[str, Path]) -> List[str]:
        """
        Resolve a file's relative imports.

        Args:
            filepath: Importing file

        Returns:
            Sorted, de-duplicated absolute paths of the files found

        Raises:
            FileAccessError: If the importing file cannot be read
            EncodingError: If the importing file is not valid UTF-8
        """
        base_dir = Path(os.path.abspath(filepath)).parent
        resolved: Set[str] = set()

        for dep in self.detector.scan(filepath):
            if not dep.is_path_like:
                continue
            candidate = self.resolve_specifier(base_dir, dep.dependency)
            if candidate is None:
                logger.debug(f"Unresolved import {dep.dependency!r} in {filepath}:{dep.line_number}")
                continue
            resolved.add(candidate)

        return sorted(resolved)

    def resolve_specifier(self, base_dir: Path, specifier: str) -> Optional[str]:
        """Return the normalized path a specifier points at, or None."""
        target = base_dir / specifier

        if target.is_file():
            return os.path.normpath(target)

        # A trailing "/", "." or ".." names a directory: only index files are tried
        names_directory = specifier.endswith("/") or specifier.split("/")[-1] in (".", "..")
        for ext in () if names_directory else self.extensions:
            with_ext = Path(f"{target}.{ext}")
            if with_ext.is_file():
                return os.path.normpath(with_ext)

        for ext in self.extensions:
            index_file = target / f"index.{ext}"
            if index_file.is_file():
                return os.path.normpath(index_file)

        return None


def resolve_imports(filepath: Union[str, Path]) -> List[str]:
    """Resolve a file's relative imports with the default extension list."""
    return ImportResolver().resolve(filepath)
