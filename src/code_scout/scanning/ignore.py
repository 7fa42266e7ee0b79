"""Default exclusion list used when walking a directory."""

from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

DEFAULT_IGNORE_PATTERNS: Tuple[str, ...] = (
    "node_modules",
    ".git",
    "dist",
    "build",
    "target",
    ".next",
    "out",
    "coverage",
    ".cache",
    ".vscode",
    ".idea",
    "__pycache__",
    "*.pyc",
    ".DS_Store",
    "Thumbs.db",
)


class IgnoreMatcher:
    """Decides whether a path is excluded.

    A token containing ``*`` matches on extension (``*.pyc`` matches any
    path whose extension is ``pyc``); any other token matches when it is a
    substring of the path. Substring matching is deliberately loose:
    ``out`` also excludes ``layout.ts``.
    """

    def __init__(
        self,
        custom_patterns: Optional[Iterable[str]] = None,
        defaults: Iterable[str] = DEFAULT_IGNORE_PATTERNS,
    ):
        self.patterns: Tuple[str, ...] = tuple(defaults) + tuple(custom_patterns or ())

    def should_ignore(self, path: Union[str, Path]) -> bool:
        path_str = str(path)
        extension = Path(path_str).suffix[1:]
        for pattern in self.patterns:
            if "*" in pattern:
                if extension and extension == pattern.lstrip("*").lstrip("."):
                    return True
            elif pattern in path_str:
                return True
        return False

    __call__ = should_ignore


def should_ignore(path: Union[str, Path], custom_patterns: Optional[Iterable[str]] = None) -> bool:
    """Check a path against the default and custom exclusion tokens."""
    return IgnoreMatcher(custom_patterns).should_ignore(path)
