"""Base class shared by the per-file scanners."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, List, Mapping, Optional, TypeVar, Union

from ..file_ops import safe_read_file
from ..logging_config import get_logger
from .languages import PATTERNS, LanguageFamily, LanguagePatterns, detect_family

logger = get_logger(__name__)

T = TypeVar("T")


class BaseScanner(ABC, Generic[T]):
    """Reads one file and turns its lines into records.

    Scanners hold no per-call state: the pattern table is injected at
    construction and treated as read-only, so one instance can serve
    many threads.
    """

    def __init__(self, patterns: Optional[Mapping[LanguageFamily, LanguagePatterns]] = None):
        self.patterns = patterns if patterns is not None else PATTERNS

    def patterns_for(self, family: LanguageFamily) -> LanguagePatterns:
        return self.patterns.get(family) or self.patterns[LanguageFamily.UNSUPPORTED]

    def scan(self, filepath: Union[str, Path]) -> List[T]:
        """
        Scan a file on disk.

        Args:
            filepath: File to scan; its extension selects the language family

        Returns:
            Records in order of appearance (empty for unsupported families)

        Raises:
            FileAccessError: If the file cannot be read
            EncodingError: If the file is not valid UTF-8
        """
        path = str(filepath)
        family = detect_family(path)
        if not self.handles(self.patterns_for(family)):
            logger.debug(f"{self.__class__.__name__}: nothing to scan for {path} ({family.value})")
            return []

        content = safe_read_file(path)
        records = self.scan_content(path, content, family)
        logger.debug(f"{self.__class__.__name__}: {len(records)} record(s) in {path}")
        return records

    def handles(self, patterns: LanguagePatterns) -> bool:
        """Whether this scanner has anything to do for a family."""
        return True

    @abstractmethod
    def scan_content(self, filepath: str, content: str, family: LanguageFamily) -> List[T]:
        """Scan already-loaded content attributed to ``filepath``."""


def split_lines(content: str) -> List[str]:
    """Split text into physical lines.

    Only ``\\n`` separates lines; a trailing ``\\r`` is dropped and a final
    newline does not produce an extra empty line.
    """
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
