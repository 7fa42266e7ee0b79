"""Dependency detection: import/require/use statements, line by line."""

from pathlib import Path
from typing import List, Union

from ..models import Dependency
from .base import BaseScanner, split_lines
from .languages import LanguageFamily, LanguagePatterns


class DependencyDetector(BaseScanner[Dependency]):
    """Applies a family's import patterns to each physical line.

    Patterns never span lines. A line can yield more than one dependency
    when several patterns match it; output is in line order, then pattern
    order. Grouped imports (``use a::{b, c};``) stay a single raw specifier.
    """

    def handles(self, patterns: LanguagePatterns) -> bool:
        return bool(patterns.import_patterns)

    def scan_content(self, filepath: str, content: str, family: LanguageFamily) -> List[Dependency]:
        patterns = self.patterns_for(family)
        if not patterns.import_patterns:
            return []

        deps: List[Dependency] = []
        for line_num, line in enumerate(split_lines(content), start=1):
            subject = line.strip() if patterns.match_trimmed else line
            for import_type, regex in patterns.import_patterns:
                match = regex.search(subject)
                if match:
                    deps.append(
                        Dependency(
                            file=filepath,
                            dependency=match.group(1),
                            import_type=import_type,
                            line_number=line_num,
                        )
                    )
        return deps


def detect_dependencies(filepath: Union[str, Path]) -> List[Dependency]:
    """Detect the dependencies of one file using the default pattern table."""
    return DependencyDetector().scan(filepath)
