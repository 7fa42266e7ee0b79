"""Function boundary extraction.

Boundaries come from two cheap heuristics rather than a parser:

- brace families count ``{`` and ``}`` from the declaration line onward
  until the running depth returns to zero;
- indentation families end a function before the first non-blank line
  indented no deeper than the ``def`` line.

Braces inside strings or comments are counted like any other brace, so
boundaries can be wrong on such input. The brace scan is capped at
``MAX_SCAN_LINES`` lines past the declaration so unbalanced input always
terminates.
"""

from pathlib import Path
from typing import List, Optional, Union

from ..logging_config import get_logger
from ..models import FunctionRecord
from .base import BaseScanner, split_lines
from .languages import BLOCK_BRACE, BLOCK_INDENT, LanguageFamily, LanguagePatterns

logger = get_logger(__name__)

# Lines scanned past a declaration before giving up on finding its end
MAX_SCAN_LINES = 1000


def indent_width(line: str) -> int:
    """Count leading whitespace characters."""
    return len(line) - len(line.lstrip())


def brace_delta(line: str) -> int:
    return line.count("{") - line.count("}")


class FunctionExtractor(BaseScanner[FunctionRecord]):
    """Finds function declarations and computes their line spans."""

    def __init__(self, patterns=None, max_scan_lines: int = MAX_SCAN_LINES):
        super().__init__(patterns)
        if max_scan_lines < 1:
            raise ValueError("max_scan_lines must be at least 1")
        self.max_scan_lines = max_scan_lines

    def handles(self, patterns: LanguagePatterns) -> bool:
        return patterns.extracts_functions

    def scan_content(
        self, filepath: str, content: str, family: LanguageFamily
    ) -> List[FunctionRecord]:
        patterns = self.patterns_for(family)
        if not patterns.extracts_functions:
            return []

        lines = split_lines(content)
        functions: List[FunctionRecord] = []

        for index, line in enumerate(lines):
            subject = line.strip() if patterns.function_trimmed else line
            match = patterns.function_pattern.search(subject)
            if not match:
                continue

            if patterns.block_style == BLOCK_BRACE:
                end = self._find_brace_end(lines, index)
            elif patterns.block_style == BLOCK_INDENT:
                end = self._find_indent_end(lines, index)
            else:
                continue

            functions.append(
                FunctionRecord(
                    file=filepath,
                    name=match.group(1),
                    signature=line.strip(),
                    line_start=index + 1,
                    line_end=end + 1,
                    content="\n".join(lines[index : end + 1]),
                )
            )

        return functions

    def _find_brace_end(self, lines: List[str], start: int) -> int:
        """Return the 0-based index of the line closing the block opened at ``start``.

        The block ends once at least one brace has opened and the depth is
        back to zero, so ``{ ... }`` on the declaration line is a one-line
        function and a ``{`` on the following line is still found. A
        declaration ending in ``;`` before any brace has no body. If the
        depth never returns to zero the block is truncated at the last line
        consumed.
        """
        first = lines[start]
        depth = brace_delta(first)
        opened = "{" in first
        if opened and depth <= 0:
            return start
        if not opened and first.rstrip().endswith(";"):
            return start

        end = start
        for offset, line in enumerate(lines[start + 1 :], start=1):
            end = start + offset
            depth += brace_delta(line)
            opened = opened or "{" in line
            if opened and depth <= 0:
                return end
            if offset > self.max_scan_lines:
                logger.debug(
                    f"Brace scan from line {start + 1} hit the {self.max_scan_lines}-line cap"
                )
                break

        return end

    def _find_indent_end(self, lines: List[str], start: int) -> int:
        """Return the 0-based index of the last line belonging to the ``def`` at ``start``.

        Blank lines never end the body but trailing ones stay inside the span.
        """
        base_indent = indent_width(lines[start])
        end = start

        for index in range(start + 1, len(lines)):
            line = lines[index]
            if line.strip() and indent_width(line) <= base_indent:
                break
            end = index

        return end


def extract_functions(
    filepath: Union[str, Path], max_scan_lines: Optional[int] = None
) -> List[FunctionRecord]:
    """Extract the functions of one file using the default pattern table."""
    cap = MAX_SCAN_LINES if max_scan_lines is None else max_scan_lines
    extractor = FunctionExtractor(max_scan_lines=cap)
    return extractor.scan(filepath)
