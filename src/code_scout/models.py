"""Data models for Code Scout.

Every record is a value object produced fresh by a scan. ``to_dict`` gives
the interchange shape consumed by the CLI's JSON output and by callers that
serialize results themselves.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class Dependency:
    """An import/require/use statement found in a file.

    Attributes:
        file: Path of the file the statement was found in
        dependency: Raw specifier as written (e.g. "./utils", "os")
        import_type: One of "import", "require", "use", "from"
        line_number: 1-indexed line of the statement
    """

    file: str
    dependency: str
    import_type: str
    line_number: int

    @property
    def is_path_like(self) -> bool:
        """True if the specifier looks like a filesystem path."""
        return self.dependency.startswith((".", "/"))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class FunctionRecord:
    """A function found by the boundary heuristics.

    ``content`` is exactly the source lines ``line_start..line_end``
    (inclusive, 1-indexed) joined with newlines.
    """

    file: str
    name: str
    signature: str
    line_start: int
    line_end: int
    content: str

    @property
    def line_count(self) -> int:
        return self.line_end - self.line_start + 1

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class AnnotationItem:
    """A TODO-style marker found in a comment."""

    file: str
    todo_type: str
    message: str
    line_number: int
    context: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ProjectTypeGuess:
    """Best guess at a directory's ecosystem.

    Attributes:
        detected_type: Ecosystem label, or "Unknown"
        confidence: Winner's score over the marker-table size, in [0, 1]
        indicators: Marker filenames actually found, in table order
    """

    detected_type: str
    confidence: float
    indicators: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class TokenEstimate:
    """Approximate token counts for a block of text."""

    total_tokens: int
    char_count: int
    word_count: int
    line_count: int
    gpt4_estimate: int
    claude_estimate: int
    gemini_estimate: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class FileAnalysis:
    """Aggregated scan results over a selection of files.

    ``failures`` maps a file path to the error message that made the
    analyzer skip it.
    """

    files: List[str] = field(default_factory=list)
    dependencies: List[Dependency] = field(default_factory=list)
    functions: List[FunctionRecord] = field(default_factory=list)
    annotations: List[AnnotationItem] = field(default_factory=list)
    failures: Dict[str, str] = field(default_factory=dict)

    @property
    def scanned_count(self) -> int:
        return len(self.files) - len(self.failures)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "files": list(self.files),
            "dependencies": [d.to_dict() for d in self.dependencies],
            "functions": [f.to_dict() for f in self.functions],
            "annotations": [a.to_dict() for a in self.annotations],
            "failures": dict(self.failures),
        }
