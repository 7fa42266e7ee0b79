"""
Code Scout - heuristic multi-language source scanning

Finds imports, approximate function boundaries and TODO-style annotations
in source files, strips comments, guesses a directory's project type and
resolves relative imports to files on disk. Regex and brace/indent
heuristics only, so results are fast and approximate.
"""

__version__ = "0.3.0"

from .models import (
    AnnotationItem,
    Dependency,
    FileAnalysis,
    FunctionRecord,
    ProjectTypeGuess,
    TokenEstimate,
)
from .scanning import (
    LanguageFamily,
    detect_dependencies,
    detect_family,
    detect_project_type,
    estimate_tokens,
    extract_annotations,
    extract_functions,
    filter_comments,
    resolve_imports,
)

__all__ = [
    "LanguageFamily",
    "detect_family",
    "detect_dependencies",
    "extract_functions",
    "extract_annotations",
    "filter_comments",
    "detect_project_type",
    "resolve_imports",
    "estimate_tokens",
    "Dependency",
    "FunctionRecord",
    "AnnotationItem",
    "ProjectTypeGuess",
    "TokenEstimate",
    "FileAnalysis",
]
