"""Heuristic multi-language source scanning."""

from .analyzer import FileAnalyzer
from .annotations import ANNOTATION_PATTERN, MARKERS, AnnotationExtractor, extract_annotations
from .base import BaseScanner, split_lines
from .comments import filter_comments, strip_c_comments, strip_hash_comments
from .dependencies import DependencyDetector, detect_dependencies
from .functions import MAX_SCAN_LINES, FunctionExtractor, extract_functions
from .ignore import DEFAULT_IGNORE_PATTERNS, IgnoreMatcher, should_ignore
from .languages import (
    EXTENSION_FAMILIES,
    PATTERNS,
    LanguageFamily,
    LanguagePatterns,
    as_family,
    detect_family,
    family_for_extension,
    file_extension,
    supported_extensions,
)
from .project_type import MARKERS as PROJECT_MARKERS
from .project_type import ProjectTypeDetector, detect_project_type
from .resolver import RESOLVE_EXTENSIONS, ImportResolver, resolve_imports
from .tokens import estimate_tokens, estimate_tokens_batch

__all__ = [
    # Pattern library
    "LanguageFamily",
    "LanguagePatterns",
    "PATTERNS",
    "EXTENSION_FAMILIES",
    "detect_family",
    "family_for_extension",
    "file_extension",
    "as_family",
    "supported_extensions",
    # Scanners
    "BaseScanner",
    "split_lines",
    "DependencyDetector",
    "FunctionExtractor",
    "AnnotationExtractor",
    "FileAnalyzer",
    "MAX_SCAN_LINES",
    "MARKERS",
    "ANNOTATION_PATTERN",
    # Comment filter
    "filter_comments",
    "strip_c_comments",
    "strip_hash_comments",
    # Directory-level
    "ProjectTypeDetector",
    "PROJECT_MARKERS",
    "ImportResolver",
    "RESOLVE_EXTENSIONS",
    "IgnoreMatcher",
    "DEFAULT_IGNORE_PATTERNS",
    "should_ignore",
    # Tokens
    "estimate_tokens",
    "estimate_tokens_batch",
    # Convenience functions
    "detect_dependencies",
    "extract_functions",
    "extract_annotations",
    "detect_project_type",
    "resolve_imports",
]
