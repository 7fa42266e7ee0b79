"""Runs the per-file scanners over a selection of files."""

from pathlib import Path
from typing import Iterable, Optional, Union

from ..exceptions import CodeScoutError
from ..file_ops import safe_read_file
from ..logging_config import get_logger
from ..models import FileAnalysis
from .annotations import AnnotationExtractor
from .dependencies import DependencyDetector
from .functions import MAX_SCAN_LINES, FunctionExtractor
from .languages import detect_family

logger = get_logger(__name__)


class FileAnalyzer:
    """Aggregates dependencies, functions and annotations across files.

    A file that fails to read is logged and recorded in
    ``FileAnalysis.failures``; the remaining files are still analyzed.
    """

    def __init__(
        self,
        dependency_detector: Optional[DependencyDetector] = None,
        function_extractor: Optional[FunctionExtractor] = None,
        annotation_extractor: Optional[AnnotationExtractor] = None,
        max_scan_lines: int = MAX_SCAN_LINES,
    ):
        self.dependency_detector = dependency_detector or DependencyDetector()
        self.function_extractor = function_extractor or FunctionExtractor(
            max_scan_lines=max_scan_lines
        )
        self.annotation_extractor = annotation_extractor or AnnotationExtractor()

    def analyze(self, paths: Iterable[Union[str, Path]]) -> FileAnalysis:
        result = FileAnalysis()

        for filepath in paths:
            path = str(filepath)
            result.files.append(path)
            try:
                content = safe_read_file(path)
            except CodeScoutError as e:
                logger.warning(f"Skipping {path}: {e}")
                result.failures[path] = str(e)
                continue

            # One read per file; every scanner sees the same content
            family = detect_family(path)
            dependencies = self.dependency_detector.scan_content(path, content, family)
            functions = self.function_extractor.scan_content(path, content, family)
            annotations = self.annotation_extractor.scan_content(path, content, family)

            result.dependencies.extend(dependencies)
            result.functions.extend(functions)
            result.annotations.extend(annotations)

        logger.debug(
            f"Analyzed {result.scanned_count}/{len(result.files)} file(s): "
            f"{len(result.dependencies)} deps, {len(result.functions)} functions, "
            f"{len(result.annotations)} annotations"
        )
        return result
