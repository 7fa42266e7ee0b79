"""TODO/FIXME/NOTE/HACK/XXX markers in comments."""

import re
from pathlib import Path
from typing import List, Union

from ..models import AnnotationItem
from .base import BaseScanner, split_lines
from .languages import LanguageFamily

MARKERS = ("TODO", "FIXME", "NOTE", "HACK", "XXX")

# Comment opener, marker keyword, optional colon, free text
ANNOTATION_PATTERN = re.compile(
    r"(?://|#|/\*)\s*(" + "|".join(MARKERS) + r"):?\s*(.*)"
)


class AnnotationExtractor(BaseScanner[AnnotationItem]):
    """Emits one item per line carrying a marker right after a comment opener.

    Works on every file type since all three openers are tried on every
    line. Markers split across lines are not detected.
    """

    def scan_content(
        self, filepath: str, content: str, family: LanguageFamily = LanguageFamily.UNSUPPORTED
    ) -> List[AnnotationItem]:
        items: List[AnnotationItem] = []
        for line_num, line in enumerate(split_lines(content), start=1):
            match = ANNOTATION_PATTERN.search(line)
            if match:
                items.append(
                    AnnotationItem(
                        file=filepath,
                        todo_type=match.group(1),
                        message=match.group(2).strip(),
                        line_number=line_num,
                        context=line.strip(),
                    )
                )
        return items


def extract_annotations(filepath: Union[str, Path]) -> List[AnnotationItem]:
    """Extract the TODO-style annotations of one file."""
    return AnnotationExtractor().scan(filepath)
