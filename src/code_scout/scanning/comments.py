"""Comment stripping keyed by language family.

The transforms are regex based and do not understand string literals, so
comment-like text inside strings is stripped too.
"""

import re

from .base import split_lines
from .languages import COMMENT_C, COMMENT_HASH, PATTERNS, FamilyOrExtension, as_family

_BLOCK_COMMENT = re.compile(r"/\*[\s\S]*?\*/")
_LINE_COMMENT = re.compile(r"//.*$", re.MULTILINE)


def strip_c_comments(content: str) -> str:
    """Remove ``/* */`` blocks, then ``//`` tails, then blank lines.

    Text without any comment is returned unchanged, blank lines included.
    """
    result = _BLOCK_COMMENT.sub("", content)
    result = _LINE_COMMENT.sub("", result)
    if result == content:
        return content
    return "\n".join(line for line in split_lines(result) if line.strip())


def strip_hash_comments(content: str) -> str:
    """Drop whole-line ``#`` comments. Trailing ``#`` comments are kept."""
    lines = split_lines(content)
    kept = [line for line in lines if not line.strip().startswith("#")]
    if len(kept) == len(lines):
        return content
    return "\n".join(kept)


def filter_comments(content: str, language: FamilyOrExtension, include: bool = False) -> str:
    """
    Strip comments from source text.

    Args:
        content: Source text
        language: LanguageFamily or bare file extension (e.g. "ts")
        include: Keep comments; the content is returned unchanged

    Returns:
        Comment-free text, or ``content`` itself for passthrough cases
    """
    if include:
        return content

    style = PATTERNS[as_family(language)].comment_style
    if style == COMMENT_C:
        return strip_c_comments(content)
    if style == COMMENT_HASH:
        return strip_hash_comments(content)
    return content
