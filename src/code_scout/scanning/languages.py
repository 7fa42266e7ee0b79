"""Language families and their pattern tables.

Adding a language:
  1. Map its extension(s) to a family in EXTENSION_FAMILIES.
  2. If it needs its own import/function rules, add a LanguagePatterns
     entry to PATTERNS. Scanners pick it up automatically.

All regexes are compiled once at import time and the tables are never
mutated, so scanners can share them across threads.
"""

from __future__ import annotations

import re as _re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Union


class LanguageFamily(Enum):
    """Classification of a file by extension."""

    BRACE = "brace"  # JavaScript / TypeScript
    PYTHON = "python"
    RUST = "rust"
    GO = "go"
    C_STYLE = "c_style"  # other // and /* */ languages, comment filtering only
    HASH = "hash"  # shell scripts, comment filtering only
    UNSUPPORTED = "unsupported"


# Block delimiting styles used by the function extractor
BLOCK_BRACE = "brace"
BLOCK_INDENT = "indent"

# Comment syntaxes used by the comment filter
COMMENT_C = "c"
COMMENT_HASH = "hash"


@dataclass(frozen=True)
class LanguagePatterns:
    """Everything the scanners need to know about one language family.

    Attributes:
        family: Family these patterns belong to
        import_patterns: Ordered (import_type, regex) pairs; group 1 is the
            dependency specifier
        match_trimmed: Run import patterns against the stripped line
        function_pattern: Declaration regex; group 1 is the function name
        function_trimmed: Run the declaration regex against the stripped line
        block_style: BLOCK_BRACE, BLOCK_INDENT, or None (no extraction)
        comment_style: COMMENT_C, COMMENT_HASH, or None (passthrough)
    """

    family: LanguageFamily
    import_patterns: tuple[tuple[str, _re.Pattern[str]], ...] = ()
    match_trimmed: bool = False
    function_pattern: Optional[_re.Pattern[str]] = None
    function_trimmed: bool = False
    block_style: Optional[str] = None
    comment_style: Optional[str] = None

    @property
    def extracts_functions(self) -> bool:
        return self.function_pattern is not None and self.block_style is not None


# ── Re-usable building blocks ──────────────────────────────────────

_JS_IMPORT = _re.compile(r"""import\s+.*?\s+from\s+['"]([^'"]+)['"]""")
_JS_REQUIRE = _re.compile(r"""require\(['"]([^'"]+)['"]\)""")
_PY_IMPORT = _re.compile(r"^import\s+(.+)$")
_PY_FROM = _re.compile(r"^from\s+(.+?)\s+import")
_RUST_USE = _re.compile(r"^use\s+([^;]+);")
_GO_IMPORT = _re.compile(r'import\s+"([^"]+)"')

_JS_FUNCTION = _re.compile(
    r"(?:function|const|let|var)\s+(\w+)\s*=?\s*(?:async\s*)?\([^)]*\)\s*(?:=>)?\s*\{"
)
_RUST_FUNCTION = _re.compile(r"fn\s+(\w+)\s*\([^)]*\)")
_PY_FUNCTION = _re.compile(r"^def\s+(\w+)\s*\([^)]*\):")


# ── Family definitions ─────────────────────────────────────────────

PATTERNS: Mapping[LanguageFamily, LanguagePatterns] = MappingProxyType(
    {
        LanguageFamily.BRACE: LanguagePatterns(
            family=LanguageFamily.BRACE,
            import_patterns=(("import", _JS_IMPORT), ("require", _JS_REQUIRE)),
            function_pattern=_JS_FUNCTION,
            block_style=BLOCK_BRACE,
            comment_style=COMMENT_C,
        ),
        LanguageFamily.PYTHON: LanguagePatterns(
            family=LanguageFamily.PYTHON,
            import_patterns=(("import", _PY_IMPORT), ("from", _PY_FROM)),
            match_trimmed=True,
            function_pattern=_PY_FUNCTION,
            function_trimmed=True,
            block_style=BLOCK_INDENT,
            comment_style=COMMENT_HASH,
        ),
        LanguageFamily.RUST: LanguagePatterns(
            family=LanguageFamily.RUST,
            import_patterns=(("use", _RUST_USE),),
            match_trimmed=True,
            function_pattern=_RUST_FUNCTION,
            block_style=BLOCK_BRACE,
            comment_style=COMMENT_C,
        ),
        LanguageFamily.GO: LanguagePatterns(
            family=LanguageFamily.GO,
            import_patterns=(("import", _GO_IMPORT),),
            comment_style=COMMENT_C,
        ),
        LanguageFamily.C_STYLE: LanguagePatterns(
            family=LanguageFamily.C_STYLE,
            comment_style=COMMENT_C,
        ),
        LanguageFamily.HASH: LanguagePatterns(
            family=LanguageFamily.HASH,
            comment_style=COMMENT_HASH,
        ),
        LanguageFamily.UNSUPPORTED: LanguagePatterns(family=LanguageFamily.UNSUPPORTED),
    }
)


# Extension (no leading dot, case-sensitive) to family
EXTENSION_FAMILIES: Mapping[str, LanguageFamily] = MappingProxyType(
    {
        "js": LanguageFamily.BRACE,
        "jsx": LanguageFamily.BRACE,
        "ts": LanguageFamily.BRACE,
        "tsx": LanguageFamily.BRACE,
        "mjs": LanguageFamily.BRACE,
        "py": LanguageFamily.PYTHON,
        "rs": LanguageFamily.RUST,
        "go": LanguageFamily.GO,
        "java": LanguageFamily.C_STYLE,
        "c": LanguageFamily.C_STYLE,
        "cpp": LanguageFamily.C_STYLE,
        "sh": LanguageFamily.HASH,
        "bash": LanguageFamily.HASH,
    }
)

FamilyOrExtension = Union[LanguageFamily, str]


def file_extension(path: Union[str, Path]) -> str:
    """Return a path's extension without the leading dot ("" if none)."""
    return Path(path).suffix[1:]


def family_for_extension(extension: str) -> LanguageFamily:
    """Classify a bare extension. Unknown or empty -> UNSUPPORTED."""
    return EXTENSION_FAMILIES.get(extension, LanguageFamily.UNSUPPORTED)


def detect_family(path: Union[str, Path]) -> LanguageFamily:
    """Classify a file path by its extension."""
    return family_for_extension(file_extension(path))


def as_family(value: FamilyOrExtension) -> LanguageFamily:
    """Accept either a LanguageFamily or a bare extension string."""
    if isinstance(value, LanguageFamily):
        return value
    return family_for_extension(value)


def supported_extensions(functions_only: bool = False) -> list[str]:
    """Extensions that map to a family other than UNSUPPORTED.

    With ``functions_only`` only extensions whose family supports function
    extraction are listed.
    """
    if not functions_only:
        return sorted(EXTENSION_FAMILIES)
    return sorted(
        ext for ext, family in EXTENSION_FAMILIES.items() if PATTERNS[family].extracts_functions
    )
