"""Scan-related exceptions: file access, decoding, unsupported input."""

from pathlib import Path
from typing import List, Union

from .base import CodeScoutError

PathLike = Union[str, Path]


class AnalysisError(CodeScoutError):
    """Base class for scan-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a file or directory cannot be read.

    This is the single I/O failure a scanner call surfaces: missing file,
    permission denied, missing directory.
    """

    def __init__(self, filepath: PathLike, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class EncodingError(AnalysisError):
    """Raised when file content is not valid UTF-8."""

    def __init__(self, filepath: PathLike, reason: str):
        super().__init__(
            f"Cannot decode file as UTF-8: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class UnsupportedLanguageError(AnalysisError):
    """Raised when a caller requires a supported language family."""

    def __init__(self, extension: str, supported_extensions: List[str]):
        super().__init__(
            f"Unsupported file extension: {extension or '<none>'}",
            details={"extension": extension, "supported": ", ".join(supported_extensions)},
        )
        self.extension = extension
        self.supported_extensions = supported_extensions
