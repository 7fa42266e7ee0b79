"""
Safe file operations for Code Scout.

Every scanner reads through ``safe_read_file`` so that a failing call
surfaces exactly one ``FileAccessError`` or ``EncodingError``.
"""

from collections.abc import Generator
from pathlib import Path
from typing import Optional, Union

from .exceptions import EncodingError, FileAccessError
from .logging_config import get_logger

logger = get_logger(__name__)

# Bytes inspected when sniffing for binary content
BINARY_SNIFF_BYTES = 8000


def safe_read_file(filepath: Union[str, Path], encoding: str = "utf-8") -> str:
    """
    Read a whole text file.

    Args:
        filepath: File to read
        encoding: Text encoding (decoding is strict)

    Returns:
        File contents as string

    Raises:
        FileAccessError: If the file is missing, unreadable, or not a file
        EncodingError: If the content does not decode
    """
    try:
        with open(filepath, encoding=encoding) as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise EncodingError(filepath, str(e)) from e
    except OSError as e:
        raise FileAccessError(filepath, e.strerror or str(e)) from e


def is_binary_file(filepath: Union[str, Path]) -> bool:
    """
    Check whether a file looks binary (NUL byte near the start).

    Unreadable files are reported as not binary; the subsequent read
    reports the real error.
    """
    try:
        with open(filepath, "rb") as f:
            head = f.read(BINARY_SNIFF_BYTES)
    except OSError:
        return False
    return b"\x00" in head


def safe_scan_directory(
    root_dir: Path,
    should_ignore=None,
    max_file_size: Optional[int] = None,
    follow_symlinks: bool = False,
) -> Generator[Path, None, None]:
    """
    Walk a directory depth-first yielding scannable text files.

    Files of a directory come before its subdirectories, each group in
    name order.

    Args:
        root_dir: Directory to scan
        should_ignore: Optional predicate on the path relative to root_dir;
            ignored directories are not descended into
        max_file_size: Skip files larger than this many bytes
        follow_symlinks: Whether to follow symbolic links

    Yields:
        File paths

    Raises:
        FileAccessError: If root_dir is missing or cannot be listed
    """
    if not root_dir.is_dir():
        raise FileAccessError(root_dir, "Not a directory")

    pending = [root_dir]
    while pending:
        current = pending.pop()
        try:
            entries = sorted(current.iterdir(), reverse=True)
        except OSError as e:
            if current == root_dir:
                raise FileAccessError(root_dir, f"Directory scan failed: {e}") from e
            logger.warning(f"Skipping unreadable directory {current}: {e}")
            continue

        files = []
        for path in entries:
            if path.is_symlink() and not follow_symlinks:
                continue
            if should_ignore is not None and should_ignore(path.relative_to(root_dir)):
                continue
            if path.is_dir():
                pending.append(path)
            elif path.is_file():
                files.append(path)

        for path in reversed(files):
            if max_file_size is not None and path.stat().st_size > max_file_size:
                logger.debug(f"Skipped (size): {path}")
                continue
            if is_binary_file(path):
                logger.debug(f"Skipped (binary): {path}")
                continue
            yield path
