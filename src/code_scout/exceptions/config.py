"""Errors raised while loading or validating configuration."""

from pathlib import Path
from typing import Any, Optional, Union

from .base import CodeScoutError


class ConfigurationError(CodeScoutError):
    """Base class for configuration errors.

    ``source`` names where the bad setting came from: a config file path or
    an environment variable.
    """

    def __init__(self, message: str, source: Optional[str] = None, **details: str):
        if source is not None:
            details["source"] = source
        super().__init__(message, details=details)
        self.source = source


class ConfigFileError(ConfigurationError):
    """A config file is missing or is not valid TOML."""

    def __init__(self, path: Union[str, Path], reason: str):
        super().__init__(f"Cannot load config file: {path}", source=str(path), reason=reason)
        self.path = Path(path)
        self.reason = reason


class InvalidConfigError(ConfigurationError):
    """A setting has a value of the wrong type or out of range."""

    def __init__(self, key: str, value: Any, reason: str, source: Optional[str] = None):
        super().__init__(
            f"Invalid value for {key}: {value!r}",
            source=source,
            key=key,
            reason=reason,
        )
        self.key = key
        self.value = value
        self.reason = reason
