"""Exception hierarchy for Code Scout.

    CodeScoutError
    ├── AnalysisError
    │   ├── FileAccessError
    │   ├── EncodingError
    │   └── UnsupportedLanguageError
    ├── ConfigurationError
    │   ├── ConfigFileError
    │   └── InvalidConfigError
    └── SerializationError
"""

from .analysis import AnalysisError, EncodingError, FileAccessError, UnsupportedLanguageError
from .base import CodeScoutError
from .config import ConfigFileError, ConfigurationError, InvalidConfigError
from .output import SerializationError

__all__ = [
    "CodeScoutError",
    "AnalysisError",
    "FileAccessError",
    "EncodingError",
    "UnsupportedLanguageError",
    "ConfigurationError",
    "ConfigFileError",
    "InvalidConfigError",
    "SerializationError",
]
