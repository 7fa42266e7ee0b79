"""Tests for the exception hierarchy."""

import pytest

from code_scout.exceptions import (
    AnalysisError,
    CodeScoutError,
    ConfigFileError,
    ConfigurationError,
    EncodingError,
    FileAccessError,
    InvalidConfigError,
    SerializationError,
    UnsupportedLanguageError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "error,parent",
        [
            (FileAccessError("a.py", "missing"), AnalysisError),
            (EncodingError("a.py", "bad byte"), AnalysisError),
            (UnsupportedLanguageError("md", ["py"]), AnalysisError),
            (ConfigFileError("x.toml", "file not found"), ConfigurationError),
            (InvalidConfigError("max_scan_lines", 0, "too small"), ConfigurationError),
            (SerializationError("json", "not serializable"), CodeScoutError),
        ],
    )
    def test_parents(self, error, parent):
        assert isinstance(error, parent)
        assert isinstance(error, CodeScoutError)


class TestMessages:
    """String rendering and structured details."""

    def test_details_rendered(self):
        error = FileAccessError("src/a.py", "Permission denied")
        assert str(error) == (
            "Cannot access file: src/a.py (filepath=src/a.py, reason=Permission denied)"
        )
        assert error.reason == "Permission denied"

    def test_plain_message(self):
        assert str(CodeScoutError("boom")) == "boom"

    def test_to_dict(self):
        error = EncodingError("a.py", "invalid start byte")
        assert error.to_dict() == {
            "type": "EncodingError",
            "message": "Cannot decode file as UTF-8: a.py",
            "details": {"filepath": "a.py", "reason": "invalid start byte"},
        }

    def test_unsupported_language(self):
        error = UnsupportedLanguageError("", ["py", "rs"])
        assert "<none>" in error.message
        assert error.details["supported"] == "py, rs"


class TestConfigurationErrors:
    def test_source_recorded(self):
        error = InvalidConfigError("max_scan_lines", "x", "not an int", source="CODE_SCOUT_MAX_SCAN_LINES")
        assert error.source == "CODE_SCOUT_MAX_SCAN_LINES"
        assert error.details == {
            "key": "max_scan_lines",
            "reason": "not an int",
            "source": "CODE_SCOUT_MAX_SCAN_LINES",
        }

    def test_source_optional(self):
        error = InvalidConfigError("verbosity", "loud", "unknown level")
        assert error.source is None
        assert "source" not in error.details
        assert str(error).startswith("Invalid value for verbosity: 'loud'")

    def test_config_file_error(self):
        error = ConfigFileError("conf/code-scout.toml", "file not found")
        assert error.source == "conf/code-scout.toml"
        assert error.reason == "file not found"
        assert error.path.name == "code-scout.toml"
