"""Root of the Code Scout exception hierarchy."""

from typing import Any, Dict, Optional


class CodeScoutError(Exception):
    """Base exception for every error Code Scout raises on purpose.

    ``details`` holds the structured context (file path, config key, ...)
    shown after the message and emitted as-is in JSON error output.
    """

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, str] = dict(details or {})

    def to_dict(self) -> Dict[str, Any]:
        return {"type": type(self).__name__, "message": self.message, "details": self.details}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"
