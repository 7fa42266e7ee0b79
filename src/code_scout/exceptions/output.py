"""Output exceptions."""

from .base import CodeScoutError


class SerializationError(CodeScoutError):
    """Raised when a result cannot be encoded to the requested format."""

    def __init__(self, fmt: str, reason: str):
        super().__init__(
            f"Failed to serialize output as {fmt}",
            details={"format": fmt, "reason": reason},
        )
        self.fmt = fmt
        self.reason = reason
