"""Custom exceptions for the importing context."""

from typing import Optional


class DocumentLoadError(Exception):
    """
    Exception raised when an uploaded PDF cannot be turned into page text.

    This is the only failure an import can produce. Once page text exists,
    extraction never raises; it can only under-populate fields.

    Attributes:
        message: Error description
        source: Name of the uploaded file, when known
        reason: Short machine-friendly cause (e.g., 'encrypted', 'too_large')
    """

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        reason: Optional[str] = None,
    ):
        self.message = message
        self.source = source
        self.reason = reason

        parts = [message]

        if source:
            parts.append(f"Source: {source}")

        if reason:
            parts.append(f"Reason: {reason}")

        super().__init__("\n".join(parts))
