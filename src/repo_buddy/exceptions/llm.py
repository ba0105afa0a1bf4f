"""Errors raised by the optional LLM summarization client."""

from typing import Optional

from .base import RepoBuddyError


class LLMError(RepoBuddyError):
    """Raised when the remote model cannot produce a summary."""

    def __init__(self, reason: str, status_code: Optional[int] = None):
        details = {"reason": reason}
        if status_code is not None:
            details["status_code"] = str(status_code)
        super().__init__("LLM summarization failed", details=details)
        self.reason = reason
        self.status_code = status_code
