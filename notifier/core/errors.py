"""
Centralised error handling — exception hierarchy.

Usage:
    from notifier.core.errors import NotifierError, UnsupportedChannelError

    raise UnsupportedChannelError("telegram", supported=("email", "sms"))
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional


class NotifierError(Exception):
    """Base exception for all application errors."""

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        *,
        error_code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "code": self.error_code,
            "message": self.message,
        }
        if self.details:
            body["details"] = self.details
        return {"error": body}


class UnsupportedChannelError(NotifierError):
    """No factory is registered for the requested channel key."""

    def __init__(self, channel_key: str, supported: Iterable[str] = ()):
        self.channel_key = channel_key
        self.supported = tuple(supported)
        super().__init__(
            message=f"Notification channel '{channel_key}' is not supported",
            error_code="UNSUPPORTED_CHANNEL",
            details={"channel": channel_key, "supported": list(self.supported)},
        )
