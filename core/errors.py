"""AI home error definitions and helpers."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .user_messages import get_user_friendly_error


class ErrorCode(Enum):
    """Enumerates standardized error codes returned by the AI home server."""

    # Resource errors
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    TEMPLATE_ERROR = "TEMPLATE_ERROR"

    # Request errors
    INVALID_REQUEST = "INVALID_REQUEST"

    # System errors
    SYSTEM_ERROR = "SYSTEM_ERROR"


class AiHomeError(Exception):
    """Base exception that carries structured error information."""

    def __init__(
        self,
        code: ErrorCode,
        message: Optional[str],
        details: Optional[Dict[str, Any]] = None,
        recovery_suggestion: Optional[str] = None,
        *,
        status_code: int = 400,
        title: Optional[str] = None,
    ) -> None:
        self.code = code
        friendly = get_user_friendly_error(code.value)
        self.title = title or friendly.get("title")
        self.message = message or friendly.get("message")
        self.recovery_suggestion = recovery_suggestion or friendly.get("recovery")
        self.details = details or {}
        self.status_code = status_code
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "error": True,
            "code": self.code.value,
            "message": self.message,
            "timestamp": self.timestamp,
        }
        if self.title:
            payload["title"] = self.title
        if self.details:
            payload["details"] = self.details
        if self.recovery_suggestion:
            payload["recovery"] = self.recovery_suggestion
        return payload


class InvalidResourcePath(AiHomeError):
    """Raised when a request path does not carry the expected prefix."""

    def __init__(self, path: str, prefix: str) -> None:
        super().__init__(
            ErrorCode.RESOURCE_NOT_FOUND,
            f"Path '{path}' is not under '{prefix}'",
            {"path": path, "prefix": prefix},
            status_code=404,
        )


class TemplateRenderError(AiHomeError):
    """Raised when a document cannot be read or filled in as a template."""

    def __init__(self, template: str, reason: str) -> None:
        super().__init__(
            ErrorCode.TEMPLATE_ERROR,
            f"Unable to render '{template}': {reason}",
            {"template": template},
            status_code=500,
        )


def create_error_response(
    code: ErrorCode,
    message: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
    recovery_suggestion: Optional[str] = None,
    status_code: int = 400,
    *,
    title: Optional[str] = None,
) -> Tuple[Dict[str, Any], int]:
    """Return a standardized Flask-style error response tuple."""

    error = AiHomeError(
        code,
        message,
        details,
        recovery_suggestion,
        status_code=status_code,
        title=title,
    )
    return error.to_dict(), status_code


def resource_not_found_error(relative_path: str) -> Tuple[Dict[str, Any], int]:
    return create_error_response(
        ErrorCode.RESOURCE_NOT_FOUND,
        f"Resource '{relative_path or 'index'}' not found",
        {"relative_path": relative_path},
        status_code=404,
    )

