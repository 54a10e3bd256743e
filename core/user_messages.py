"""User-friendly error message catalog for surface-level messaging."""

from __future__ import annotations

from typing import Dict


ERROR_MESSAGES: Dict[str, Dict[str, str]] = {
    "RESOURCE_NOT_FOUND": {
        "title": "Resource Not Found",
        "message": "The requested assistant resource does not exist.",
        "recovery": "Reload the assistant pane. If this keeps happening, reinstall the application."
    },
    "TEMPLATE_ERROR": {
        "title": "Assistant Page Unavailable",
        "message": "The assistant home page could not be rendered.",
        "recovery": "Check that the assistant resources are intact and try again."
    },
    "INVALID_REQUEST": {
        "title": "Invalid Request",
        "message": "Something in the request was unexpected.",
        "recovery": "Double-check the address and try again."
    },
    "SYSTEM_ERROR": {
        "title": "System Error",
        "message": "Something went wrong on our side.",
        "recovery": "Please try again. If the issue persists, reach out to support."
    }
}


def get_user_friendly_error(code: str) -> Dict[str, str]:
    """Return a user-friendly message bundle for an error code."""

    return ERROR_MESSAGES.get(code, {
        "title": "Unexpected Error",
        "message": "An unexpected error occurred.",
        "recovery": "Try again in a moment or contact support if it continues."
    })
