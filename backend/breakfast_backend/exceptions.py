"""
Healthy Breakfast Backend — Custom Exception Hierarchy
======================================================

What:  Application-specific exceptions carrying an HTTP status code.
How:   Each exception carries a message and optional context dict.
       The global handler registered in main.py turns them into structured
       JSON error responses with the exception's status code.

Unmatched paths and wrong methods never reach this hierarchy: the
framework answers those with its own 404/405 responses.
"""

from typing import Any, Dict, Optional


class BreakfastBackendError(Exception):
    """
    Base exception for all application errors.

    Subclasses override `status_code` and `error_code` to pick the HTTP
    status and the machine-readable code of the response body.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info returned under "details"
    """

    status_code: int = 500
    error_code: str = "server_error"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = dict(context or {})
        super().__init__(self.message)
