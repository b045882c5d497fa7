#!/usr/bin/env python3
"""
Todoist SDK Exception Classes

Custom exception hierarchy for Todoist API errors.
"""

from typing import Optional


class TodoistClientError(Exception):
    """Base exception for Todoist client errors"""

    operation: Optional[str] = None


class TodoistAuthError(TodoistClientError):
    """Raised when no API token is available"""

    pass


class TodoistTransportError(TodoistClientError):
    """Raised when the HTTP call did not complete (DNS, connection, TLS)"""

    pass


class TodoistTimeoutError(TodoistTransportError):
    """Raised when the HTTP call timed out before a response arrived"""

    pass


class TodoistRequestError(TodoistClientError):
    """
    Raised when the API answers with a status outside 200-299.

    The body is kept as raw bytes: error responses are not guaranteed to be
    JSON, so callers should branch on status_code.
    """

    def __init__(self, status_code: int, body: bytes = b""):
        super().__init__(f"request error: {status_code}")
        self.status_code = status_code
        self.body = body

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class TodoistDecodeError(TodoistClientError):
    """Raised when a successful response body does not match the expected shape"""

    def __init__(self, message: str, body: bytes = b""):
        super().__init__(message)
        self.body = body
