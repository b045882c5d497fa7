#!/usr/bin/env python3
"""
Todoist REST Transport

Thin adapter between the Todoist client and the HTTP library.

The client never talks to requests directly: it hands a RESTRequest to
RESTClient.send() and gets back a RESTResponse whose body is already fully
read. Tests swap RESTClient for a scripted object exposing the same send().
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import requests

from .errors import TodoistClientError, TodoistTimeoutError, TodoistTransportError

# Configure logging
logger = logging.getLogger(__name__)

# Constants
REQUEST_TIMEOUT = 30


@dataclass
class RESTRequest:
    """Structured description of one HTTP call."""

    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    payload: Optional[Dict[str, Any]] = None


@dataclass
class RESTResponse:
    """Status code and fully buffered body of an HTTP response."""

    status_code: int
    body: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code <= 299


class RESTClient:
    """
    Sends RESTRequests through a requests.Session.

    One call to send() is exactly one network round trip: no retries and no
    caching. Non-2xx responses are returned, not raised; only failures where
    no response arrived become exceptions.
    """

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = REQUEST_TIMEOUT):
        """
        Initialize transport.

        Args:
            session: Session used for the calls. A new one is created if omitted.
            timeout: Per-request timeout in seconds, passed through to requests.
        """
        self._session = session or requests.Session()
        self._timeout = timeout

    def send(self, request: RESTRequest) -> RESTResponse:
        """
        Issue the HTTP call described by request.

        Args:
            request: Method, fully-qualified URL, headers and optional JSON payload

        Returns:
            RESTResponse with status code and buffered body

        Raises:
            TodoistTimeoutError: If the call timed out
            TodoistTransportError: If the call failed before a response arrived
            TodoistClientError: If the payload cannot be serialized to JSON
        """
        data = None
        if request.payload is not None:
            try:
                data = json.dumps(request.payload).encode("utf-8")
            except (TypeError, ValueError) as e:
                raise TodoistClientError(f"Cannot serialize request payload: {e}")

        try:
            resp = self._session.request(
                method=request.method,
                url=request.url,
                headers=request.headers,
                data=data,
                timeout=self._timeout,
            )
        except requests.Timeout as e:
            raise TodoistTimeoutError(
                f"{request.method} {request.url} timed out after {self._timeout}s: {e}"
            ) from e
        except requests.RequestException as e:
            raise TodoistTransportError(f"{request.method} {request.url} failed: {e}") from e

        try:
            body = resp.content or b""
        except requests.RequestException as e:
            raise TodoistTransportError(
                f"Reading response of {request.method} {request.url} failed: {e}"
            ) from e
        finally:
            resp.close()

        logger.debug(f"{request.method} {request.url} -> {resp.status_code} ({len(body)} bytes)")
        return RESTResponse(status_code=resp.status_code, body=body)

    def close(self) -> None:
        """Release pooled connections held by the session."""
        self._session.close()
