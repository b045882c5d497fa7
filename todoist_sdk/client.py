#!/usr/bin/env python3
"""
Todoist REST API Client

Shared request pipeline used by every resource module:

    path + query -> RESTRequest (auth, idempotency, JSON body)
                 -> transport.send()
                 -> 2xx: decode body / no value
                    non-2xx: TodoistRequestError(status_code, raw body)

The client keeps no per-call state, so one instance can be shared across
threads as long as its transport can.
"""

import logging
from functools import lru_cache
from typing import Any, Dict, Optional
from urllib.parse import urlencode

from pydantic import TypeAdapter, ValidationError

from .errors import TodoistAuthError, TodoistDecodeError, TodoistRequestError
from .rest import RESTClient, RESTRequest

# Configure logging
logger = logging.getLogger(__name__)

# Constants
TODOIST_BASE_URL = "https://api.todoist.com/rest"


@lru_cache(maxsize=None)
def _adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


class TodoistClient:
    """
    Todoist REST API client.

    Holds the API token and the transport. Resource modules (projects, tasks,
    ...) build paths and payloads and call get/post/post_without_result/delete.
    """

    def __init__(
        self,
        token: str,
        transport: Optional[RESTClient] = None,
        base_url: str = TODOIST_BASE_URL,
    ):
        """
        Initialize client.

        Args:
            token: Todoist API token, sent as a bearer token on every request
            transport: Object with a send(RESTRequest) -> RESTResponse method.
                       Defaults to a RESTClient over a new requests.Session.
            base_url: API origin without the version prefix
        """
        if not token:
            raise TodoistAuthError(
                "No Todoist token provided.\n"
                "Options:\n"
                "  1. Set TODOIST_API_TOKEN environment variable (or in .env)\n"
                "  2. Pass token to constructor"
            )

        self._token = token
        self._transport = transport or RESTClient()
        self._base_url = base_url.rstrip("/")

    # ========== Request building ==========

    def _build_endpoint(self, path: str, params: Optional[Dict[str, str]] = None) -> str:
        url = f"{self._base_url}/{path.lstrip('/')}"
        if params:
            url = f"{url}?{urlencode(sorted(params.items()))}"
        return url

    def _build_request(
        self,
        method: str,
        url: str,
        payload: Optional[Dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ) -> RESTRequest:
        headers = {"Authorization": f"Bearer {self._token}"}
        if request_id is not None:
            headers["X-Request-Id"] = request_id
        if payload is not None:
            headers["Content-Type"] = "application/json"

        return RESTRequest(method=method, url=url, headers=headers, payload=payload)

    def _send(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, str]] = None,
        payload: Optional[Dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ) -> bytes:
        """Dispatch one request and return the body of a 2xx response."""
        url = self._build_endpoint(path, params)
        request = self._build_request(method, url, payload, request_id)

        logger.debug(f"Sending {method} {url}")
        response = self._transport.send(request)

        if response.ok:
            return response.body

        logger.debug(f"{method} {url} failed with HTTP {response.status_code}")
        raise TodoistRequestError(response.status_code, response.body)

    # ========== Response decoding ==========

    @staticmethod
    def _decode(body: bytes, shape: Any) -> Any:
        """Validate a JSON body against shape, e.g. Task or List[Task]."""
        if not body:
            raise TodoistDecodeError("Expected a JSON response body, got an empty one")
        try:
            return _adapter(shape).validate_json(body)
        except ValidationError as e:
            raise TodoistDecodeError(f"Unexpected response body: {e}", body) from e

    # ========== Verbs ==========

    def get(
        self,
        path: str,
        shape: Any,
        params: Optional[Dict[str, str]] = None,
    ) -> Any:
        """GET path and validate the JSON response against shape."""
        body = self._send("GET", path, params=params)
        return self._decode(body, shape)

    def post(
        self,
        path: str,
        payload: Dict[str, Any],
        shape: Any,
        request_id: Optional[str] = None,
    ) -> Any:
        """POST a JSON payload and validate the JSON response against shape."""
        body = self._send("POST", path, payload=payload, request_id=request_id)
        return self._decode(body, shape)

    def post_without_result(
        self,
        path: str,
        payload: Optional[Dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ) -> None:
        """POST for endpoints answering 204; the response body is never decoded."""
        self._send("POST", path, payload=payload, request_id=request_id)

    def delete(self, path: str, request_id: Optional[str] = None) -> None:
        """DELETE path; the response body is never decoded."""
        self._send("DELETE", path, request_id=request_id)

    def close(self) -> None:
        """Release the transport's pooled connections, if it holds any."""
        close = getattr(self._transport, "close", None)
        if close is not None:
            close()
