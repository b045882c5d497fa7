#!/usr/bin/env python3
"""
Todoist SDK Infrastructure

Shared utilities for the resource modules:
- Configuration from environment variables (and .env)
- Client singleton management
- Error handling decorator
- Argument validation helpers
"""

import inspect
import logging
import os
import threading
from functools import wraps
from typing import Any, Callable, Optional

from dotenv import load_dotenv

from .client import TODOIST_BASE_URL, TodoistClient
from .errors import TodoistClientError
from .rest import REQUEST_TIMEOUT, RESTClient

# Configure logging
logger = logging.getLogger(__name__)

# Load environment variables from .env file
load_dotenv()


# ============================================================================
# Configuration
# ============================================================================

class TodoistSDKConfig:
    """
    Global configuration for the Todoist SDK.

    Values are read from the environment when the config is first created:
    - TODOIST_API_TOKEN: API token
    - TODOIST_API_BASE_URL: API origin (default: https://api.todoist.com/rest)
    - TODOIST_REQUEST_TIMEOUT: Per-request timeout in seconds (default: 30)
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._init_defaults()
        return cls._instance

    def _init_defaults(self):
        self.token: Optional[str] = os.environ.get("TODOIST_API_TOKEN")
        self.base_url: str = os.environ.get("TODOIST_API_BASE_URL", TODOIST_BASE_URL)

        timeout = os.environ.get("TODOIST_REQUEST_TIMEOUT")
        try:
            self.timeout: float = float(timeout) if timeout else REQUEST_TIMEOUT
        except ValueError:
            logger.warning(f"Ignoring invalid TODOIST_REQUEST_TIMEOUT={timeout!r}, using {REQUEST_TIMEOUT}s")
            self.timeout = REQUEST_TIMEOUT

    def reload(self) -> None:
        """Re-read configuration from the environment."""
        self._init_defaults()


def get_config() -> TodoistSDKConfig:
    """Get the global SDK configuration."""
    return TodoistSDKConfig()


# ============================================================================
# Todoist Client Singleton
# ============================================================================

_client: Optional[TodoistClient] = None
_client_lock = threading.Lock()


def get_client() -> TodoistClient:
    """
    Get the process-wide Todoist client, creating it from the config on first use.

    Raises:
        TodoistAuthError: If no token is configured
    """
    global _client
    with _client_lock:
        if _client is None:
            config = get_config()
            _client = TodoistClient(
                token=config.token,
                transport=RESTClient(timeout=config.timeout),
                base_url=config.base_url,
            )
            logger.debug(f"Created Todoist client for {config.base_url}")
        return _client


def set_client(client: Optional[TodoistClient]) -> None:
    """
    Replace the process-wide client (None drops it so the next call rebuilds it).

    The client being replaced is closed.
    """
    global _client
    with _client_lock:
        previous, _client = _client, client
    if previous is not None and previous is not client:
        previous.close()
        logger.debug("Closed previous Todoist client")


def reset_client() -> None:
    """Drop the cached client, e.g. after changing the config."""
    set_client(None)


def resolve_client(client: Optional[TodoistClient]) -> TodoistClient:
    return client if client is not None else get_client()


# ============================================================================
# Error Handling Decorator
# ============================================================================

def with_api_error_handling(operation_fmt: str) -> Callable:
    """
    Decorator to log API failures consistently across all operations.

    The exception is re-raised unchanged after its `operation` attribute is
    set; status codes are not reinterpreted.

    Args:
        operation_fmt: Description format string for the operation.
                      Can use {arg_name} placeholders filled from function arguments.

    Example:
        @with_api_error_handling("fetching task {task_id}")
        def get_task(task_id: int, client=None) -> Task:
            ...
    """
    def decorator(func: Callable) -> Callable:
        sig = inspect.signature(func)

        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except TodoistClientError as e:
                bound_args = sig.bind_partial(*args, **kwargs)
                bound_args.apply_defaults()
                try:
                    operation = operation_fmt.format(**bound_args.arguments)
                except (KeyError, IndexError, ValueError):
                    operation = operation_fmt

                if e.operation is None:
                    e.operation = operation
                logger.warning(f"Todoist API error during {operation}: {e}")
                raise

        return wrapper
    return decorator


# ============================================================================
# Validation
# ============================================================================

def validate_id(value: Any, name: str) -> int:
    """Check that value is a positive integer resource id."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"Invalid {name}: {value!r}")
    return value


def validate_text(value: Any, name: str) -> str:
    """Check that value is a non-empty string."""
    if not value or not isinstance(value, str):
        raise ValueError(f"Invalid {name}: {value!r}")
    return value
