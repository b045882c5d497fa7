#!/usr/bin/env python3
"""
Todoist Request Options

Write-side parameter sets share one rule: every field is optional, and a
field left as None is omitted from the request entirely (never sent as null).

Each options class is a pydantic model deriving from TodoistOptions; a field's
alias, when given, is the JSON/query name the API expects. to_payload() and
to_query() project an options instance onto a request body or a
query-parameter dict.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class TodoistOptions(BaseModel):
    """Base for optional request parameters. Unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def _sort_sets(cls, value: Any) -> Any:
        # Sets serialize in a stable order
        if isinstance(value, (set, frozenset)):
            return sorted(value)
        return value

    def wire_values(self) -> Dict[str, Any]:
        """Present fields under their wire names, nested options included."""
        return self.model_dump(exclude_none=True, by_alias=True)


def _present_fields(options: Any) -> Dict[str, Any]:
    if options is None:
        return {}
    if not isinstance(options, TodoistOptions):
        raise TypeError(f"Expected a TodoistOptions instance, got {type(options).__name__}")
    return options.wire_values()


def to_payload(options: Any, base: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Build a JSON request body from required fields and an options instance.

    Args:
        options: TodoistOptions instance, or None
        base: Required fields that are always sent (e.g. {"content": ...})

    Returns:
        New dict holding base plus every present option under its wire name

    Example:
        to_payload(CreateTaskOptions(priority=4), {"content": "Buy milk"})
        # {"content": "Buy milk", "priority": 4}
    """
    payload = dict(base or {})
    payload.update(_present_fields(options))
    return payload


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_query_value(v) for v in value)
    return str(value)


def to_query(options: Any) -> Dict[str, str]:
    """
    Build query parameters from a filter options instance.

    Multi-value filters become a single comma-joined value.
    """
    return {name: _query_value(value) for name, value in _present_fields(options).items()}
