#!/usr/bin/env python3
"""
Todoist Task Operations

List, fetch, create, update, close, reopen and delete tasks.
"""

import logging
from typing import List, Optional

from pydantic import Field

# Import infrastructure
from .infrastructure import (
    resolve_client,
    validate_id,
    validate_text,
    with_api_error_handling,
)
from .client import TodoistClient
from .models import Task
from .options import TodoistOptions, to_payload, to_query

# Configure logging
logger = logging.getLogger(__name__)


class GetTasksOptions(TodoistOptions):
    """Filters for listing active tasks."""

    project_id: Optional[int] = None
    section_id: Optional[int] = None
    label_id: Optional[int] = None
    # Any supported filter query, see https://todoist.com/help/articles/205248842
    filter_query: Optional[str] = Field(default=None, alias="filter")
    # IETF language tag the filter is written in, if not English
    lang: Optional[str] = None
    ids: Optional[List[int]] = None


class CreateTaskOptions(TodoistOptions):
    """
    Optional fields for a new task.

    Only one of the due_* fields should be set at a time (due_lang goes
    together with due_string). Without project_id the task lands in the Inbox.
    """

    description: Optional[str] = None
    project_id: Optional[int] = None
    section_id: Optional[int] = None
    parent_id: Optional[int] = None
    order: Optional[int] = None
    label_ids: Optional[List[int]] = None
    priority: Optional[int] = None
    due_string: Optional[str] = None
    due_date: Optional[str] = None
    due_datetime: Optional[str] = None
    due_lang: Optional[str] = None
    assignee: Optional[int] = None


class UpdateTaskOptions(TodoistOptions):
    """
    Fields to change on an existing task.

    Sent exactly as given. Use assignee=0 to unassign a shared task.
    """

    content: Optional[str] = None
    description: Optional[str] = None
    label_ids: Optional[List[int]] = None
    priority: Optional[int] = None
    due_string: Optional[str] = None
    due_date: Optional[str] = None
    due_datetime: Optional[str] = None
    due_lang: Optional[str] = None
    assignee: Optional[int] = None


@with_api_error_handling("fetching tasks")
def get_tasks(
    options: Optional[GetTasksOptions] = None,
    client: Optional[TodoistClient] = None,
) -> List[Task]:
    """
    Get active tasks, optionally filtered.

    Args:
        options: Filters (project, section, label, filter query, ids)
        client: Client to use (default: configured singleton)

    Returns:
        Tasks in the order returned by the API

    Raises:
        TodoistRequestError: If the API answers with a non-2xx status
        TodoistDecodeError: If the response is not a list of tasks

    Example:
        tasks = get_tasks(GetTasksOptions(project_id=5, label_id=3))
        # GET /v1/tasks?label_id=3&project_id=5
    """
    client = resolve_client(client)
    tasks = client.get("/v1/tasks", List[Task], params=to_query(options))
    logger.info(f"Fetched {len(tasks)} tasks")
    return tasks


@with_api_error_handling("fetching task {task_id}")
def get_task(task_id: int, client: Optional[TodoistClient] = None) -> Task:
    """
    Get a single active task.

    Raises:
        TodoistRequestError: With status_code 404 if the task does not exist
    """
    validate_id(task_id, "task_id")
    client = resolve_client(client)
    return client.get(f"/v1/tasks/{task_id}", Task)


@with_api_error_handling("creating task '{content}'")
def create_task(
    content: str,
    options: Optional[CreateTaskOptions] = None,
    request_id: Optional[str] = None,
    client: Optional[TodoistClient] = None,
) -> Task:
    """
    Create a task and return it as stored by the API.

    Args:
        content: Task title (may contain markdown)
        options: Optional task fields
        request_id: Idempotency token sent as X-Request-Id
        client: Client to use (default: configured singleton)

    Returns:
        The created task, including its server-assigned id

    Example:
        task = create_task("Buy milk", CreateTaskOptions(due_string="tomorrow", priority=4))
    """
    validate_text(content, "content")
    client = resolve_client(client)

    payload = to_payload(options, {"content": content})
    task = client.post("/v1/tasks", payload, Task, request_id=request_id)

    logger.info(f"Created task {task.id}")
    return task


@with_api_error_handling("updating task {task_id}")
def update_task(
    task_id: int,
    options: Optional[UpdateTaskOptions] = None,
    request_id: Optional[str] = None,
    client: Optional[TodoistClient] = None,
) -> None:
    """Update a task with the fields present in options."""
    validate_id(task_id, "task_id")
    client = resolve_client(client)

    client.post_without_result(f"/v1/tasks/{task_id}", to_payload(options), request_id=request_id)
    logger.info(f"Updated task {task_id}")


@with_api_error_handling("closing task {task_id}")
def close_task(
    task_id: int,
    request_id: Optional[str] = None,
    client: Optional[TodoistClient] = None,
) -> None:
    """
    Close a task.

    Regular tasks are marked complete; recurring tasks move to their next
    occurrence.
    """
    validate_id(task_id, "task_id")
    client = resolve_client(client)

    client.post_without_result(f"/v1/tasks/{task_id}/close", request_id=request_id)
    logger.info(f"Closed task {task_id}")


@with_api_error_handling("reopening task {task_id}")
def reopen_task(
    task_id: int,
    request_id: Optional[str] = None,
    client: Optional[TodoistClient] = None,
) -> None:
    """Reopen a closed task."""
    validate_id(task_id, "task_id")
    client = resolve_client(client)

    client.post_without_result(f"/v1/tasks/{task_id}/reopen", request_id=request_id)
    logger.info(f"Reopened task {task_id}")


@with_api_error_handling("deleting task {task_id}")
def delete_task(
    task_id: int,
    request_id: Optional[str] = None,
    client: Optional[TodoistClient] = None,
) -> None:
    validate_id(task_id, "task_id")
    client = resolve_client(client)

    client.delete(f"/v1/tasks/{task_id}", request_id=request_id)
    logger.info(f"Deleted task {task_id}")
