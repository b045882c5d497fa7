#!/usr/bin/env python3
"""
Todoist SDK - Python client for the Todoist REST API

Typed access to projects, sections, tasks, labels, comments and project
collaborators. Every operation is a single HTTP call; non-2xx answers raise
TodoistRequestError carrying the status code and raw body.

Usage:
    from todoist_sdk import (
        # Tasks
        get_tasks,
        create_task,
        close_task,
        GetTasksOptions,
        CreateTaskOptions,

        # Errors
        TodoistRequestError,
    )

    task = create_task("Buy milk", CreateTaskOptions(due_string="tomorrow"))
    for task in get_tasks(GetTasksOptions(project_id=2203306141)):
        print(task.id, task.content)

    try:
        close_task(42)
    except TodoistRequestError as e:
        if e.status_code == 404:
            ...

Configuration:
    Set TODOIST_API_TOKEN (environment or .env). Operations use a shared
    client built from the config unless one is passed explicitly:

    from todoist_sdk import TodoistClient, RESTClient
    client = TodoistClient(token, transport=RESTClient(timeout=10))
    get_tasks(client=client)
"""

# Error classes
from .errors import (
    TodoistClientError,
    TodoistAuthError,
    TodoistTransportError,
    TodoistTimeoutError,
    TodoistRequestError,
    TodoistDecodeError,
)

# Transport
from .rest import (
    RESTClient,
    RESTRequest,
    RESTResponse,
)

# Client
from .client import (
    TodoistClient,
    TODOIST_BASE_URL,
)

# Infrastructure
from .infrastructure import (
    get_config,
    TodoistSDKConfig,
    get_client,
    set_client,
    reset_client,
    with_api_error_handling,
)

# Models
from .models import (
    Attachment,
    Comment,
    Due,
    Label,
    Project,
    Section,
    Task,
    TodoistModel,
    User,
)

# Options helpers
from .options import (
    TodoistOptions,
    to_payload,
    to_query,
)

# Project operations
from .projects import (
    CreateProjectOptions,
    UpdateProjectOptions,
    get_projects,
    get_project,
    get_project_collaborators,
    create_project,
    update_project,
    delete_project,
)

# Section operations
from .sections import (
    GetSectionsOptions,
    CreateSectionOptions,
    get_sections,
    get_section,
    create_section,
    update_section,
    delete_section,
)

# Task operations
from .tasks import (
    GetTasksOptions,
    CreateTaskOptions,
    UpdateTaskOptions,
    get_tasks,
    get_task,
    create_task,
    update_task,
    close_task,
    reopen_task,
    delete_task,
)

# Label operations
from .labels import (
    CreateLabelOptions,
    UpdateLabelOptions,
    get_labels,
    get_label,
    create_label,
    update_label,
    delete_label,
)

# Comment operations
from .comments import (
    CreateAttachmentOptions,
    CreateCommentOptions,
    get_project_comments,
    get_task_comments,
    get_comment,
    create_project_comment,
    create_task_comment,
    update_comment,
    delete_comment,
)

__all__ = [
    # Errors
    "TodoistClientError",
    "TodoistAuthError",
    "TodoistTransportError",
    "TodoistTimeoutError",
    "TodoistRequestError",
    "TodoistDecodeError",
    # Transport
    "RESTClient",
    "RESTRequest",
    "RESTResponse",
    # Client
    "TodoistClient",
    "TODOIST_BASE_URL",
    # Infrastructure
    "get_config",
    "TodoistSDKConfig",
    "get_client",
    "set_client",
    "reset_client",
    "with_api_error_handling",
    # Models
    "Attachment",
    "Comment",
    "Due",
    "Label",
    "Project",
    "Section",
    "Task",
    "TodoistModel",
    "User",
    # Options helpers
    "TodoistOptions",
    "to_payload",
    "to_query",
    # Projects
    "CreateProjectOptions",
    "UpdateProjectOptions",
    "get_projects",
    "get_project",
    "get_project_collaborators",
    "create_project",
    "update_project",
    "delete_project",
    # Sections
    "GetSectionsOptions",
    "CreateSectionOptions",
    "get_sections",
    "get_section",
    "create_section",
    "update_section",
    "delete_section",
    # Tasks
    "GetTasksOptions",
    "CreateTaskOptions",
    "UpdateTaskOptions",
    "get_tasks",
    "get_task",
    "create_task",
    "update_task",
    "close_task",
    "reopen_task",
    "delete_task",
    # Labels
    "CreateLabelOptions",
    "UpdateLabelOptions",
    "get_labels",
    "get_label",
    "create_label",
    "update_label",
    "delete_label",
    # Comments
    "CreateAttachmentOptions",
    "CreateCommentOptions",
    "get_project_comments",
    "get_task_comments",
    "get_comment",
    "create_project_comment",
    "create_task_comment",
    "update_comment",
    "delete_comment",
]

__version__ = "1.0.0"
