#!/usr/bin/env python3
"""
Todoist Project Operations

Functions for managing projects and reading their collaborators.
"""

import logging
from typing import List, Optional

# Import infrastructure
from .infrastructure import (
    resolve_client,
    validate_id,
    validate_text,
    with_api_error_handling,
)
from .client import TodoistClient
from .models import Project, User
from .options import TodoistOptions, to_payload

# Configure logging
logger = logging.getLogger(__name__)


class CreateProjectOptions(TodoistOptions):
    parent_id: Optional[int] = None
    # Numeric color id, see https://developer.todoist.com/guides/#colors
    color: Optional[int] = None
    favorite: Optional[bool] = None


class UpdateProjectOptions(TodoistOptions):
    name: Optional[str] = None
    color: Optional[int] = None
    favorite: Optional[bool] = None


@with_api_error_handling("fetching projects")
def get_projects(client: Optional[TodoistClient] = None) -> List[Project]:
    """
    Get all projects of the user.

    Returns:
        Projects in the order returned by the API

    Example:
        for project in get_projects():
            print(f"{project.id}: {project.name}")
    """
    client = resolve_client(client)
    projects = client.get("/v1/projects", List[Project])
    logger.info(f"Fetched {len(projects)} projects")
    return projects


@with_api_error_handling("fetching project {project_id}")
def get_project(project_id: int, client: Optional[TodoistClient] = None) -> Project:
    """
    Get project information by id.

    Raises:
        TodoistRequestError: With status_code 404 if the project does not exist
        ValueError: If project_id is invalid
    """
    validate_id(project_id, "project_id")
    client = resolve_client(client)
    return client.get(f"/v1/projects/{project_id}", Project)


@with_api_error_handling("fetching collaborators of project {project_id}")
def get_project_collaborators(
    project_id: int, client: Optional[TodoistClient] = None
) -> List[User]:
    """Get the users a shared project is shared with."""
    validate_id(project_id, "project_id")
    client = resolve_client(client)

    users = client.get(f"/v1/projects/{project_id}/collaborators", List[User])
    logger.info(f"Fetched {len(users)} collaborators for project {project_id}")
    return users


@with_api_error_handling("creating project '{name}'")
def create_project(
    name: str,
    options: Optional[CreateProjectOptions] = None,
    request_id: Optional[str] = None,
    client: Optional[TodoistClient] = None,
) -> Project:
    """
    Create a project and return it.

    Args:
        name: Project name
        options: Parent project, color and favorite flag
        request_id: Idempotency token sent as X-Request-Id
        client: Client to use (default: configured singleton)

    Example:
        project = create_project("Groceries", CreateProjectOptions(favorite=True))
    """
    validate_text(name, "name")
    client = resolve_client(client)

    payload = to_payload(options, {"name": name})
    project = client.post("/v1/projects", payload, Project, request_id=request_id)

    logger.info(f"Created project '{project.name}' with id {project.id}")
    return project


@with_api_error_handling("updating project {project_id}")
def update_project(
    project_id: int,
    options: Optional[UpdateProjectOptions] = None,
    request_id: Optional[str] = None,
    client: Optional[TodoistClient] = None,
) -> None:
    validate_id(project_id, "project_id")
    client = resolve_client(client)

    client.post_without_result(f"/v1/projects/{project_id}", to_payload(options), request_id=request_id)
    logger.info(f"Updated project {project_id}")


@with_api_error_handling("deleting project {project_id}")
def delete_project(
    project_id: int,
    request_id: Optional[str] = None,
    client: Optional[TodoistClient] = None,
) -> None:
    """Delete a project together with its sections and tasks."""
    validate_id(project_id, "project_id")
    client = resolve_client(client)

    client.delete(f"/v1/projects/{project_id}", request_id=request_id)
    logger.info(f"Deleted project {project_id}")
