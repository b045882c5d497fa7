#!/usr/bin/env python3
"""
Todoist Section Operations
"""

import logging
from typing import List, Optional

from .infrastructure import (
    resolve_client,
    validate_id,
    validate_text,
    with_api_error_handling,
)
from .client import TodoistClient
from .models import Section
from .options import TodoistOptions, to_payload, to_query

# Configure logging
logger = logging.getLogger(__name__)


class GetSectionsOptions(TodoistOptions):
    project_id: Optional[int] = None


class CreateSectionOptions(TodoistOptions):
    # Position among the other sections of the project
    order: Optional[int] = None


@with_api_error_handling("fetching sections")
def get_sections(
    options: Optional[GetSectionsOptions] = None,
    client: Optional[TodoistClient] = None,
) -> List[Section]:
    """Get all sections, or only those of options.project_id."""
    client = resolve_client(client)
    sections = client.get("/v1/sections", List[Section], params=to_query(options))
    logger.info(f"Fetched {len(sections)} sections")
    return sections


@with_api_error_handling("fetching section {section_id}")
def get_section(section_id: int, client: Optional[TodoistClient] = None) -> Section:
    validate_id(section_id, "section_id")
    client = resolve_client(client)
    return client.get(f"/v1/sections/{section_id}", Section)


@with_api_error_handling("creating section '{name}' in project {project_id}")
def create_section(
    name: str,
    project_id: int,
    options: Optional[CreateSectionOptions] = None,
    request_id: Optional[str] = None,
    client: Optional[TodoistClient] = None,
) -> Section:
    """
    Create a section in a project.

    Example:
        section = create_section("Backlog", 2203306141, CreateSectionOptions(order=1))
    """
    validate_text(name, "name")
    validate_id(project_id, "project_id")
    client = resolve_client(client)

    payload = to_payload(options, {"name": name, "project_id": project_id})
    section = client.post("/v1/sections", payload, Section, request_id=request_id)

    logger.info(f"Created section '{section.name}' with id {section.id}")
    return section


@with_api_error_handling("updating section {section_id}")
def update_section(
    section_id: int,
    name: str,
    request_id: Optional[str] = None,
    client: Optional[TodoistClient] = None,
) -> None:
    """Rename a section."""
    validate_id(section_id, "section_id")
    validate_text(name, "name")
    client = resolve_client(client)

    client.post_without_result(f"/v1/sections/{section_id}", {"name": name}, request_id=request_id)
    logger.info(f"Updated section {section_id}")


@with_api_error_handling("deleting section {section_id}")
def delete_section(
    section_id: int,
    request_id: Optional[str] = None,
    client: Optional[TodoistClient] = None,
) -> None:
    validate_id(section_id, "section_id")
    client = resolve_client(client)

    client.delete(f"/v1/sections/{section_id}", request_id=request_id)
    logger.info(f"Deleted section {section_id}")
