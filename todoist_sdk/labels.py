#!/usr/bin/env python3
"""
Todoist Label Operations

Labels are flat and scoped to the user.
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
from .models import Label
from .options import TodoistOptions, to_payload

# Configure logging
logger = logging.getLogger(__name__)


class CreateLabelOptions(TodoistOptions):
    order: Optional[int] = None
    color: Optional[int] = None
    favorite: Optional[bool] = None


class UpdateLabelOptions(TodoistOptions):
    name: Optional[str] = None
    order: Optional[int] = None
    color: Optional[int] = None
    favorite: Optional[bool] = None


@with_api_error_handling("fetching labels")
def get_labels(client: Optional[TodoistClient] = None) -> List[Label]:
    client = resolve_client(client)
    labels = client.get("/v1/labels", List[Label])
    logger.info(f"Fetched {len(labels)} labels")
    return labels


@with_api_error_handling("fetching label {label_id}")
def get_label(label_id: int, client: Optional[TodoistClient] = None) -> Label:
    validate_id(label_id, "label_id")
    client = resolve_client(client)
    return client.get(f"/v1/labels/{label_id}", Label)


@with_api_error_handling("creating label '{name}'")
def create_label(
    name: str,
    options: Optional[CreateLabelOptions] = None,
    request_id: Optional[str] = None,
    client: Optional[TodoistClient] = None,
) -> Label:
    """
    Create a label.

    Example:
        label = create_label("waiting", CreateLabelOptions(color=31, favorite=True))
    """
    validate_text(name, "name")
    client = resolve_client(client)

    payload = to_payload(options, {"name": name})
    label = client.post("/v1/labels", payload, Label, request_id=request_id)

    logger.info(f"Created label '{label.name}' with id {label.id}")
    return label


@with_api_error_handling("updating label {label_id}")
def update_label(
    label_id: int,
    options: Optional[UpdateLabelOptions] = None,
    request_id: Optional[str] = None,
    client: Optional[TodoistClient] = None,
) -> None:
    validate_id(label_id, "label_id")
    client = resolve_client(client)

    client.post_without_result(f"/v1/labels/{label_id}", to_payload(options), request_id=request_id)
    logger.info(f"Updated label {label_id}")


@with_api_error_handling("deleting label {label_id}")
def delete_label(
    label_id: int,
    request_id: Optional[str] = None,
    client: Optional[TodoistClient] = None,
) -> None:
    """
    Delete a label.

    Raises:
        TodoistRequestError: With status_code 404 if the label does not exist
    """
    validate_id(label_id, "label_id")
    client = resolve_client(client)

    client.delete(f"/v1/labels/{label_id}", request_id=request_id)
    logger.info(f"Deleted label {label_id}")
