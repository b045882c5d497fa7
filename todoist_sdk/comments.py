#!/usr/bin/env python3
"""
Todoist Comment Operations

Comments belong to either a task or a project. Creation can attach a file
that is already hosted somewhere (by URL); uploads are not handled here.
"""

import logging
from typing import Dict, List, Optional

from .infrastructure import (
    resolve_client,
    validate_id,
    validate_text,
    with_api_error_handling,
)
from .client import TodoistClient
from .models import Comment
from .options import TodoistOptions, to_payload

# Configure logging
logger = logging.getLogger(__name__)


class CreateAttachmentOptions(TodoistOptions):
    resource_type: Optional[str] = None
    file_name: Optional[str] = None
    file_url: Optional[str] = None
    # MIME type, e.g. image/png
    file_type: Optional[str] = None


class CreateCommentOptions(TodoistOptions):
    attachment: Optional[CreateAttachmentOptions] = None


def _get_comments(client: TodoistClient, params: Dict[str, str]) -> List[Comment]:
    comments = client.get("/v1/comments", List[Comment], params=params)
    logger.info(f"Fetched {len(comments)} comments")
    return comments


@with_api_error_handling("fetching comments of project {project_id}")
def get_project_comments(project_id: int, client: Optional[TodoistClient] = None) -> List[Comment]:
    validate_id(project_id, "project_id")
    return _get_comments(resolve_client(client), {"project_id": str(project_id)})


@with_api_error_handling("fetching comments of task {task_id}")
def get_task_comments(task_id: int, client: Optional[TodoistClient] = None) -> List[Comment]:
    validate_id(task_id, "task_id")
    return _get_comments(resolve_client(client), {"task_id": str(task_id)})


@with_api_error_handling("fetching comment {comment_id}")
def get_comment(comment_id: int, client: Optional[TodoistClient] = None) -> Comment:
    validate_id(comment_id, "comment_id")
    client = resolve_client(client)
    return client.get(f"/v1/comments/{comment_id}", Comment)


def _create_comment(
    client: TodoistClient,
    target: Dict[str, int],
    content: str,
    options: Optional[CreateCommentOptions],
    request_id: Optional[str],
) -> Comment:
    payload = to_payload(options, {**target, "content": content})
    comment = client.post("/v1/comments", payload, Comment, request_id=request_id)
    logger.info(f"Created comment {comment.id}")
    return comment


@with_api_error_handling("commenting on project {project_id}")
def create_project_comment(
    project_id: int,
    content: str,
    options: Optional[CreateCommentOptions] = None,
    request_id: Optional[str] = None,
    client: Optional[TodoistClient] = None,
) -> Comment:
    """
    Add a comment to a project.

    Args:
        project_id: Project to comment on
        content: Comment text (may contain markdown)
        options: Optional attachment
        request_id: Idempotency token sent as X-Request-Id
        client: Client to use (default: configured singleton)
    """
    validate_id(project_id, "project_id")
    validate_text(content, "content")
    return _create_comment(resolve_client(client), {"project_id": project_id}, content, options, request_id)


@with_api_error_handling("commenting on task {task_id}")
def create_task_comment(
    task_id: int,
    content: str,
    options: Optional[CreateCommentOptions] = None,
    request_id: Optional[str] = None,
    client: Optional[TodoistClient] = None,
) -> Comment:
    """
    Add a comment to a task.

    Example:
        create_task_comment(
            2995104339,
            "Receipt attached",
            CreateCommentOptions(attachment=CreateAttachmentOptions(
                resource_type="file",
                file_url="https://example.com/receipt.pdf",
                file_type="application/pdf",
            )),
        )
    """
    validate_id(task_id, "task_id")
    validate_text(content, "content")
    return _create_comment(resolve_client(client), {"task_id": task_id}, content, options, request_id)


@with_api_error_handling("updating comment {comment_id}")
def update_comment(
    comment_id: int,
    content: str,
    request_id: Optional[str] = None,
    client: Optional[TodoistClient] = None,
) -> None:
    """Replace the text of a comment."""
    validate_id(comment_id, "comment_id")
    validate_text(content, "content")
    client = resolve_client(client)

    client.post_without_result(f"/v1/comments/{comment_id}", {"content": content}, request_id=request_id)
    logger.info(f"Updated comment {comment_id}")


@with_api_error_handling("deleting comment {comment_id}")
def delete_comment(
    comment_id: int,
    request_id: Optional[str] = None,
    client: Optional[TodoistClient] = None,
) -> None:
    validate_id(comment_id, "comment_id")
    client = resolve_client(client)

    client.delete(f"/v1/comments/{comment_id}", request_id=request_id)
    logger.info(f"Deleted comment {comment_id}")
