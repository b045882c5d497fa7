#!/usr/bin/env python3
"""
Todoist Resource Models

Read-side records for the resources returned by the REST API, as pydantic
models. Decode with Model.model_validate(data) (or through the client, which
validates the raw JSON body) and serialize back with model_dump(), so
Model.model_validate(x.model_dump()) == x.

Decoding is lenient about what the server omits (missing keys and JSON null
take the field's zero value, or None for nullable fields) and ignores keys it
does not know, but values of the wrong JSON type fail validation: ids and
counts must be integers, never numeric strings or booleans.
"""

from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, Strict, StrictBool, StrictInt, StrictStr, model_validator

# Only a JSON array is accepted, not tuples, sets or strings
IdList = Annotated[List[StrictInt], Strict()]


class TodoistModel(BaseModel):
    """Base for every record returned by the API."""

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # JSON null decodes like a missing key
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Project(TodoistModel):
    id: StrictInt
    name: StrictStr = ""
    # Numeric color id, see https://developer.todoist.com/guides/#colors
    color: StrictInt = 0
    parent_id: Optional[StrictInt] = None
    order: StrictInt = 0
    comment_count: StrictInt = 0
    shared: StrictBool = False
    favorite: StrictBool = False
    inbox_project: StrictBool = False
    team_inbox: StrictBool = False
    # Matches copies of a shared project across accounts; 0 when not shared.
    sync_id: StrictInt = 0
    url: StrictStr = ""


class Section(TodoistModel):
    id: StrictInt
    project_id: StrictInt = 0
    order: StrictInt = 0
    name: StrictStr = ""


class Due(TodoistModel):
    """Due date of a task. Only present on tasks that have one."""

    # Human defined date in arbitrary format, e.g. "every monday"
    string: StrictStr = ""
    # YYYY-MM-DD in the user's timezone
    date: StrictStr = ""
    recurring: StrictBool = False
    # RFC3339 UTC timestamp; only set when the task has an exact due time
    datetime: Optional[StrictStr] = None
    timezone: Optional[StrictStr] = None


class Task(TodoistModel):
    id: StrictInt
    project_id: StrictInt = 0
    section_id: StrictInt = 0
    content: StrictStr = ""
    description: StrictStr = ""
    completed: StrictBool = False
    label_ids: IdList = Field(default_factory=list)
    parent_id: Optional[StrictInt] = None
    order: StrictInt = 0
    # 1 (normal) to 4 (urgent)
    priority: StrictInt = 0
    due: Optional[Due] = None
    url: StrictStr = ""
    comment_count: StrictInt = 0
    assignee: Optional[StrictInt] = None
    # 0 if the task is unassigned
    assigner: StrictInt = 0


class Label(TodoistModel):
    id: StrictInt
    name: StrictStr = ""
    color: StrictInt = 0
    order: StrictInt = 0
    favorite: StrictBool = False


class Attachment(TodoistModel):
    """
    File attached to a comment.

    Only resource_type is always present; which of the other fields are
    filled depends on the kind of file (image, audio, plain file, ...).
    """

    resource_type: StrictStr = ""
    file_name: Optional[StrictStr] = None
    file_size: Optional[StrictInt] = None
    file_type: Optional[StrictStr] = None
    file_url: Optional[StrictStr] = None
    # Seconds, audio files only
    file_duration: Optional[StrictInt] = None
    # "pending" or "completed"
    upload_state: Optional[StrictStr] = None
    image: Optional[StrictStr] = None
    image_width: Optional[StrictInt] = None
    image_height: Optional[StrictInt] = None
    # Thumbnails as [url, width, height]
    tn_l: Optional[List[Any]] = None
    tn_m: Optional[List[Any]] = None
    tn_s: Optional[List[Any]] = None


class Comment(TodoistModel):
    """Comment on either a task or a project; exactly one of the two ids is set."""

    id: StrictInt
    task_id: Optional[StrictInt] = None
    project_id: Optional[StrictInt] = None
    # RFC3339 UTC timestamp
    posted: StrictStr = ""
    content: StrictStr = ""
    attachment: Optional[Attachment] = None


class User(TodoistModel):
    id: StrictInt
    name: StrictStr = ""
    email: StrictStr = ""
