#!/usr/bin/env python3
"""
Unit Tests for Todoist SDK Package

Tests errors, configuration, options projection, models and the REST
transport without making real API calls. Uses mocking to simulate the
requests session.
"""

import os
import sys
import unittest
from pathlib import Path
from unittest.mock import MagicMock, Mock, patch

import requests
from pydantic import ValidationError

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from todoist_sdk import (
    # Errors
    TodoistClientError,
    TodoistAuthError,
    TodoistTransportError,
    TodoistTimeoutError,
    TodoistRequestError,
    TodoistDecodeError,
    # Transport
    RESTClient,
    RESTRequest,
    RESTResponse,
    # Client / infrastructure
    TodoistClient,
    TodoistSDKConfig,
    get_config,
    get_client,
    set_client,
    reset_client,
    with_api_error_handling,
    # Models
    Attachment,
    Comment,
    Due,
    Label,
    Project,
    Section,
    Task,
    User,
    # Options
    to_payload,
    to_query,
    CreateTaskOptions,
    UpdateTaskOptions,
    GetTasksOptions,
    CreateProjectOptions,
    UpdateLabelOptions,
    CreateAttachmentOptions,
    CreateCommentOptions,
)


class TestErrors(unittest.TestCase):
    """Test exception classes."""

    def test_base_exception(self):
        """Test TodoistClientError is base for all exceptions."""
        self.assertTrue(issubclass(TodoistAuthError, TodoistClientError))
        self.assertTrue(issubclass(TodoistTransportError, TodoistClientError))
        self.assertTrue(issubclass(TodoistTimeoutError, TodoistTransportError))
        self.assertTrue(issubclass(TodoistRequestError, TodoistClientError))
        self.assertTrue(issubclass(TodoistDecodeError, TodoistClientError))

    def test_request_error_keeps_status_and_raw_body(self):
        """Test TodoistRequestError stores status code and body bytes."""
        error = TodoistRequestError(404, b"not found")
        self.assertEqual(error.status_code, 404)
        self.assertEqual(error.body, b"not found")
        self.assertEqual(error.text, "not found")
        self.assertIn("404", str(error))

    def test_request_error_text_tolerates_binary_body(self):
        """Test text never raises on undecodable bytes."""
        error = TodoistRequestError(500, b"\xff\xfe")
        self.assertIsInstance(error.text, str)

    def test_request_error_is_not_transport_error(self):
        """Test an HTTP error is a different category from a transport failure."""
        self.assertFalse(issubclass(TodoistRequestError, TodoistTransportError))
        self.assertFalse(issubclass(TodoistDecodeError, TodoistRequestError))


class TestConfig(unittest.TestCase):
    """Test SDK configuration."""

    def tearDown(self):
        get_config().reload()
        reset_client()

    def test_config_singleton(self):
        """Test config is singleton."""
        self.assertIs(get_config(), get_config())
        self.assertIsInstance(get_config(), TodoistSDKConfig)

    def test_config_reads_environment(self):
        """Test token, base URL and timeout come from the environment."""
        env = {
            "TODOIST_API_TOKEN": "env_token",
            "TODOIST_API_BASE_URL": "https://example.test/rest",
            "TODOIST_REQUEST_TIMEOUT": "5",
        }
        with patch.dict(os.environ, env):
            config = get_config()
            config.reload()
            self.assertEqual(config.token, "env_token")
            self.assertEqual(config.base_url, "https://example.test/rest")
            self.assertEqual(config.timeout, 5.0)

    def test_config_invalid_timeout_falls_back(self):
        """Test an unparsable timeout keeps the default."""
        with patch.dict(os.environ, {"TODOIST_REQUEST_TIMEOUT": "soon"}):
            config = get_config()
            config.reload()
            self.assertEqual(config.timeout, 30)

    def test_get_client_is_cached(self):
        """Test get_client builds one client from config and reuses it."""
        with patch.dict(os.environ, {"TODOIST_API_TOKEN": "env_token"}):
            get_config().reload()
            reset_client()
            client = get_client()
            self.assertIsInstance(client, TodoistClient)
            self.assertIs(client, get_client())

    def test_get_client_without_token_raises(self):
        """Test missing token raises TodoistAuthError."""
        with patch.dict(os.environ, {}, clear=True):
            get_config().reload()
            reset_client()
            with self.assertRaises(TodoistAuthError) as ctx:
                get_client()
            self.assertIn("TODOIST_API_TOKEN", str(ctx.exception))

    def test_set_client_closes_replaced_client(self):
        """Test swapping or dropping the shared client closes the old transport."""
        first, second = Mock(), Mock()
        set_client(TodoistClient("TOKEN", transport=first))
        set_client(TodoistClient("TOKEN", transport=second))
        first.close.assert_called_once()
        second.close.assert_not_called()

        reset_client()
        second.close.assert_called_once()

    def test_set_client_same_instance_not_closed(self):
        """Test re-installing the current client leaves it open."""
        transport = Mock()
        client = TodoistClient("TOKEN", transport=transport)
        set_client(client)
        set_client(client)
        transport.close.assert_not_called()


class TestOptionsProjection(unittest.TestCase):
    """Test options -> request body / query parameters."""

    def test_payload_omits_absent_fields(self):
        """Test fields left as None never appear in the body."""
        payload = to_payload(CreateTaskOptions(priority=4, due_string="tomorrow"), {"content": "Buy milk"})
        self.assertEqual(payload, {"content": "Buy milk", "priority": 4, "due_string": "tomorrow"})

    def test_payload_without_options_is_base(self):
        """Test None options contribute nothing."""
        self.assertEqual(to_payload(None, {"name": "Inbox"}), {"name": "Inbox"})
        self.assertEqual(to_payload(None), {})

    def test_payload_keys_match_present_fields(self):
        """Test body keys are exactly the present fields plus required fields."""
        options = UpdateTaskOptions(content="x", label_ids=[1, 2], assignee=0)
        payload = to_payload(options)
        self.assertEqual(set(payload), {"content", "label_ids", "assignee"})
        self.assertEqual(payload["label_ids"], [1, 2])

    def test_payload_keeps_falsy_values(self):
        """Test False, 0 and empty string are sent, not treated as absent."""
        payload = to_payload(UpdateLabelOptions(name="", order=0, favorite=False))
        self.assertEqual(payload, {"name": "", "order": 0, "favorite": False})

    def test_payload_does_not_mutate_base(self):
        """Test the required-fields dict is copied."""
        base = {"name": "Work"}
        to_payload(CreateProjectOptions(color=30), base)
        self.assertEqual(base, {"name": "Work"})

    def test_payload_projects_nested_options(self):
        """Test attachment options are projected recursively."""
        options = CreateCommentOptions(
            attachment=CreateAttachmentOptions(file_url="https://example.com/a.pdf", file_type="application/pdf")
        )
        payload = to_payload(options, {"task_id": 1, "content": "see file"})
        self.assertEqual(
            payload["attachment"],
            {"file_url": "https://example.com/a.pdf", "file_type": "application/pdf"},
        )

    def test_payload_sorts_set_values(self):
        """Test label id sets serialize deterministically."""
        payload = to_payload(CreateTaskOptions(label_ids={3, 1, 2}))
        self.assertEqual(payload["label_ids"], [1, 2, 3])

    def test_payload_rejects_non_options(self):
        """Test passing a plain dict as options is a TypeError."""
        with self.assertRaises(TypeError):
            to_payload({"priority": 4})

    def test_options_reject_unknown_fields(self):
        """Test a misspelled option fails instead of being dropped."""
        with self.assertRaises(ValidationError):
            CreateTaskOptions(priorty=4)

    def test_query_uses_wire_name(self):
        """Test the filter query is sent under its API name."""
        self.assertEqual(to_query(GetTasksOptions(filter_query="today | overdue")), {"filter": "today | overdue"})
        self.assertEqual(to_query(GetTasksOptions(filter="p1")), {"filter": "p1"})

    def test_query_omits_absent_filters(self):
        """Test absent filters never become parameters."""
        self.assertEqual(to_query(GetTasksOptions(project_id=5)), {"project_id": "5"})
        self.assertEqual(to_query(GetTasksOptions()), {})
        self.assertEqual(to_query(None), {})

    def test_query_comma_joins_multi_value(self):
        """Test a list filter becomes one comma-joined value."""
        self.assertEqual(to_query(GetTasksOptions(ids=[4, 5, 6])), {"ids": "4,5,6"})

    def test_query_bool_values(self):
        """Test booleans are written as true/false."""
        self.assertEqual(to_query(CreateProjectOptions(favorite=True)), {"favorite": "true"})


class TestModels(unittest.TestCase):
    """Test decoding and serialization of resource records."""

    def test_task_minimal_decode(self):
        """Test a task with only id and content gets zero values elsewhere."""
        task = Task.model_validate({"id": 1, "content": "Buy milk"})
        self.assertEqual(task, Task(id=1, content="Buy milk"))
        self.assertIsNone(task.due)
        self.assertIsNone(task.parent_id)
        self.assertIsNone(task.assignee)
        self.assertEqual(task.label_ids, [])
        self.assertFalse(task.completed)

    def test_task_full_decode(self):
        """Test every task field is read from its wire name."""
        data = {
            "id": 2995104339,
            "project_id": 2203306141,
            "section_id": 7025,
            "content": "Buy Milk",
            "description": "",
            "completed": False,
            "label_ids": [2156154810, 2156154820],
            "parent_id": 2995104589,
            "order": 1,
            "priority": 4,
            "due": {
                "string": "tomorrow at 12",
                "date": "2016-09-02",
                "recurring": False,
                "datetime": "2016-09-02T12:00:00.000000Z",
                "timezone": "Europe/Moscow",
            },
            "url": "https://todoist.com/showTask?id=2995104339",
            "comment_count": 10,
            "assignee": 2671142,
            "assigner": 2671362,
        }
        task = Task.model_validate(data)
        self.assertEqual(task.model_dump(), data)
        self.assertEqual(task.due.timezone, "Europe/Moscow")

    def test_unknown_keys_ignored(self):
        """Test fields added by the server do not break decoding."""
        label = Label.model_validate({"id": 3, "name": "waiting", "is_shared": True})
        self.assertEqual(label, Label(id=3, name="waiting"))

    def test_null_values_take_zero_value(self):
        """Test JSON null on a non-nullable field decodes like a missing key."""
        section = Section.model_validate({"id": 7, "name": None, "order": None})
        self.assertEqual(section, Section(id=7))

    def test_missing_id_rejected(self):
        """Test records without an id are not accepted."""
        with self.assertRaises(ValueError):
            Project.model_validate({"name": "Inbox"})

    def test_wrong_types_rejected(self):
        """Test values of the wrong JSON type raise ValueError."""
        with self.assertRaises(ValueError):
            Task.model_validate({"id": "1"})
        with self.assertRaises(ValueError):
            Task.model_validate({"id": 1, "completed": "yes"})
        with self.assertRaises(ValueError):
            Task.model_validate({"id": 1, "label_ids": [1, "2"]})
        with self.assertRaises(ValueError):
            User.model_validate(["not", "an", "object"])

    def test_label_ids_must_be_a_list(self):
        """Test falsy non-list label_ids are rejected, not read as empty."""
        for value in (0, "", False, {}, 5, "1,2"):
            with self.subTest(label_ids=value):
                with self.assertRaises(ValidationError):
                    Task.model_validate({"id": 1, "label_ids": value})

    def test_label_ids_null_or_missing_is_empty(self):
        """Test only null or a missing key decode to no labels."""
        self.assertEqual(Task.model_validate({"id": 1, "label_ids": None}).label_ids, [])
        self.assertEqual(Task.model_validate({"id": 1}).label_ids, [])

    def test_boolean_ids_rejected(self):
        """Test JSON true is not accepted where an integer id is expected."""
        with self.assertRaises(ValidationError):
            Label.model_validate({"id": True})

    def test_comment_with_attachment(self):
        """Test comment attachment decodes into an Attachment."""
        comment = Comment.model_validate({
            "id": 2992679862,
            "task_id": 2995104339,
            "posted": "2016-09-22T07:00:00.000000Z",
            "content": "Need one bottle of milk",
            "attachment": {
                "resource_type": "file",
                "file_name": "File.pdf",
                "file_type": "application/pdf",
                "file_url": "https://cdn-domain.tld/path/to/file.pdf",
                "upload_state": "completed",
            },
        })
        self.assertEqual(comment.task_id, 2995104339)
        self.assertIsNone(comment.project_id)
        self.assertIsInstance(comment.attachment, Attachment)
        self.assertEqual(comment.attachment.file_name, "File.pdf")
        self.assertIsNone(comment.attachment.file_size)

    def test_round_trip(self):
        """Test model_validate(model_dump(x)) == x for each record type."""
        records = [
            Project(id=1, name="Inbox", parent_id=None, inbox_project=True, url="https://todoist.com/p/1"),
            Section(id=2, project_id=1, order=3, name="Later"),
            Task(id=3, content="Read", label_ids=[5, 6], due=Due(string="today", date="2022-01-01")),
            Label(id=4, name="urgent", color=30, order=1, favorite=True),
            Comment(id=5, project_id=1, content="hi", attachment=Attachment(resource_type="image", tn_s=["u", 1, 2])),
            User(id=6, name="Ada", email="ada@example.com"),
        ]
        for record in records:
            self.assertEqual(type(record).model_validate(record.model_dump()), record)


class TestWithApiErrorHandling(unittest.TestCase):
    """Test the error handling decorator."""

    def test_reraises_same_exception_with_operation(self):
        """Test the error is re-raised unchanged and tagged with the operation."""
        error = TodoistRequestError(404, b"not found")

        @with_api_error_handling("deleting label {label_id}")
        def delete(label_id, client=None):
            raise error

        with self.assertRaises(TodoistRequestError) as ctx:
            delete(99)
        self.assertIs(ctx.exception, error)
        self.assertEqual(ctx.exception.operation, "deleting label 99")

    def test_passes_through_results(self):
        """Test successful calls are returned untouched."""

        @with_api_error_handling("fetching labels")
        def fetch():
            return ["a"]

        self.assertEqual(fetch(), ["a"])

    def test_value_errors_not_wrapped(self):
        """Test validation errors propagate as ValueError."""

        @with_api_error_handling("fetching task {task_id}")
        def fetch(task_id):
            raise ValueError("bad id")

        with self.assertRaises(ValueError):
            fetch(0)


class TestRESTClient(unittest.TestCase):
    """Test the transport adapter against a mocked requests session."""

    def setUp(self):
        self.session = MagicMock()
        self.response = Mock()
        self.response.status_code = 200
        self.response.content = b'{"id": 1}'
        self.session.request.return_value = self.response
        self.transport = RESTClient(session=self.session, timeout=12)

    def test_send_get_without_body(self):
        """Test a request without payload sends no body."""
        request = RESTRequest("GET", "https://api.todoist.com/rest/v1/labels", {"Authorization": "Bearer T"})

        result = self.transport.send(request)

        self.assertEqual(result, RESTResponse(status_code=200, body=b'{"id": 1}'))
        self.session.request.assert_called_once_with(
            method="GET",
            url="https://api.todoist.com/rest/v1/labels",
            headers={"Authorization": "Bearer T"},
            data=None,
            timeout=12,
        )
        self.response.close.assert_called_once()

    def test_send_serializes_payload(self):
        """Test the payload is sent as JSON bytes."""
        request = RESTRequest(
            "POST",
            "https://api.todoist.com/rest/v1/tasks",
            {"Content-Type": "application/json"},
            {"content": "Buy milk"},
        )

        self.transport.send(request)

        kwargs = self.session.request.call_args.kwargs
        self.assertEqual(kwargs["data"], b'{"content": "Buy milk"}')

    def test_non_2xx_is_returned_not_raised(self):
        """Test HTTP errors are normal responses at this layer."""
        self.response.status_code = 503
        self.response.content = b"Service Unavailable"

        result = self.transport.send(RESTRequest("GET", "https://api.todoist.com/rest/v1/tasks"))

        self.assertEqual(result.status_code, 503)
        self.assertEqual(result.body, b"Service Unavailable")
        self.assertFalse(result.ok)

    def test_empty_body(self):
        """Test 204 responses give an empty body."""
        self.response.status_code = 204
        self.response.content = b""

        result = self.transport.send(RESTRequest("DELETE", "https://api.todoist.com/rest/v1/tasks/1"))

        self.assertEqual(result, RESTResponse(204, b""))
        self.assertTrue(result.ok)

    def test_timeout_raises_timeout_error(self):
        """Test requests.Timeout becomes TodoistTimeoutError."""
        self.session.request.side_effect = requests.Timeout("read timed out")

        with self.assertRaises(TodoistTimeoutError):
            self.transport.send(RESTRequest("GET", "https://api.todoist.com/rest/v1/tasks"))

    def test_connection_error_raises_transport_error(self):
        """Test connection failures become TodoistTransportError."""
        self.session.request.side_effect = requests.ConnectionError("refused")

        with self.assertRaises(TodoistTransportError) as ctx:
            self.transport.send(RESTRequest("GET", "https://api.todoist.com/rest/v1/tasks"))
        self.assertNotIsInstance(ctx.exception, TodoistTimeoutError)

    def test_unserializable_payload(self):
        """Test payload serialization errors happen before any network call."""
        request = RESTRequest("POST", "https://api.todoist.com/rest/v1/tasks", {}, {"content": object()})

        with self.assertRaises(TodoistClientError):
            self.transport.send(request)
        self.session.request.assert_not_called()

    def test_default_session(self):
        """Test a requests.Session is created when none is injected."""
        transport = RESTClient()
        self.assertIsInstance(transport._session, requests.Session)
        transport.close()


if __name__ == "__main__":
    unittest.main()
