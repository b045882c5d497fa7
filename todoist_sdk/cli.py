#!/usr/bin/env python3
"""
Todoist command-line interface.

Usage:
    todoist projects
    todoist tasks -p <project_id> -l <label_id>
    todoist task <id>
    todoist create "Buy milk" -d tomorrow -P 4
    todoist close <id>
    todoist comment <task_id> "Done, see receipt"

Environment Variables:
    TODOIST_API_TOKEN: API token (required)
    TODOIST_API_BASE_URL: API origin override (optional)
    TODOIST_REQUEST_TIMEOUT: Request timeout in seconds (optional)
"""

import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from .client import TodoistClient
from .comments import get_project_comments, get_task_comments, create_task_comment
from .errors import TodoistClientError, TodoistRequestError
from .infrastructure import get_client
from .labels import get_labels
from .models import Task
from .projects import get_project, get_project_collaborators, get_projects
from .sections import GetSectionsOptions, get_sections
from .tasks import (
    CreateTaskOptions,
    GetTasksOptions,
    UpdateTaskOptions,
    close_task,
    create_task,
    delete_task,
    get_task,
    get_tasks,
    reopen_task,
    update_task,
)


def _parse_ids(value: Optional[str]) -> Optional[List[int]]:
    """Parse a comma-separated id list ("1,2,3")."""
    if not value:
        return None
    try:
        return [int(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise ValueError(f"Invalid id list: {value}")


def _print_json(items: Any) -> None:
    if isinstance(items, list):
        print(json.dumps([item.model_dump(mode="json") for item in items], indent=2))
    else:
        print(json.dumps(items.model_dump(mode="json"), indent=2))


def format_task(task: Task, verbose: bool = False) -> str:
    """Format task for display."""
    status = "✓" if task.completed else " "
    due = task.due.date if task.due else "-"
    line = f"[{status}] p{task.priority or 1} {due:<12} {task.content}"

    if verbose:
        line = f"{task.id:<12} {line}"

    return line


def cmd_projects(client: TodoistClient, args):
    """List projects."""
    projects = get_projects(client=client)
    if args.json:
        _print_json(projects)
        return

    for p in projects:
        star = "*" if p.favorite else " "
        prefix = f"{p.id:<12} " if args.verbose else ""
        print(f"{prefix}{star} {p.name}")


def cmd_project(client: TodoistClient, args):
    """Get project details."""
    project = get_project(args.project_id, client=client)
    if args.json:
        _print_json(project)
        return

    print(f"Project: {project.name}")
    print(f"ID: {project.id}")
    print(f"URL: {project.url}")
    print(f"Shared: {'Yes' if project.shared else 'No'}")
    print(f"Favorite: {'Yes' if project.favorite else 'No'}")
    print(f"Comments: {project.comment_count}")


def cmd_collaborators(client: TodoistClient, args):
    """List collaborators of a shared project."""
    users = get_project_collaborators(args.project_id, client=client)
    if args.json:
        _print_json(users)
        return

    for u in users:
        print(f"{u.id:<12} {u.name:<30} {u.email}")


def cmd_sections(client: TodoistClient, args):
    """List sections."""
    sections = get_sections(GetSectionsOptions(project_id=args.project), client=client)
    if args.json:
        _print_json(sections)
        return

    for s in sections:
        prefix = f"{s.id:<12} " if args.verbose else ""
        print(f"{prefix}{s.name}")


def cmd_labels(client: TodoistClient, args):
    """List labels."""
    labels = get_labels(client=client)
    if args.json:
        _print_json(labels)
        return

    for label in labels:
        prefix = f"{label.id:<12} " if args.verbose else ""
        print(f"{prefix}{label.name}")


def cmd_tasks(client: TodoistClient, args):
    """List active tasks."""
    options = GetTasksOptions(
        project_id=args.project,
        section_id=args.section,
        label_id=args.label,
        filter_query=args.filter,
        ids=_parse_ids(args.ids),
    )
    tasks = get_tasks(options, client=client)
    if args.json:
        _print_json(tasks)
        return

    for task in tasks:
        print(format_task(task, verbose=args.verbose))
    print(f"\n({len(tasks)} tasks)")


def cmd_task(client: TodoistClient, args):
    """Get task details."""
    task = get_task(args.task_id, client=client)
    if args.json:
        _print_json(task)
        return

    print(f"Task: {task.content}")
    print(f"ID: {task.id}")
    print(f"URL: {task.url}")
    print(f"Completed: {'Yes' if task.completed else 'No'}")
    print(f"Priority: {task.priority}")
    if task.due:
        print(f"Due: {task.due.string or task.due.date}{' (recurring)' if task.due.recurring else ''}")
    else:
        print("Due: None")
    if task.label_ids:
        print(f"Labels: {', '.join(str(i) for i in task.label_ids)}")
    if task.description:
        print(f"\nDescription:\n{task.description}")


def cmd_create(client: TodoistClient, args):
    """Create task."""
    options = CreateTaskOptions(
        description=args.description,
        project_id=args.project,
        section_id=args.section,
        parent_id=args.parent,
        label_ids=_parse_ids(args.labels),
        priority=args.priority,
        due_string=args.due,
    )
    task = create_task(args.content, options, request_id=args.request_id, client=client)
    if args.json:
        _print_json(task)
        return

    print(f"Created task {task.id}: {task.content}")
    if task.url:
        print(f"URL: {task.url}")


def cmd_update(client: TodoistClient, args):
    """Update task."""
    options = UpdateTaskOptions(
        content=args.content,
        description=args.description,
        label_ids=_parse_ids(args.labels),
        priority=args.priority,
        due_string=args.due,
    )
    update_task(args.task_id, options, request_id=args.request_id, client=client)
    print(f"Updated task {args.task_id}")


def cmd_close(client: TodoistClient, args):
    """Close task."""
    close_task(args.task_id, request_id=args.request_id, client=client)
    print(f"Closed task {args.task_id}")


def cmd_reopen(client: TodoistClient, args):
    """Reopen task."""
    reopen_task(args.task_id, request_id=args.request_id, client=client)
    print(f"Reopened task {args.task_id}")


def cmd_delete(client: TodoistClient, args):
    """Delete task."""
    delete_task(args.task_id, request_id=args.request_id, client=client)
    print(f"Deleted task {args.task_id}")


def cmd_comments(client: TodoistClient, args):
    """List comments of a task or project."""
    if args.task:
        comments = get_task_comments(args.task, client=client)
    else:
        comments = get_project_comments(args.project, client=client)
    if args.json:
        _print_json(comments)
        return

    for c in comments:
        print(f"[{c.posted}] {c.content}")
        if c.attachment and c.attachment.file_url:
            print(f"    attachment: {c.attachment.file_url}")


def cmd_comment(client: TodoistClient, args):
    """Add comment to task."""
    comment = create_task_comment(args.task_id, args.text, request_id=args.request_id, client=client)
    if args.json:
        _print_json(comment)
        return

    print(f"Added comment {comment.id} to task {args.task_id}")


def build_parser() -> argparse.ArgumentParser:
    epilog = """\
Examples:
  todoist projects                   List projects
  todoist tasks -p <project>         List tasks in project
  todoist tasks -f "today | overdue" List tasks matching a filter
  todoist task <id>                  Get task details
  todoist create "Name" -d tomorrow  Create task due tomorrow
  todoist close <id>                 Complete task
  todoist comment <id> "text"        Add comment to task

Environment:
  TODOIST_API_TOKEN   Required. API token.
"""

    parser = argparse.ArgumentParser(
        prog="todoist",
        description="Todoist CLI - REST API client",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show ids and debug logging")

    # Same flags after the subcommand; SUPPRESS keeps a value set before it
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--json", action="store_true", default=argparse.SUPPRESS, help="Output as JSON")
    common.add_argument(
        "-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help="Show ids and debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="command")

    # projects
    projects = subparsers.add_parser("projects", parents=[common], help="List projects")
    projects.set_defaults(func=cmd_projects)

    # project
    project = subparsers.add_parser("project", parents=[common], help="Get project details")
    project.add_argument("project_id", type=int, help="Project ID")
    project.set_defaults(func=cmd_project)

    # collaborators
    collaborators = subparsers.add_parser("collaborators", parents=[common], help="List project collaborators")
    collaborators.add_argument("project_id", type=int, help="Project ID")
    collaborators.set_defaults(func=cmd_collaborators)

    # sections
    sections = subparsers.add_parser("sections", parents=[common], help="List sections")
    sections.add_argument("-p", "--project", type=int, help="Project ID")
    sections.set_defaults(func=cmd_sections)

    # labels
    labels = subparsers.add_parser("labels", parents=[common], help="List labels")
    labels.set_defaults(func=cmd_labels)

    # tasks
    tasks = subparsers.add_parser("tasks", parents=[common], help="List active tasks")
    tasks.add_argument("-p", "--project", type=int, help="Project ID")
    tasks.add_argument("-s", "--section", type=int, help="Section ID")
    tasks.add_argument("-l", "--label", type=int, help="Label ID")
    tasks.add_argument("-f", "--filter", help="Todoist filter query")
    tasks.add_argument("--ids", help="Task IDs (comma-separated)")
    tasks.set_defaults(func=cmd_tasks)

    # task
    task = subparsers.add_parser("task", parents=[common], help="Get task details")
    task.add_argument("task_id", type=int, help="Task ID")
    task.set_defaults(func=cmd_task)

    # create
    create = subparsers.add_parser("create", parents=[common], help="Create task")
    create.add_argument("content", help="Task content")
    create.add_argument("-n", "--description", help="Description")
    create.add_argument("-p", "--project", type=int, help="Project ID")
    create.add_argument("-s", "--section", type=int, help="Section ID")
    create.add_argument("--parent", type=int, help="Parent task ID")
    create.add_argument("-l", "--labels", help="Label IDs (comma-separated)")
    create.add_argument("-P", "--priority", type=int, choices=[1, 2, 3, 4])
    create.add_argument("-d", "--due", help='Due date in natural language, e.g. "next monday"')
    create.add_argument("--request-id", help="Idempotency token (X-Request-Id)")
    create.set_defaults(func=cmd_create)

    # update
    update = subparsers.add_parser("update", parents=[common], help="Update task")
    update.add_argument("task_id", type=int, help="Task ID")
    update.add_argument("-c", "--content", help="New content")
    update.add_argument("-n", "--description", help="Description")
    update.add_argument("-l", "--labels", help="Label IDs (comma-separated)")
    update.add_argument("-P", "--priority", type=int, choices=[1, 2, 3, 4])
    update.add_argument("-d", "--due", help="Due date in natural language")
    update.add_argument("--request-id", help="Idempotency token (X-Request-Id)")
    update.set_defaults(func=cmd_update)

    # close / reopen / delete
    for name, func, help_text in (
        ("close", cmd_close, "Complete task"),
        ("reopen", cmd_reopen, "Reopen task"),
        ("delete", cmd_delete, "Delete task"),
    ):
        sub = subparsers.add_parser(name, parents=[common], help=help_text)
        sub.add_argument("task_id", type=int, help="Task ID")
        sub.add_argument("--request-id", help="Idempotency token (X-Request-Id)")
        sub.set_defaults(func=func)

    # comments
    comments = subparsers.add_parser("comments", parents=[common], help="List comments of a task or project")
    target = comments.add_mutually_exclusive_group(required=True)
    target.add_argument("-t", "--task", type=int, help="Task ID")
    target.add_argument("-p", "--project", type=int, help="Project ID")
    comments.set_defaults(func=cmd_comments)

    # comment
    comment = subparsers.add_parser("comment", parents=[common], help="Add comment to task")
    comment.add_argument("task_id", type=int, help="Task ID")
    comment.add_argument("text", help="Comment text")
    comment.add_argument("--request-id", help="Idempotency token (X-Request-Id)")
    comment.set_defaults(func=cmd_comment)

    return parser


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        client = get_client()
        args.func(client, args)
    except TodoistRequestError as e:
        print(f"Error: HTTP {e.status_code}: {e.text or 'no details'}", file=sys.stderr)
        sys.exit(1)
    except (TodoistClientError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
