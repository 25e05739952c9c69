"""Task tools, including dependencies and task links."""

from typing import Optional

from ..services import ClickUpServices
from .catalog import ToolGroup, ToolInputError, require

task_tools = ToolGroup("tasks")

# Maximum characters for description fields in list responses
MAX_DESCRIPTION_LENGTH = 500

PRIORITY_NAMES = {1: "urgent", 2: "high", 3: "normal", 4: "low"}
PRIORITY_VALUES = {name: value for value, name in PRIORITY_NAMES.items()}


def _truncate(text: Optional[str], max_length: int = MAX_DESCRIPTION_LENGTH) -> Optional[str]:
    if not text or len(text) <= max_length:
        return text
    return text[:max_length - 3] + "..."


def _priority_value(priority: Optional[str]) -> Optional[int]:
    if priority is None:
        return None
    try:
        return PRIORITY_VALUES[priority.lower()]
    except KeyError:
        raise ToolInputError(
            f"Invalid priority {priority!r}; use one of: {', '.join(PRIORITY_VALUES)}"
        ) from None


def _format_task_summary(task: dict) -> dict:
    priority = task.get("priority") or {}
    return {
        "id": task["id"],
        "name": task.get("name"),
        "description": _truncate(task.get("text_content") or task.get("description")),
        "status": (task.get("status") or {}).get("status"),
        "priority": priority.get("priority"),
        "assignees": [a.get("username") for a in task.get("assignees", [])],
        "due_date": task.get("due_date"),
        "url": task.get("url"),
    }


@task_tools.tool("get_task", action="getting task")
def get_task(services: ClickUpServices, task_id: str, include_subtasks: bool = False) -> dict:
    """Gets full details for a single task, optionally with subtasks."""
    require(task_id=task_id)
    return {"task": services.tasks.get_task(task_id, include_subtasks=include_subtasks)}


@task_tools.tool("get_tasks", action="getting tasks")
def get_tasks(
    services: ClickUpServices,
    list_id: str,
    page: int = 0,
    include_closed: bool = False,
    statuses: Optional[list[str]] = None,
) -> dict:
    """Gets one page (up to 100) of tasks in a list.

    Args:
        list_id: List to read tasks from
        page: Zero-based page number
        include_closed: Include closed tasks
        statuses: Only tasks in these statuses
    """
    require(list_id=list_id)
    tasks = services.tasks.get_tasks(list_id, page=page, include_closed=include_closed, statuses=statuses)
    return {
        "tasks": [_format_task_summary(t) for t in tasks],
        "count": len(tasks),
        "page": page,
    }


@task_tools.tool("create_task", action="creating task")
def create_task(
    services: ClickUpServices,
    list_id: str,
    name: str,
    description: Optional[str] = None,
    status: Optional[str] = None,
    priority: Optional[str] = None,
    due_date: Optional[int] = None,
    assignees: Optional[list[int]] = None,
    tags: Optional[list[str]] = None,
) -> dict:
    """Creates a task in a list.

    Priority is one of urgent, high, normal, low. Due date is a Unix
    timestamp in milliseconds.
    """
    require(list_id=list_id, name=name)
    task = services.tasks.create_task(list_id, {
        "name": name,
        "description": description,
        "status": status,
        "priority": _priority_value(priority),
        "due_date": due_date,
        "assignees": assignees,
        "tags": tags,
    })
    return {
        "message": f'Task "{task.get("name")}" created successfully',
        "task": _format_task_summary(task),
    }


@task_tools.tool("update_task", action="updating task")
def update_task(
    services: ClickUpServices,
    task_id: str,
    name: Optional[str] = None,
    description: Optional[str] = None,
    status: Optional[str] = None,
    priority: Optional[str] = None,
    due_date: Optional[int] = None,
) -> dict:
    """Updates a task's name, description, status, priority or due date."""
    require(task_id=task_id)
    data = {
        "name": name,
        "description": description,
        "status": status,
        "priority": _priority_value(priority),
        "due_date": due_date,
    }
    if all(value is None for value in data.values()):
        raise ToolInputError("At least one field to update is required")
    task = services.tasks.update_task(task_id, data)
    return {
        "message": f'Task "{task.get("name")}" updated successfully',
        "task": _format_task_summary(task),
    }


@task_tools.tool("delete_task", action="deleting task")
def delete_task(services: ClickUpServices, task_id: str) -> dict:
    """Permanently deletes a task."""
    require(task_id=task_id)
    services.tasks.delete_task(task_id)
    return {"message": f"Task {task_id} deleted successfully"}


@task_tools.tool("add_dependency", action="adding dependency")
def add_dependency(
    services: ClickUpServices,
    task_id: str,
    depends_on: Optional[str] = None,
    dependency_of: Optional[str] = None,
) -> dict:
    """Adds a dependency to a task.

    Set `depends_on` when task_id is waiting on another task, or
    `dependency_of` when another task is waiting on task_id.
    """
    require(task_id=task_id)
    if not depends_on and not dependency_of:
        raise ToolInputError("Either depends_on or dependency_of is required")

    dependency = services.tasks.add_dependency(task_id, depends_on=depends_on, dependency_of=dependency_of)
    if depends_on:
        relationship = f"Task {task_id} now depends on task {depends_on}"
    else:
        relationship = f"Task {dependency_of} now depends on task {task_id}"
    return {
        "message": f"Dependency added successfully. {relationship}",
        "dependency": dependency,
    }


@task_tools.tool("delete_dependency", action="removing dependency")
def delete_dependency(
    services: ClickUpServices,
    task_id: str,
    depends_on: Optional[str] = None,
    dependency_of: Optional[str] = None,
) -> dict:
    """Removes a dependency between two tasks."""
    require(task_id=task_id)
    if not depends_on and not dependency_of:
        raise ToolInputError("Either depends_on or dependency_of is required")
    services.tasks.delete_dependency(task_id, depends_on=depends_on, dependency_of=dependency_of)
    return {"message": f"Dependency removed successfully from task {task_id}"}


@task_tools.tool("add_task_link", action="adding task link")
def add_task_link(services: ClickUpServices, task_id: str, links_to: str) -> dict:
    """Links two tasks together without implying a dependency."""
    require(task_id=task_id, links_to=links_to)
    link = services.tasks.add_task_link(task_id, links_to)
    return {
        "message": f"Task link added successfully: {task_id} <-> {links_to}",
        "link": link,
    }


@task_tools.tool("delete_task_link", action="removing task link")
def delete_task_link(services: ClickUpServices, task_id: str, links_to: str) -> dict:
    """Removes the link between two tasks."""
    require(task_id=task_id, links_to=links_to)
    services.tasks.delete_task_link(task_id, links_to)
    return {"message": f"Task link removed successfully: {task_id} <-> {links_to}"}
