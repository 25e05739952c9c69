"""Goal and key result tools."""

from typing import Literal, Optional

from ..services import ClickUpServices
from .catalog import ToolGroup, require

goal_tools = ToolGroup("goals")

KeyResultType = Literal["number", "currency", "boolean", "percentage", "automatic"]


@goal_tools.tool("get_goals", action="getting goals")
def get_goals(services: ClickUpServices, include_completed: bool = False) -> dict:
    """Gets all goals with progress, owners and key result counts."""
    goals = services.goals.get_goals(include_completed)
    return {
        "goals": [
            {
                "id": goal.get("id"),
                "name": goal.get("name"),
                "description": goal.get("description"),
                "due_date": goal.get("due_date"),
                "percent_completed": goal.get("percent_completed"),
                "color": goal.get("color"),
                "archived": goal.get("archived"),
                "owners": [{"id": o.get("id"), "username": o.get("username")} for o in goal.get("owners", [])],
                "key_results_count": len(goal.get("key_results", [])),
                "pretty_url": goal.get("pretty_url"),
            }
            for goal in goals
        ],
        "total": len(goals),
    }


@goal_tools.tool("get_goal", action="getting goal")
def get_goal(services: ClickUpServices, goal_id: str) -> dict:
    """Gets a goal with all of its key results."""
    require(goal_id=goal_id)
    return {"goal": services.goals.get_goal(goal_id)}


@goal_tools.tool("create_goal", action="creating goal")
def create_goal(
    services: ClickUpServices,
    name: str,
    due_date: int,
    description: Optional[str] = None,
    multiple_owners: bool = True,
    owners: Optional[list[int]] = None,
    color: Optional[str] = None,
) -> dict:
    """Creates a goal. Due date is a Unix timestamp in milliseconds."""
    require(name=name, due_date=due_date)
    goal = services.goals.create_goal({
        "name": name,
        "due_date": due_date,
        "description": description,
        "multiple_owners": multiple_owners,
        "owners": owners,
        "color": color,
    })
    return {
        "message": f'Goal "{goal.get("name")}" created successfully',
        "goal": {"id": goal.get("id"), "name": goal.get("name"), "pretty_url": goal.get("pretty_url")},
    }


@goal_tools.tool("update_goal", action="updating goal")
def update_goal(
    services: ClickUpServices,
    goal_id: str,
    name: Optional[str] = None,
    due_date: Optional[int] = None,
    description: Optional[str] = None,
    add_owners: Optional[list[int]] = None,
    rem_owners: Optional[list[int]] = None,
    color: Optional[str] = None,
) -> dict:
    """Updates a goal; owners are added or removed by user ID."""
    require(goal_id=goal_id)
    goal = services.goals.update_goal(goal_id, {
        "name": name,
        "due_date": due_date,
        "description": description,
        "add_owners": add_owners,
        "rem_owners": rem_owners,
        "color": color,
    })
    return {
        "message": f'Goal "{goal.get("name")}" updated successfully',
        "goal": {
            "id": goal.get("id"),
            "name": goal.get("name"),
            "percent_completed": goal.get("percent_completed"),
            "pretty_url": goal.get("pretty_url"),
        },
    }


@goal_tools.tool("delete_goal", action="deleting goal")
def delete_goal(services: ClickUpServices, goal_id: str) -> dict:
    """Deletes a goal."""
    require(goal_id=goal_id)
    services.goals.delete_goal(goal_id)
    return {"message": f"Goal {goal_id} deleted successfully"}


@goal_tools.tool("create_key_result", action="creating key result")
def create_key_result(
    services: ClickUpServices,
    goal_id: str,
    name: str,
    type: KeyResultType,
    steps_start: int,
    steps_end: int,
    unit: Optional[str] = None,
    owners: Optional[list[int]] = None,
    task_ids: Optional[list[str]] = None,
    list_ids: Optional[list[str]] = None,
) -> dict:
    """Adds a key result (target) to a goal.

    Use type "automatic" with task_ids or list_ids to track completion of
    tasks automatically.
    """
    require(goal_id=goal_id, name=name, type=type, steps_start=steps_start, steps_end=steps_end)
    key_result = services.goals.create_key_result(goal_id, {
        "name": name,
        "type": type,
        "steps_start": steps_start,
        "steps_end": steps_end,
        "unit": unit,
        "owners": owners,
        "task_ids": task_ids,
        "list_ids": list_ids,
    })
    return {
        "message": f'Key result "{key_result.get("name")}" created successfully',
        "key_result": {
            "id": key_result.get("id"),
            "name": key_result.get("name"),
            "type": key_result.get("type"),
            "steps_start": key_result.get("steps_start"),
            "steps_end": key_result.get("steps_end"),
            "steps_current": key_result.get("steps_current"),
            "percent_completed": key_result.get("percent_completed"),
        },
    }


@goal_tools.tool("update_key_result", action="updating key result")
def update_key_result(
    services: ClickUpServices,
    key_result_id: str,
    steps_current: Optional[int] = None,
    steps_start: Optional[int] = None,
    steps_end: Optional[int] = None,
    name: Optional[str] = None,
    unit: Optional[str] = None,
    note: Optional[str] = None,
) -> dict:
    """Updates a key result, typically its current progress."""
    require(key_result_id=key_result_id)
    key_result = services.goals.update_key_result(key_result_id, {
        "steps_current": steps_current,
        "steps_start": steps_start,
        "steps_end": steps_end,
        "name": name,
        "unit": unit,
        "note": note,
    })
    return {
        "message": f'Key result "{key_result.get("name")}" updated successfully',
        "key_result": {
            "id": key_result.get("id"),
            "name": key_result.get("name"),
            "steps_current": key_result.get("steps_current"),
            "steps_end": key_result.get("steps_end"),
            "percent_completed": key_result.get("percent_completed"),
            "completed": key_result.get("completed"),
        },
    }


@goal_tools.tool("delete_key_result", action="deleting key result")
def delete_key_result(services: ClickUpServices, key_result_id: str) -> dict:
    """Deletes a key result."""
    require(key_result_id=key_result_id)
    services.goals.delete_key_result(key_result_id)
    return {"message": f"Key result {key_result_id} deleted successfully"}
