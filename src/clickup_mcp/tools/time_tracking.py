"""Time tracking tools."""

from typing import Optional

from ..output import paginate
from ..services import ClickUpServices
from .catalog import ToolGroup, require

time_tracking_tools = ToolGroup("time_tracking")


def _entry_summary(entry: dict) -> dict:
    task = entry.get("task") or {}
    user = entry.get("user") or {}
    return {
        "id": entry.get("id"),
        "task_id": task.get("id"),
        "task_name": task.get("name"),
        "user": user.get("username"),
        "start": entry.get("start"),
        "end": entry.get("end"),
        "duration": entry.get("duration"),
        "description": entry.get("description"),
        "billable": entry.get("billable"),
    }


@time_tracking_tools.tool("get_time_entries", action="getting time entries")
def get_time_entries(
    services: ClickUpServices,
    start_date: Optional[int] = None,
    end_date: Optional[int] = None,
    assignee: Optional[str] = None,
    task_id: Optional[str] = None,
    limit: int = 50,
    offset: int = 0,
) -> dict:
    """Gets time entries in a date range (Unix ms). Defaults to the last 30 days.

    Results are paged: call again with offset=next_offset while has_more.
    """
    entries = services.time_tracking.get_time_entries(
        start_date=start_date,
        end_date=end_date,
        assignee=assignee,
        task_id=task_id,
    )
    page, pagination = paginate([_entry_summary(e) for e in entries], limit, offset)
    return {"time_entries": page, "pagination": pagination}


@time_tracking_tools.tool("get_current_time_entry", action="getting current time entry")
def get_current_time_entry(services: ClickUpServices) -> dict:
    """Gets the timer currently running for the authenticated user, if any."""
    entry = services.time_tracking.get_current_time_entry()
    if not entry:
        return {"running": False, "time_entry": None}
    return {"running": True, "time_entry": _entry_summary(entry)}


@time_tracking_tools.tool("start_time_tracking", action="starting time tracking")
def start_time_tracking(
    services: ClickUpServices,
    task_id: str,
    description: Optional[str] = None,
    billable: bool = False,
) -> dict:
    """Starts a timer on a task."""
    require(task_id=task_id)
    entry = services.time_tracking.start_time_entry(task_id, description=description, billable=billable)
    return {
        "message": f"Time tracking started on task {task_id}",
        "time_entry": _entry_summary(entry),
    }


@time_tracking_tools.tool("stop_time_tracking", action="stopping time tracking")
def stop_time_tracking(services: ClickUpServices) -> dict:
    """Stops the running timer."""
    entry = services.time_tracking.stop_time_entry()
    return {"message": "Time tracking stopped", "time_entry": _entry_summary(entry)}


@time_tracking_tools.tool("add_time_entry", action="adding time entry")
def add_time_entry(
    services: ClickUpServices,
    task_id: str,
    start: int,
    duration: int,
    description: Optional[str] = None,
    billable: bool = False,
) -> dict:
    """Records a completed block of time on a task.

    Args:
        task_id: Task the time was spent on
        start: Start time as Unix timestamp in milliseconds
        duration: Duration in milliseconds
    """
    require(task_id=task_id, start=start, duration=duration)
    entry = services.time_tracking.create_time_entry({
        "tid": task_id,
        "start": start,
        "duration": duration,
        "description": description,
        "billable": billable,
    })
    return {
        "message": f"Time entry added to task {task_id}",
        "time_entry": _entry_summary(entry),
    }


@time_tracking_tools.tool("delete_time_entry", action="deleting time entry")
def delete_time_entry(services: ClickUpServices, timer_id: str) -> dict:
    """Deletes a time entry."""
    require(timer_id=timer_id)
    services.time_tracking.delete_time_entry(timer_id)
    return {"message": f"Time entry {timer_id} deleted successfully"}
