"""Tool specs and the decorator that collects them into groups."""

import inspect
from dataclasses import dataclass, field
from typing import Any, Callable

# Handlers taking this parameter get the caller's workspace bundle injected
SERVICES_PARAM = "services"
# Handlers taking this parameter get the workspace registry injected
REGISTRY_PARAM = "registry"


class ToolInputError(ValueError):
    """Raised by a handler when its arguments are missing or inconsistent."""


def require(**fields: Any) -> None:
    """Raise ToolInputError for the first missing argument."""
    for name, value in fields.items():
        if value is None or value == "":
            raise ToolInputError(f"{name} is required")


@dataclass(frozen=True)
class ToolSpec:
    """One tool: its public name, its handler and how failures are phrased."""

    name: str
    handler: Callable[..., Any]
    action: str
    description: str
    group: str

    @property
    def workspace_scoped(self) -> bool:
        return SERVICES_PARAM in inspect.signature(self.handler).parameters


@dataclass
class ToolGroup:
    """Collects the tools of one feature area.

    Usage:
        goals = ToolGroup("goals")

        @goals.tool("get_goal", action="getting goal")
        def get_goal(services, goal_id: str):
            ...
    """

    name: str
    specs: list[ToolSpec] = field(default_factory=list)

    def tool(self, name: str, action: str) -> Callable:
        def decorator(fn: Callable) -> Callable:
            self.specs.append(ToolSpec(
                name=name,
                handler=fn,
                action=action,
                description=inspect.cleandoc(fn.__doc__ or ""),
                group=self.name,
            ))
            return fn
        return decorator

    def names(self) -> list[str]:
        return [spec.name for spec in self.specs]
