"""Server configuration with multi-workspace credential support.

## Workspace credentials

Two mutually exclusive modes are supported.

### Multi-workspace mode

``CLICKUP_WORKSPACES`` holds a JSON document (or, when loaded from a
workspaces file, a YAML/JSON mapping):

```json
{
  "default": "work",
  "workspaces": {
    "work": {"token": "pk_xxx", "teamId": "9001", "description": "Company"},
    "personal": {"token": "pk_yyy", "teamId": "9002"}
  }
}
```

### Legacy single-workspace mode

``CLICKUP_API_KEY`` and ``CLICKUP_TEAM_ID`` describe one workspace, exposed
under the key ``"default"``.

When both are present the multi-workspace configuration wins and the legacy
variables are ignored. They are never merged.

### Resolution Order

1. ``--env KEY=VALUE`` overrides from the command line
2. Process environment (``.env`` is loaded first but never overrides)
3. Workspaces file (multi-workspace blob only): ``workspaces_file``, then
   ``CLICKUP_WORKSPACES_FILE``, then the user config directory
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from dotenv import load_dotenv
from platformdirs import user_config_dir
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .tool_filter import parse_tool_list

APP_NAME = "clickup-mcp"
USER_CONFIG_DIR = Path(user_config_dir(APP_NAME))
USER_WORKSPACES_FILE = USER_CONFIG_DIR / "workspaces.yaml"

LEGACY_WORKSPACE_KEY = "default"

LOG_LEVELS = {
    "TRACE": "DEBUG",
    "DEBUG": "DEBUG",
    "INFO": "INFO",
    "WARN": "WARNING",
    "WARNING": "WARNING",
    "ERROR": "ERROR",
}

TRANSPORTS = ("stdio", "sse", "streamable-http")


class ConfigError(ValueError):
    """Raised when startup configuration is malformed or incomplete."""


class TenantCredential(BaseModel):
    """Credentials for one ClickUp workspace."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, coerce_numbers_to_str=True)

    token: str = Field(min_length=1)
    team_id: str = Field(alias="teamId", min_length=1)
    description: Optional[str] = None


class WorkspacesConfig(BaseModel):
    """All configured workspaces plus the one used when a call names none."""

    model_config = ConfigDict(frozen=True)

    default: str = Field(min_length=1)
    workspaces: dict[str, TenantCredential]
    legacy: bool = False

    @model_validator(mode="after")
    def _default_must_exist(self) -> "WorkspacesConfig":
        if self.default not in self.workspaces:
            raise ValueError(
                f'Default workspace "{self.default}" not found in workspaces configuration'
            )
        return self

    def keys(self) -> list[str]:
        return list(self.workspaces)

    def get(self, key: str) -> Optional[TenantCredential]:
        return self.workspaces.get(key)


@dataclass(frozen=True)
class ServerSettings:
    """Everything the server needs at startup, resolved once."""

    workspaces: WorkspacesConfig
    enabled_tools: frozenset[str] = field(default_factory=frozenset)
    disabled_tools: frozenset[str] = field(default_factory=frozenset)
    document_support: bool = False
    log_level: str = "ERROR"
    transport: str = "stdio"
    host: str = "127.0.0.1"
    port: int = 3000


def _format_validation_error(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err["loc"])
        msg = err["msg"].removeprefix("Value error, ")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)


def parse_workspaces_blob(blob: Any) -> WorkspacesConfig:
    """Validate a multi-workspace blob (mapping or JSON string).

    Raises:
        ConfigError: If the blob is not valid JSON, misses ``default`` or
            ``workspaces``, has a workspace without ``token``/``teamId``, or
            names a default workspace that is not configured.
    """
    if isinstance(blob, str):
        try:
            blob = json.loads(blob)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Failed to parse CLICKUP_WORKSPACES: invalid JSON ({e})") from e

    if not isinstance(blob, Mapping):
        raise ConfigError(
            'Failed to parse CLICKUP_WORKSPACES: must be an object with "default" and "workspaces" properties'
        )

    try:
        return WorkspacesConfig.model_validate(dict(blob))
    except ValidationError as e:
        raise ConfigError(
            f"Failed to parse CLICKUP_WORKSPACES: {_format_validation_error(e)}"
        ) from e


def load_workspaces(
    blob: Any = None,
    api_key: Optional[str] = None,
    team_id: Optional[str] = None,
) -> WorkspacesConfig:
    """Build the workspace configuration from either mode.

    A multi-workspace blob always takes precedence; the legacy credential is
    only consulted when no blob is given.
    """
    if blob is not None:
        return parse_workspaces_blob(blob)

    missing = [
        name
        for name, value in (("CLICKUP_API_KEY", api_key), ("CLICKUP_TEAM_ID", team_id))
        if not value
    ]
    if missing:
        raise ConfigError(
            f"Missing required environment variables: {', '.join(missing)}. "
            "Either provide CLICKUP_API_KEY and CLICKUP_TEAM_ID, "
            "or CLICKUP_WORKSPACES for multi-workspace support."
        )

    credential = TenantCredential(token=api_key, team_id=team_id, description="Default workspace")
    return WorkspacesConfig(
        default=LEGACY_WORKSPACE_KEY,
        workspaces={LEGACY_WORKSPACE_KEY: credential},
        legacy=True,
    )


def load_workspaces_file(path: Path) -> Any:
    """Load a YAML or JSON workspaces file."""
    try:
        with open(path) as f:
            return yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read workspaces file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid workspaces file {path}: {e}") from e


def default_workspaces_file() -> Optional[Path]:
    """Return the user-level workspaces file if it exists."""
    if USER_WORKSPACES_FILE.exists():
        return USER_WORKSPACES_FILE
    return None


def parse_overrides(pairs: Optional[list[str]]) -> dict[str, str]:
    """Turn ``KEY=VALUE`` strings into a dict."""
    overrides: dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise ConfigError(f"Invalid --env value {pair!r}: expected KEY=VALUE")
        overrides[key.strip()] = value
    return overrides


def _parse_bool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() == "true"


def _parse_int(value: Optional[str], default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _parse_log_level(value: Optional[str]) -> str:
    if not value:
        return "ERROR"
    return LOG_LEVELS.get(value.strip().upper(), "ERROR")


def load_settings(
    environ: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, str]] = None,
    workspaces_file: Optional[Path] = None,
) -> ServerSettings:
    """Resolve server settings.

    Args:
        environ: Environment to read (defaults to ``os.environ`` after
            loading ``.env``).
        overrides: Values that win over the environment, e.g. from ``--env``.
        workspaces_file: YAML/JSON file holding the multi-workspace blob.
            Used only if neither overrides nor the environment define
            ``CLICKUP_WORKSPACES``. Falls back to ``CLICKUP_WORKSPACES_FILE``
            and then to the user-level workspaces file.

    Raises:
        ConfigError: If the workspace credentials are invalid or missing.
    """
    if environ is None:
        load_dotenv(override=False)
        environ = os.environ
    overrides = overrides or {}

    def get(*keys: str) -> Optional[str]:
        for source in (overrides, environ):
            for key in keys:
                value = source.get(key)
                if value:
                    return value
        return None

    file_path = workspaces_file or get("CLICKUP_WORKSPACES_FILE") or default_workspaces_file()
    blob: Any = get("CLICKUP_WORKSPACES")
    if blob is None and file_path:
        # A named file must hold a valid blob, even if legacy variables are set
        try:
            workspaces = parse_workspaces_blob(load_workspaces_file(Path(file_path)))
        except ConfigError as e:
            raise ConfigError(f"Workspaces file {file_path}: {e}") from e
    else:
        workspaces = load_workspaces(
            blob,
            api_key=get("CLICKUP_API_KEY"),
            team_id=get("CLICKUP_TEAM_ID"),
        )

    transport = "sse" if _parse_bool(get("ENABLE_SSE"), False) else "stdio"

    return ServerSettings(
        workspaces=workspaces,
        enabled_tools=parse_tool_list(get("ENABLED_TOOLS")),
        disabled_tools=parse_tool_list(get("DISABLED_TOOLS", "DISABLED_COMMANDS")),
        document_support=_parse_bool(
            get("DOCUMENT_SUPPORT", "DOCUMENT_MODULE", "DOCUMENT_MODEL"), False
        ),
        log_level=_parse_log_level(get("LOG_LEVEL")),
        transport=transport,
        host=get("HOST") or "127.0.0.1",
        port=_parse_int(get("SSE_PORT"), 3000),
    )
