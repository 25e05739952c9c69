"""Tests for configuration loading."""

import json

import pytest
from pydantic import ValidationError

from clickup_mcp.config import (
    ConfigError,
    LEGACY_WORKSPACE_KEY,
    load_settings,
    load_workspaces,
    parse_overrides,
    parse_workspaces_blob,
)

MULTI = {
    "default": "work",
    "workspaces": {
        "work": {"token": "pk_work", "teamId": "9001", "description": "Company"},
        "personal": {"token": "pk_personal", "teamId": "9002"},
    },
}

WORKSPACES_YAML = """\
default: work
workspaces:
  work:
    token: pk_work
    teamId: "9001"
"""


@pytest.fixture(autouse=True)
def no_user_workspaces_file(tmp_path, monkeypatch):
    """Keep a real ~/.config/clickup-mcp/workspaces.yaml out of these tests."""
    monkeypatch.setattr("clickup_mcp.config.USER_WORKSPACES_FILE", tmp_path / "absent" / "workspaces.yaml")


class TestParseWorkspacesBlob:
    """Tests for the multi-workspace blob."""

    def test_json_string(self):
        config = parse_workspaces_blob(json.dumps(MULTI))
        assert config.default == "work"
        assert config.keys() == ["work", "personal"]
        assert config.get("work").token == "pk_work"
        assert config.get("work").team_id == "9001"
        assert config.get("work").description == "Company"
        assert config.legacy is False

    def test_native_mapping(self):
        config = parse_workspaces_blob(MULTI)
        assert config.get("personal").team_id == "9002"
        assert config.get("personal").description is None

    def test_numeric_team_id_is_coerced(self):
        blob = {"default": "a", "workspaces": {"a": {"token": "t", "teamId": 123}}}
        assert parse_workspaces_blob(blob).get("a").team_id == "123"

    def test_invalid_json(self):
        with pytest.raises(ConfigError, match="invalid JSON"):
            parse_workspaces_blob("{not json")

    def test_not_an_object(self):
        with pytest.raises(ConfigError):
            parse_workspaces_blob("[1, 2]")

    def test_missing_default(self):
        with pytest.raises(ConfigError, match="default"):
            parse_workspaces_blob({"workspaces": MULTI["workspaces"]})

    def test_missing_workspaces(self):
        with pytest.raises(ConfigError, match="workspaces"):
            parse_workspaces_blob({"default": "work"})

    def test_workspace_missing_token(self):
        blob = {"default": "a", "workspaces": {"a": {"teamId": "1"}}}
        with pytest.raises(ConfigError, match="token"):
            parse_workspaces_blob(blob)

    def test_workspace_missing_team_id(self):
        blob = {"default": "a", "workspaces": {"a": {"token": "t"}}}
        with pytest.raises(ConfigError, match="teamId"):
            parse_workspaces_blob(blob)

    def test_default_not_in_workspaces(self):
        blob = {"default": "missing", "workspaces": {"a": {"token": "t", "teamId": "1"}}}
        with pytest.raises(ConfigError, match='Default workspace "missing" not found'):
            parse_workspaces_blob(blob)

    def test_credentials_are_immutable(self):
        config = parse_workspaces_blob(MULTI)
        with pytest.raises(ValidationError):
            config.get("work").token = "changed"


class TestLoadWorkspaces:
    """Tests for legacy vs multi-workspace selection."""

    def test_legacy_mode(self):
        config = load_workspaces(api_key="pk_legacy", team_id="42")
        assert config.legacy is True
        assert config.default == LEGACY_WORKSPACE_KEY
        assert config.keys() == ["default"]
        assert config.get("default").token == "pk_legacy"
        assert config.get("default").description == "Default workspace"

    def test_legacy_missing_both(self):
        with pytest.raises(ConfigError) as exc:
            load_workspaces()
        assert "CLICKUP_API_KEY" in str(exc.value)
        assert "CLICKUP_TEAM_ID" in str(exc.value)

    def test_legacy_missing_team_id_only(self):
        with pytest.raises(ConfigError) as exc:
            load_workspaces(api_key="pk")
        message = str(exc.value)
        assert "Missing required environment variables: CLICKUP_TEAM_ID." in message

    def test_multi_wins_over_legacy(self):
        config = load_workspaces(MULTI, api_key="pk_legacy", team_id="42")
        assert config.legacy is False
        assert "default" not in config.keys()
        assert all(c.token != "pk_legacy" for c in config.workspaces.values())

    def test_empty_blob_is_not_legacy(self):
        with pytest.raises(ConfigError):
            load_workspaces({}, api_key="pk_legacy", team_id="42")

    def test_invalid_multi_does_not_fall_back_to_legacy(self):
        with pytest.raises(ConfigError):
            load_workspaces("{broken", api_key="pk_legacy", team_id="42")


class TestLoadSettings:
    """Tests for load_settings."""

    def test_legacy_environment(self):
        settings = load_settings({"CLICKUP_API_KEY": "pk", "CLICKUP_TEAM_ID": "1"})
        assert settings.workspaces.legacy is True
        assert settings.enabled_tools == frozenset()
        assert settings.disabled_tools == frozenset()
        assert settings.document_support is False
        assert settings.log_level == "ERROR"
        assert settings.transport == "stdio"
        assert settings.port == 3000

    def test_multi_environment(self):
        settings = load_settings({"CLICKUP_WORKSPACES": json.dumps(MULTI)})
        assert settings.workspaces.default == "work"

    def test_missing_credentials(self):
        with pytest.raises(ConfigError):
            load_settings({})

    def test_tool_lists(self):
        settings = load_settings({
            "CLICKUP_API_KEY": "pk",
            "CLICKUP_TEAM_ID": "1",
            "ENABLED_TOOLS": "get_goals, get_goal ,,",
            "DISABLED_COMMANDS": "delete_goal",
        })
        assert settings.enabled_tools == frozenset({"get_goals", "get_goal"})
        assert settings.disabled_tools == frozenset({"delete_goal"})

    def test_document_support_aliases(self):
        for key in ("DOCUMENT_SUPPORT", "DOCUMENT_MODULE", "DOCUMENT_MODEL"):
            settings = load_settings({"CLICKUP_API_KEY": "pk", "CLICKUP_TEAM_ID": "1", key: "true"})
            assert settings.document_support is True, key

    def test_log_level_mapping(self):
        base = {"CLICKUP_API_KEY": "pk", "CLICKUP_TEAM_ID": "1"}
        assert load_settings({**base, "LOG_LEVEL": "trace"}).log_level == "DEBUG"
        assert load_settings({**base, "LOG_LEVEL": "WARN"}).log_level == "WARNING"
        assert load_settings({**base, "LOG_LEVEL": "bogus"}).log_level == "ERROR"

    def test_sse_transport(self):
        settings = load_settings({
            "CLICKUP_API_KEY": "pk",
            "CLICKUP_TEAM_ID": "1",
            "ENABLE_SSE": "true",
            "SSE_PORT": "4000",
        })
        assert settings.transport == "sse"
        assert settings.port == 4000

    def test_overrides_win_over_environment(self):
        settings = load_settings(
            {"CLICKUP_API_KEY": "pk_env", "CLICKUP_TEAM_ID": "1"},
            overrides={"CLICKUP_API_KEY": "pk_cli"},
        )
        assert settings.workspaces.get("default").token == "pk_cli"

    def test_workspaces_file_yaml(self, tmp_path):
        path = tmp_path / "workspaces.yaml"
        path.write_text(WORKSPACES_YAML)
        settings = load_settings({}, workspaces_file=path)
        assert settings.workspaces.keys() == ["work"]

    def test_environment_blob_wins_over_file(self, tmp_path):
        path = tmp_path / "workspaces.json"
        path.write_text(json.dumps({"default": "a", "workspaces": {"a": {"token": "t", "teamId": "1"}}}))
        settings = load_settings({"CLICKUP_WORKSPACES": json.dumps(MULTI)}, workspaces_file=path)
        assert settings.workspaces.default == "work"

    @pytest.mark.parametrize("content", ["", "{}\n"])
    def test_empty_workspaces_file_does_not_fall_back_to_legacy(self, tmp_path, content):
        path = tmp_path / "workspaces.yaml"
        path.write_text(content)
        with pytest.raises(ConfigError, match="workspaces.yaml"):
            load_settings({"CLICKUP_API_KEY": "pk", "CLICKUP_TEAM_ID": "1"}, workspaces_file=path)

    def test_workspaces_file_from_environment(self, tmp_path):
        path = tmp_path / "team.yaml"
        path.write_text(WORKSPACES_YAML)
        settings = load_settings({"CLICKUP_WORKSPACES_FILE": str(path)})
        assert settings.workspaces.keys() == ["work"]

    def test_user_workspaces_file(self, tmp_path, monkeypatch):
        path = tmp_path / "workspaces.yaml"
        path.write_text(WORKSPACES_YAML)
        monkeypatch.setattr("clickup_mcp.config.USER_WORKSPACES_FILE", path)

        settings = load_settings({})

        assert settings.workspaces.legacy is False
        assert settings.workspaces.get("work").token == "pk_work"

    def test_missing_workspaces_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Cannot read"):
            load_settings({}, workspaces_file=tmp_path / "nope.yaml")


class TestParseOverrides:
    """Tests for --env KEY=VALUE parsing."""

    def test_pairs(self):
        assert parse_overrides(["A=1", "B=x=y"]) == {"A": "1", "B": "x=y"}

    def test_none(self):
        assert parse_overrides(None) == {}

    def test_invalid(self):
        with pytest.raises(ConfigError):
            parse_overrides(["NOVALUE"])
