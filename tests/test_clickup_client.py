"""Tests for the ClickUp REST client and services."""

import io
import json
import urllib.error
from unittest.mock import MagicMock, Mock, patch

import pytest

from clickup_mcp.clickup_client import ClickUpAPIError, ClickUpClient, _clean_params
from clickup_mcp.config import TenantCredential
from clickup_mcp.services import create_clickup_services
from clickup_mcp.services.tasks import TaskService
from clickup_mcp.services.workspace import WorkspaceService


def fake_response(body):
    response = MagicMock()
    response.read.return_value = body if isinstance(body, bytes) else json.dumps(body).encode()
    response.__enter__.return_value = response
    return response


class TestCleanParams:
    """Tests for query string preparation."""

    def test_drops_none(self):
        assert _clean_params({"a": None, "b": 1}) == [("b", "1")]

    def test_lists_become_array_keys(self):
        assert _clean_params({"statuses": ["open", "done"]}) == [
            ("statuses[]", "open"),
            ("statuses[]", "done"),
        ]

    def test_bools_are_lowercase(self):
        assert _clean_params({"archived": False, "include_closed": True}) == [
            ("archived", "false"),
            ("include_closed", "true"),
        ]


class TestClickUpClient:
    """Tests for ClickUpClient._request."""

    @patch("urllib.request.urlopen")
    def test_get_sends_token_and_query(self, mock_urlopen):
        mock_urlopen.return_value = fake_response({"goals": []})
        client = ClickUpClient("pk_secret", "9001")

        result = client.get("/team/9001/goal", params={"include_completed": True})

        assert result == {"goals": []}
        request = mock_urlopen.call_args.args[0]
        assert request.full_url == "https://api.clickup.com/api/v2/team/9001/goal?include_completed=true"
        assert request.get_method() == "GET"
        assert request.get_header("Authorization") == "pk_secret"

    @patch("urllib.request.urlopen")
    def test_post_drops_none_fields(self, mock_urlopen):
        mock_urlopen.return_value = fake_response({"id": "1"})
        client = ClickUpClient("pk", "9001")

        client.post("/list/5/task", {"name": "Write tests", "due_date": None})

        request = mock_urlopen.call_args.args[0]
        assert json.loads(request.data) == {"name": "Write tests"}
        assert request.get_method() == "POST"

    @patch("urllib.request.urlopen")
    def test_v3_path(self, mock_urlopen):
        mock_urlopen.return_value = fake_response({"docs": []})
        ClickUpClient("pk", "9001").get("/workspaces/9001/docs", api_version="v3")
        assert mock_urlopen.call_args.args[0].full_url == "https://api.clickup.com/api/v3/workspaces/9001/docs"

    @patch("urllib.request.urlopen")
    def test_empty_body(self, mock_urlopen):
        mock_urlopen.return_value = fake_response(b"")
        assert ClickUpClient("pk", "9001").delete("/goal/1") == {}

    @patch("urllib.request.urlopen")
    def test_http_error(self, mock_urlopen):
        mock_urlopen.side_effect = urllib.error.HTTPError(
            "https://api.clickup.com/api/v2/team", 401, "Unauthorized", {},
            io.BytesIO(b'{"err": "Token invalid", "ECODE": "OAUTH_025"}'),
        )
        with pytest.raises(ClickUpAPIError) as exc:
            ClickUpClient("pk", "9001").get("/team")
        assert exc.value.status == 401
        assert str(exc.value) == "ClickUp API error (401): Token invalid"

    @patch("urllib.request.urlopen")
    def test_unreachable(self, mock_urlopen):
        mock_urlopen.side_effect = urllib.error.URLError("no route")
        with pytest.raises(ClickUpAPIError, match="unreachable") as exc:
            ClickUpClient("pk", "9001").get("/team")
        assert exc.value.status is None

    def test_repr_hides_token(self):
        assert "pk_secret" not in repr(ClickUpClient("pk_secret", "9001"))


class TestServices:
    """Tests for the service layer on a mocked client."""

    def test_bundle_shares_one_client(self):
        services = create_clickup_services(TenantCredential(token="pk", teamId="9001"))
        assert services.team_id == "9001"
        assert services.tasks.client is services.client
        assert services.goals.client is services.client
        assert services.documents.client is services.client

    def test_separate_bundles_do_not_share_clients(self):
        a = create_clickup_services(TenantCredential(token="pk_a", teamId="1"))
        b = create_clickup_services(TenantCredential(token="pk_b", teamId="2"))
        assert a.client is not b.client
        assert a.client.token == "pk_a"
        assert b.client.token == "pk_b"

    def test_dependency_requires_direction(self):
        client = Mock()
        service = TaskService(client)

        with pytest.raises(ClickUpAPIError, match="Either depends_on or dependency_of"):
            service.add_dependency("t1")
        with pytest.raises(ClickUpAPIError):
            service.delete_dependency("t1")

        client.post.assert_not_called()
        client.delete.assert_not_called()

    def test_add_dependency_posts(self):
        client = Mock()
        client.post.return_value = {}
        TaskService(client).add_dependency("t1", depends_on="t2")
        client.post.assert_called_once_with(
            "/task/t1/dependency", {"depends_on": "t2", "dependency_of": None}
        )

    def test_hierarchy(self):
        client = Mock(team_id="9001")

        def get(path, params=None):
            return {
                "/team": {"teams": [{"id": "9001", "name": "Acme"}]},
                "/team/9001/space": {"spaces": [{"id": "s1", "name": "Engineering"}]},
                "/space/s1/folder": {"folders": [
                    {"id": "f1", "name": "Q1", "lists": [{"id": "l1", "name": "Sprint 1"}]},
                ]},
                "/space/s1/list": {"lists": [{"id": "l2", "name": "Backlog"}]},
            }[path]

        client.get.side_effect = get
        root = WorkspaceService(client).get_hierarchy()["root"]

        assert root["name"] == "Acme"
        space = root["children"][0]
        assert space["type"] == "space"
        assert [c["type"] for c in space["children"]] == ["folder", "list"]
        assert space["children"][0]["children"][0]["name"] == "Sprint 1"
