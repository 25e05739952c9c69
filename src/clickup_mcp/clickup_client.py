"""ClickUp REST API client."""

import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Optional

logger = logging.getLogger(__name__)

CLICKUP_API_URL = "https://api.clickup.com/api"
DEFAULT_TIMEOUT = 30


class ClickUpAPIError(Exception):
    """Raised when the ClickUp API rejects a request or cannot be reached."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


def _clean_params(params: Optional[dict]) -> list[tuple[str, str]]:
    """Drop None values and expand lists into repeated ``key[]`` pairs."""
    pairs: list[tuple[str, str]] = []
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((f"{key}[]", str(v)) for v in value)
        elif isinstance(value, bool):
            pairs.append((key, "true" if value else "false"))
        else:
            pairs.append((key, str(value)))
    return pairs


def _error_message(body: str) -> str:
    try:
        data = json.loads(body)
    except ValueError:
        return body or "no response body"
    if isinstance(data, dict):
        return data.get("err") or data.get("error") or data.get("message") or body
    return body


class ClickUpClient:
    """Client for one ClickUp workspace (team).

    Construction is free of network I/O; requests are made on demand.
    """

    def __init__(self, token: str, team_id: str, timeout: float = DEFAULT_TIMEOUT):
        self.token = token
        self.team_id = team_id
        self.timeout = timeout

    def __repr__(self) -> str:
        return f"ClickUpClient(team_id={self.team_id!r})"

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[dict] = None,
        body: Optional[dict] = None,
        api_version: str = "v2",
    ) -> Any:
        """Make an authenticated request and return the decoded JSON body."""
        url = f"{CLICKUP_API_URL}/{api_version}{path}"
        query = _clean_params(params)
        if query:
            url = f"{url}?{urllib.parse.urlencode(query)}"

        data = None
        if body is not None:
            payload = {k: v for k, v in body.items() if v is not None}
            data = json.dumps(payload).encode("utf-8")

        req = urllib.request.Request(
            url,
            data=data,
            method=method,
            headers={
                "Authorization": self.token,
                "Content-Type": "application/json",
            },
        )

        logger.debug("%s %s (team %s)", method, path, self.team_id)
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as response:
                raw = response.read().decode("utf-8")
        except urllib.error.HTTPError as e:
            error_body = e.read().decode("utf-8", errors="replace")
            raise ClickUpAPIError(
                f"ClickUp API error ({e.code}): {_error_message(error_body)}",
                status=e.code,
            ) from e
        except urllib.error.URLError as e:
            raise ClickUpAPIError(f"ClickUp API unreachable: {e.reason}") from e

        if not raw:
            return {}
        return json.loads(raw)

    def get(self, path: str, params: Optional[dict] = None, api_version: str = "v2") -> Any:
        return self._request("GET", path, params=params, api_version=api_version)

    def post(
        self,
        path: str,
        body: Optional[dict] = None,
        params: Optional[dict] = None,
        api_version: str = "v2",
    ) -> Any:
        return self._request("POST", path, params=params, body=body or {}, api_version=api_version)

    def put(self, path: str, body: Optional[dict] = None, api_version: str = "v2") -> Any:
        return self._request("PUT", path, body=body or {}, api_version=api_version)

    def delete(self, path: str, params: Optional[dict] = None, api_version: str = "v2") -> Any:
        return self._request("DELETE", path, params=params, api_version=api_version)
