"""ClickUp Docs (API v3)."""

from typing import Optional

from .base import ClickUpService

DOCS_API_VERSION = "v3"


class DocumentService(ClickUpService):

    def _path(self, suffix: str = "") -> str:
        return f"/workspaces/{self.team_id}/docs{suffix}"

    def list_documents(self, cursor: Optional[str] = None, archived: bool = False) -> dict:
        self._log_operation("list_documents", cursor=cursor)
        return self.client.get(
            self._path(),
            params={"cursor": cursor, "archived": archived},
            api_version=DOCS_API_VERSION,
        )

    def get_document(self, doc_id: str) -> dict:
        self._log_operation("get_document", doc_id=doc_id)
        return self.client.get(self._path(f"/{doc_id}"), api_version=DOCS_API_VERSION)

    def create_document(self, data: dict) -> dict:
        self._log_operation("create_document", name=data.get("name"))
        return self.client.post(self._path(), data, api_version=DOCS_API_VERSION)

    def list_pages(self, doc_id: str, max_page_depth: int = -1) -> list[dict]:
        self._log_operation("list_pages", doc_id=doc_id)
        result = self.client.get(
            self._path(f"/{doc_id}/pages"),
            params={"max_page_depth": max_page_depth},
            api_version=DOCS_API_VERSION,
        )
        if isinstance(result, list):
            return result
        return result.get("pages", [])
