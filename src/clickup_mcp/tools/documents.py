"""Document tools. Only registered when document support is enabled."""

from typing import Literal, Optional

from ..services import ClickUpServices
from .catalog import ToolGroup, require

document_tools = ToolGroup("documents")


@document_tools.tool("list_documents", action="listing documents")
def list_documents(
    services: ClickUpServices,
    cursor: Optional[str] = None,
    archived: bool = False,
) -> dict:
    """Lists documents in the workspace.

    Pass the returned `next_cursor` as `cursor` to fetch the next page.
    """
    result = services.documents.list_documents(cursor=cursor, archived=archived)
    docs = result.get("docs", [])
    return {
        "documents": [
            {
                "id": doc.get("id"),
                "name": doc.get("name"),
                "parent": doc.get("parent"),
                "date_created": doc.get("date_created"),
            }
            for doc in docs
        ],
        "count": len(docs),
        "next_cursor": result.get("next_cursor"),
    }


@document_tools.tool("get_document", action="getting document")
def get_document(services: ClickUpServices, doc_id: str) -> dict:
    """Gets a document's metadata."""
    require(doc_id=doc_id)
    return {"document": services.documents.get_document(doc_id)}


@document_tools.tool("create_document", action="creating document")
def create_document(
    services: ClickUpServices,
    name: str,
    parent_id: Optional[str] = None,
    parent_type: Optional[int] = None,
    visibility: Literal["PUBLIC", "PRIVATE", "PERSONAL", "HIDDEN"] = "PRIVATE",
    create_page: bool = True,
) -> dict:
    """Creates a document.

    Args:
        name: Document name
        parent_id: Space, folder, list or task to attach the document to
        parent_type: 4 space, 5 folder, 6 list, 7 everything, 12 workspace
        visibility: Who can see the document
        create_page: Create an initial empty page
    """
    require(name=name)
    data = {"name": name, "visibility": visibility, "create_page": create_page}
    if parent_id:
        require(parent_type=parent_type)
        data["parent"] = {"id": parent_id, "type": parent_type}
    doc = services.documents.create_document(data)
    return {
        "message": f'Document "{doc.get("name", name)}" created successfully',
        "document": {"id": doc.get("id"), "name": doc.get("name", name)},
    }


@document_tools.tool("list_document_pages", action="listing document pages")
def list_document_pages(services: ClickUpServices, doc_id: str, max_page_depth: int = -1) -> dict:
    """Lists the pages of a document. -1 returns pages at every depth."""
    require(doc_id=doc_id)
    pages = services.documents.list_pages(doc_id, max_page_depth=max_page_depth)
    return {"pages": pages, "count": len(pages)}
