"""MCP tools editing the session's current document."""

from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP

from monod.documents import PreviewRenderer, Template, iter_task_items
from monod.notifications import Notifier
from monod.store import Store, intents
from monod.store.actions import Synchronize
from monod.sync.gateway import DocumentGateway
from monod.tools.schemas import DocumentResponse, TaskItemResponse


def register_editor_tools(
    mcp: FastMCP,
    store: Store,
    gateway: DocumentGateway,
    notifier: Notifier,
) -> None:
    """Register document editing tools with the MCP server."""

    renderer = PreviewRenderer()

    def _current(dispatched: int = 0) -> dict[str, Any]:
        return DocumentResponse.from_state(store.state, dispatched).model_dump(mode="json")

    @mcp.tool()
    def get_document() -> dict[str, Any]:
        """Return the current document, its sync status and force-update flag."""
        return _current()

    @mcp.tool()
    def new_document() -> dict[str, Any]:
        """Discard the current document and start from a blank one."""
        return _current(len(store.dispatch(*intents.load_default())))

    @mcp.tool()
    def load_document(uuid: str, secret: str) -> dict[str, Any]:
        """Load a remote document by uuid, decrypting it with its secret.

        Falls back to a blank document (and records an error notification)
        when the document is missing, cannot be decrypted, or the server is
        unreachable.

        Args:
            uuid: Identifier of the remote document.
            secret: Secret the document was encrypted with.
        """
        return _current(len(store.dispatch(*intents.load(gateway, uuid, secret))))

    @mcp.tool()
    def update_content(content: str) -> dict[str, Any]:
        """Replace the Markdown content of the current document.

        Args:
            content: The full new Markdown source.
        """
        actions = intents.update_content(store.state, content)
        return _current(len(store.dispatch(*actions)))

    @mcp.tool()
    def update_template(template: str) -> dict[str, Any]:
        """Change the template of the current document.

        Args:
            template: One of "", "letter", "report", "invoice".
        """
        if template not in {t.value for t in Template}:
            return {"success": False, "message": f"Unknown template: {template!r}"}
        actions = intents.update_template(store.state, template)
        return _current(len(store.dispatch(*actions)))

    @mcp.tool()
    def toggle_task_list_item(index: int) -> dict[str, Any]:
        """Check or uncheck a task-list item of the current document.

        Args:
            index: Zero-based index of the task item, in document order.
        """
        actions = intents.toggle_task_list_item(store.state, index)
        return _current(len(store.dispatch(*actions)))

    @mcp.tool()
    def synchronize() -> dict[str, Any]:
        """Push local edits to, or pull remote edits from, the remote copy."""
        return _current(len(store.dispatch(Synchronize())))

    @mcp.tool()
    def list_task_items() -> list[dict[str, Any]]:
        """List the task-list items of the current document."""
        return [
            TaskItemResponse.model_validate(item.model_dump()).model_dump()
            for item in iter_task_items(store.state.current.content)
        ]

    @mcp.tool()
    def render_preview() -> str:
        """Render the current document to HTML."""
        return renderer.render(store.state.current.content)

    @mcp.tool()
    def get_notifications(clear: bool = False) -> list[dict[str, Any]]:
        """Return the notifications raised during this session.

        Args:
            clear: If True, forget the returned notifications.
        """
        messages = [n.model_dump(mode="json") for n in notifier.messages]
        if clear:
            notifier.clear()
        return messages
