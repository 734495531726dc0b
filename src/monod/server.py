"""MCP server exposing a monod editing session.

This is the main entry point. It creates a FastMCP server, builds the
documents store with its collaborators (sync, local persistence,
notifications), restores the last locally persisted document and
registers all tools.

Run with:
    uv run monod
"""

from __future__ import annotations

import logging
import sys

from mcp.server.fastmcp import FastMCP

from monod.config import settings
from monod.documents import Document
from monod.notifications import Notifier
from monod.store import Store, intents
from monod.sync import InMemoryGateway, LocalDocumentStore, LocalPersister, Synchronizer
from monod.tools.editor_tools import register_editor_tools

logger = logging.getLogger(__name__)

mcp = FastMCP(
    "monod",
    instructions=(
        "Monod MCP server for editing a Markdown document kept in sync "
        "with a remote copy. Use these tools to read and edit the "
        "current document, toggle its task-list items and preview it."
    ),
)


def build_store(
    gateway: InMemoryGateway,
    local_store: LocalDocumentStore,
    notifier: Notifier,
) -> Store:
    """Create the session store and restore the last persisted document."""
    store = Store(
        collaborators=[
            Synchronizer(gateway),
            LocalPersister(local_store),
            notifier,
        ]
    )

    persisted = local_store.load()
    if persisted is not None:
        logger.info("Restoring document from %s", local_store.state_file)
        store.dispatch(*intents.load_success(persisted.document, persisted.secret))
    else:
        store.dispatch(*intents.load_default())
        if settings.default_template:
            document = Document(template=settings.default_template)
            store.dispatch(*intents.update_current_document(document))
    return store


def _initialize() -> None:
    """Initialize all components and register tools."""
    settings.validate()

    gateway = InMemoryGateway()
    notifier = Notifier()
    store = build_store(gateway, LocalDocumentStore(settings.state_file), notifier)

    register_editor_tools(mcp, store, gateway, notifier)


def main() -> None:
    """Entry point for the MCP server."""
    # stdout carries the MCP stdio transport.
    logging.basicConfig(stream=sys.stderr, level=settings.log_level)
    _initialize()
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
