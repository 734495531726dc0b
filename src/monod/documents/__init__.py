"""Markdown documents: immutable snapshots, task lists and previews."""

from monod.documents.document import (
    DEFAULT_CONTENT,
    Document,
    Template,
    compute_content_hash,
)
from monod.documents.preview import PreviewRenderer
from monod.documents.tasklist import (
    TaskItem,
    count_task_items,
    iter_task_items,
    toggle_task_list_item,
)

__all__ = [
    "DEFAULT_CONTENT",
    "Document",
    "PreviewRenderer",
    "TaskItem",
    "Template",
    "compute_content_hash",
    "count_task_items",
    "iter_task_items",
    "toggle_task_list_item",
]
