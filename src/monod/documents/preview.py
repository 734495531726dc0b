"""Render markdown documents to HTML for previewing.

Uses ``markdown-it-py`` to tokenise the markdown source and its HTML
renderer to produce the output.  Before rendering, the token stream is
walked and list items that are task items (as recognised by
:mod:`monod.documents.tasklist`) get their ``[ ]`` / ``[x]`` prefix replaced
with a checkbox input.  Each checkbox carries a ``data-task-index``
attribute holding the index :func:`toggle_task_list_item` uses for that
item, matched through the source line the item starts on.
"""

from __future__ import annotations

import html
import re
from typing import Any

from markdown_it import MarkdownIt
from markdown_it.token import Token

from monod.documents.tasklist import TaskItem, iter_task_items

_CHECKBOX_PREFIX = re.compile(r"\[[ xX]\](?: |$)")


class PreviewRenderer:
    """Stateless converter: markdown text -> HTML preview."""

    def __init__(self) -> None:
        self._md = MarkdownIt("commonmark", {"typographer": False})
        self._md.enable("table")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render(self, markdown_text: str) -> str:
        """Parse *markdown_text* and return its HTML rendering."""
        env: dict[str, Any] = {}
        tokens = self._md.parse(markdown_text, env)
        tasks = {item.line_number: item for item in iter_task_items(markdown_text)}
        if tasks:
            self._inject_checkboxes(tokens, tasks)
        return self._md.renderer.render(tokens, self._md.options, env)

    # ------------------------------------------------------------------
    # Token rewriting
    # ------------------------------------------------------------------

    def _inject_checkboxes(
        self, tokens: list[Token], tasks: dict[int, TaskItem]
    ) -> None:
        for idx, tok in enumerate(tokens):
            if tok.type != "list_item_open" or not tok.map:
                continue
            item = tasks.get(tok.map[0])
            if item is not None and self._replace_prefix(tokens, idx, item):
                tok.attrSet("class", "task-list-item")

    @staticmethod
    def _replace_prefix(tokens: list[Token], idx: int, item: TaskItem) -> bool:
        """Swap the checkbox text of the list item opened at *idx* for an
        ``<input>`` element.  Returns ``False`` if the item does not start
        with checkbox text (e.g. the task line sits inside a code block).
        """
        # list_item_open, paragraph_open, inline
        if (
            idx + 2 >= len(tokens)
            or tokens[idx + 1].type != "paragraph_open"
            or tokens[idx + 2].type != "inline"
        ):
            return False
        inline_tok = tokens[idx + 2]
        children = inline_tok.children or []
        if not children or children[0].type != "text":
            return False

        first = children[0]
        match = _CHECKBOX_PREFIX.match(first.content)
        if match is None:
            return False

        first.content = first.content[match.end():]
        checkbox = Token("html_inline", "", 0, content=_checkbox_html(item))
        inline_tok.children = [checkbox, *children]
        return True


def _checkbox_html(item: TaskItem) -> str:
    checked = " checked" if item.checked else ""
    return (
        '<input type="checkbox" class="task-list-item-checkbox" '
        f'data-task-index="{html.escape(str(item.index))}"{checked} disabled> '
    )
