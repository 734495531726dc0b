"""Task-list checkboxes in raw markdown text.

A task item is a line which, once its leading whitespace is stripped, reads
``- [ ] text``, ``- [x] text`` or ``- [X] text``.  Items are numbered from 0
in top-to-bottom order regardless of how deeply they are nested, which is
the same order a rendered preview shows them in.

No markdown parser is involved: lines are scanned one by one, so every byte
outside the toggled marker is preserved exactly.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict

_TASK_LINE = re.compile(r"(?P<indent>\s*)- \[(?P<mark>[ xX])\] (?P<text>.*)")

_CHECKED_MARKS = frozenset("xX")


class TaskItem(BaseModel):
    """A task-list item found in a document."""

    model_config = ConfigDict(frozen=True)

    index: int
    line_number: int
    indent: str
    checked: bool
    text: str


def iter_task_items(content: str) -> Iterator[TaskItem]:
    """Yield every task item of *content* in document order.

    The ``index`` of each yielded item is the one
    :func:`toggle_task_list_item` expects.
    """
    index = 0
    for line_number, line in enumerate(content.split("\n")):
        match = _TASK_LINE.fullmatch(line)
        if match is None:
            continue
        yield TaskItem(
            index=index,
            line_number=line_number,
            indent=match.group("indent"),
            checked=match.group("mark") in _CHECKED_MARKS,
            text=match.group("text"),
        )
        index += 1


def count_task_items(content: str) -> int:
    return sum(1 for _ in iter_task_items(content))


def toggle_task_list_item(content: str, index: int) -> str:
    """Flip the checkbox of the *index*-th task item in *content*.

    Checked items (``[x]`` or ``[X]``) become ``[ ]`` and unchecked items
    become ``[x]``.  Only the first line whose running count equals *index*
    is touched; scanning stops there.

    Args:
        content: Raw markdown text.
        index: Zero-based position of the task item among all task items.

    Returns:
        The updated text, or *content* itself when there is no task item
        at *index*.
    """
    if index < 0:
        return content

    lines = content.split("\n")
    counter = 0
    for line_number, line in enumerate(lines):
        match = _TASK_LINE.fullmatch(line)
        if match is None:
            continue
        if counter == index:
            mark = " " if match.group("mark") in _CHECKED_MARKS else "x"
            start, end = match.span("mark")
            lines[line_number] = line[:start] + mark + line[end:]
            return "\n".join(lines)
        counter += 1

    return content
