"""Tests for the HTML preview renderer."""

import re

import pytest

from monod.documents import PreviewRenderer, iter_task_items


@pytest.fixture
def renderer():
    return PreviewRenderer()


def _task_indices(html):
    return [int(i) for i in re.findall(r'data-task-index="(\d+)"', html)]


class TestPreviewRenderer:
    def test_plain_markdown(self, renderer):
        html = renderer.render("# Title\n\nSome *text*.")

        assert "<h1>Title</h1>" in html
        assert "<em>text</em>" in html
        assert "checkbox" not in html

    def test_task_items_become_checkboxes(self, renderer):
        html = renderer.render("- [ ] a\n- [x] b\n")

        assert 'data-task-index="0" disabled> a</li>' in html
        assert 'data-task-index="1" checked disabled> b</li>' in html
        assert '<li class="task-list-item">' in html
        assert "[ ]" not in html

    def test_indices_match_toggle_indices(self, renderer, nested_tasks):
        html = renderer.render(nested_tasks)

        expected = [item.index for item in iter_task_items(nested_tasks)]
        assert _task_indices(html) == expected
        assert html.count(" checked disabled>") == 2

    def test_bare_brackets_stay_text(self, renderer):
        html = renderer.render("[ ] foo\n")

        assert "checkbox" not in html
        assert "[ ] foo" in html

    def test_other_bullets_stay_text(self, renderer):
        html = renderer.render("* [ ] starred\n")

        assert "checkbox" not in html
        assert "[ ] starred" in html

    def test_task_line_in_code_block_keeps_its_index(self, renderer):
        content = "```\n- [ ] code\n```\n\n- [ ] real\n"

        html = renderer.render(content)

        assert _task_indices(html) == [1]
        assert "- [ ] code" in html

    def test_inline_formatting_after_checkbox(self, renderer):
        html = renderer.render("- [ ] **bold** task\n")

        assert 'data-task-index="0" disabled> <strong>bold</strong> task</li>' in html

    def test_table_is_enabled(self, renderer):
        html = renderer.render("| a | b |\n|---|---|\n| 1 | 2 |\n")

        assert "<table>" in html
