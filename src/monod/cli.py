"""CLI entrypoint for monod.

Works directly on markdown files, without the MCP server running: list
task items, toggle one of them in place, or render an HTML preview.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from monod.documents import PreviewRenderer, iter_task_items, toggle_task_list_item


@click.group()
def cli() -> None:
    """monod CLI: work with task lists in Markdown files."""


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def tasks(path: Path) -> None:
    """List the task items of a Markdown file with their index."""
    content = path.read_text(encoding="utf-8")
    items = list(iter_task_items(content))
    if not items:
        click.echo("No task items found.")
        return

    for item in items:
        checkbox = "[x]" if item.checked else "[ ]"
        click.echo(f"{item.index:>3}  {item.indent}{checkbox} {item.text}")


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("index", type=int)
def toggle(path: Path, index: int) -> None:
    """Check or uncheck the INDEX-th task item of a Markdown file."""
    # newline="" keeps \r\n line endings byte for byte.
    with path.open(encoding="utf-8", newline="") as fh:
        content = fh.read()

    toggled = toggle_task_list_item(content, index)
    if toggled == content:
        click.echo(f"Error: no task item at index {index} in {path}", err=True)
        sys.exit(1)

    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(toggled)

    item = next(i for i in iter_task_items(toggled) if i.index == index)
    state = "checked" if item.checked else "unchecked"
    click.echo(f"OK: {state} task {index}: {item.text}")


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the HTML to this file instead of stdout.",
)
def preview(path: Path, output: Path | None) -> None:
    """Render a Markdown file to HTML, with clickable task checkboxes."""
    html = PreviewRenderer().render(path.read_text(encoding="utf-8"))
    if output is None:
        click.echo(html, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")
    click.echo(f"OK: {path} -> {output}")


if __name__ == "__main__":
    cli()
