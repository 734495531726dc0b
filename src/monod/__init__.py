"""Markdown document editor core: document state, reducer and task lists."""

__version__ = "0.1.0"
