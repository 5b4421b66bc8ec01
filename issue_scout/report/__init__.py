"""Markdown report rendering."""

from .markdown import MarkdownFile, generate_markdown

__all__ = ["MarkdownFile", "generate_markdown"]
