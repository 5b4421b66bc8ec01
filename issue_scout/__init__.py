"""Aggregate labelled GitHub issues across many repositories into Markdown reports."""

__version__ = "0.1.0"
