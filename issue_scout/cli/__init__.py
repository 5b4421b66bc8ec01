"""Command line interface for issue-scout."""
