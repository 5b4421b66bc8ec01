"""Report persistence."""

from .manager import ReportWriteError, ReportWriter

__all__ = ["ReportWriteError", "ReportWriter"]
