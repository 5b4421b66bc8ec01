"""Logging configuration for command line runs."""

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
HANDLER_NAME = "issue_scout"


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr at INFO, or DEBUG when verbose.

    Calling this again replaces the handler installed by a previous call.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == HANDLER_NAME:
            root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
