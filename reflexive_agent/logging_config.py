"""Logging setup for the demo scripts."""

import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(log_level: Optional[str] = None) -> None:
    """Send log records to stdout so they interleave with the demo's prints."""
    if log_level is None:
        log_level = os.getenv("LOG_LEVEL", "INFO")

    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # client libraries are chatty at INFO
    for name in ("httpx", "openai", "langchain", "langgraph"):
        logging.getLogger(name).setLevel(logging.WARNING)
