"""Opt-in logging configuration for applications embedding the client."""

import logging

from ncbi_toolkit.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging at `level`, falling back to NCBI_LOG_LEVEL."""
    resolved = (level or get_settings().log_level).upper()
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger("ncbi_toolkit").setLevel(resolved)
