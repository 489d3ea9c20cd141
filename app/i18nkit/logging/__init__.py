"""Structured logging for i18nkit.

Public API:
    - configure_logging(): Initialize logging
    - get_module_logger(): Get a logger for the calling module
"""

from i18nkit.logging.setup import configure_logging, get_module_logger

__all__ = ["configure_logging", "get_module_logger"]
