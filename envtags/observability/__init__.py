"""
Observability module.

Provides logging configuration and safe structured logging helpers.
"""

from envtags.observability.log_utils import log_with_context, safe_log_value
from envtags.observability.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger", "log_with_context", "safe_log_value"]
