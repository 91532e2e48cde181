"""
Structured logging helpers for tag building.

Log records about environment tags carry context such as the shadowed keys,
the exclusion set or a whole TagSet. These helpers summarize such values
into short strings before attaching them as record attributes, so a large
tag set never floods the log line.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from collections.abc import Mapping, Sequence, Set
from typing import Any


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Summarize a value for a log record attribute.

    Mappings (TagSet, environment tags) become "<type>(N keys)", sets and
    sequences (exclusions, key lists) become "<type>(N items)".

    Args:
        value: Value to summarize
        max_length: Maximum length before truncating

    Returns:
        str: Short string representation

    Examples:
        >>> safe_log_value(TagSet({"service": "orders", "host": "h1"}))
        'TagSet(2 keys)'
        >>> safe_log_value(frozenset({"region"}))
        'frozenset(1 items)'
    """
    try:
        if value is None:
            return "None"
        if isinstance(value, str):
            val_str = value
        elif isinstance(value, Mapping):
            val_str = f"{type(value).__name__}({len(value)} keys)"
        elif isinstance(value, (Set, Sequence)):
            val_str = f"{type(value).__name__}({len(value)} items)"
        else:
            val_str = str(value)

        if len(val_str) > max_length:
            return val_str[:max_length] + f"... (truncated, {len(val_str)} total)"
        return val_str
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context,
) -> None:
    """
    Log a message with summarized context attributes.

    Context keys must not clash with LogRecord attributes ("name", "msg",
    "module", ...).

    Args:
        logger: Logger instance
        level: Log level (logging.DEBUG, etc.)
        message: Log message
        **context: Record attributes, e.g. shadowed_keys="host", excluded=frozenset(...)
    """
    safe_context = {
        key: safe_log_value(val) for key, val in context.items()
    }
    logger.log(level, message, extra=safe_context)
