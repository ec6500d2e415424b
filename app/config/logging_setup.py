"""Process-wide logging configuration applied once at startup."""

import logging

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def config_configure_logging(log_level: str) -> None:
    """Configure root logging for the runtime process.

    Args:
        log_level: Level name such as `INFO` or `DEBUG`.

    Returns:
        None: Logging is configured as a side effect.

    Raises:
        ValueError: Raised when the level name is unknown to `logging`.
    """

    resolved_level = logging.getLevelName(log_level.strip().upper())
    if not isinstance(resolved_level, int):
        raise ValueError(f"unknown log level: {log_level}")
    logging.basicConfig(level=resolved_level, format=_LOG_FORMAT)
