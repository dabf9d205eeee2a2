"""Logging configuration utilities."""

import logging

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "INFO",
    format_string: str | None = None,
    quiet_loggers: list[str] | None = None,
) -> None:
    """Configure logging for the watermeter service.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        format_string: Custom format string for log messages.
        quiet_loggers: Extra logger names to set to WARNING level.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=format_string or DEFAULT_FORMAT,
    )

    # Access logs and SQL echo are too chatty at INFO
    default_quiet = ["uvicorn.access", "sqlalchemy.engine", "multipart"]
    for logger_name in (quiet_loggers or []) + default_quiet:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
