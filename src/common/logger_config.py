# src/common/logger_config.py
"""Logging setup for applications that embed the vending fleet model."""

import logging

from rich.logging import RichHandler

from src.common.config.settings import settings

# HTTP libraries used by the wallet client, only shown at DEBUG
HTTP_LOGGERS = ("requests", "urllib3")


def setup_logging(level: str | None = None) -> None:
    """
    Routes application logs through a single rich console handler.

    ``level`` overrides ``settings.LOG_LEVEL``; unknown names fall back to
    INFO. Handlers installed by others (test capture, file handlers) are
    kept, so calling this twice never doubles the console output.
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    log_level = logging.getLevelName(level_name)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    rich_handler = RichHandler(
        show_time=True,
        show_level=True,
        show_path=log_level <= logging.DEBUG,
        markup=False,  # slot ids and bundle names may contain square brackets
        tracebacks_word_wrap=True,
        tracebacks_suppress=[logging],
    )
    root_logger.handlers = [
        handler for handler in root_logger.handlers if not isinstance(handler, RichHandler)
    ] + [rich_handler]

    http_level = logging.DEBUG if log_level <= logging.DEBUG else logging.WARNING
    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(http_level)
