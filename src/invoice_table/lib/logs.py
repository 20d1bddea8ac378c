"""
Module loggers for the invoice table.

Every module calls logger(__file__) once at import time. Loggers are named
under the invoice_table namespace, so LOG_LEVEL=DEBUG shows the session's
command trace and the engine's skipped values without touching Reflex's
own loggers.
"""

import logging
import os
from pathlib import Path

_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_NAMESPACE = "invoice_table"


def _logger_name(name: str) -> str:
    # "…/query/session.py" -> "invoice_table.session"
    if "/" in name or "\\" in name:
        return f"{_NAMESPACE}.{Path(name).stem}"
    return name


def logger(name: str) -> logging.Logger:
    """
    Return the invoice table logger for a module.

    Args:
        name: A logger name, or the calling module's __file__.

    Returns:
        A logger with one stream handler at the LOG_LEVEL level.
    """
    log = logging.getLogger(_logger_name(name))
    if not log.handlers:
        log.setLevel(getattr(logging, _LOG_LEVEL, logging.INFO))
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        log.addHandler(handler)
    return log
