"""
日志配置
Logging for the temps package.

Only the "temps" logger is configured, the root logger is left to the
application. Environment:

    TEMPS_LOG_LEVEL   DEBUG, INFO, WARNING (default), ERROR or CRITICAL
    TEMPS_LOG_FILE    also write records to this file
    TEMPS_LOG_FORMAT  "default" or "simple"
"""

import logging
import os
import sys
from typing import Optional

PACKAGE_LOGGER = "temps"

FORMATS = {
    "default": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "simple": "%(levelname)s - %(name)s - %(message)s",
}

_configured = False


def _level(name: Optional[str]) -> int:
    """Level number for a level name; unknown names map to WARNING."""
    level = logging.getLevelName((name or "WARNING").upper())
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    format_string: str = FORMATS["default"],
    console_output: bool = True,
):
    """
    Configure the package logger, once per process

    Args:
        level: level name, TEMPS_LOG_LEVEL when None
        log_file: optional log file
        format_string: logging format string
        console_output: log to stderr
    """
    global _configured

    if _configured:
        return

    if level is None:
        level = os.environ.get("TEMPS_LOG_LEVEL")
    log_level = _level(level)

    handlers = []
    if console_output:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)
    package_logger.handlers.clear()
    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(logging.Formatter(format_string))
        package_logger.addHandler(handler)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Logger for `name`, configuring the package from the environment on first use."""
    if not _configured:
        auto_setup()
    return logging.getLogger(name)


def set_module_log_level(module_name: str, level: str):
    logging.getLogger(module_name).setLevel(_level(level))


def disable_module_logging(module_name: str):
    logging.getLogger(module_name).setLevel(logging.CRITICAL + 1)


def auto_setup():
    """根据环境变量配置日志"""
    format_name = os.environ.get("TEMPS_LOG_FORMAT", "default")
    setup_logging(
        level=os.environ.get("TEMPS_LOG_LEVEL"),
        log_file=os.environ.get("TEMPS_LOG_FILE"),
        format_string=FORMATS.get(format_name, FORMATS["default"]),
    )
