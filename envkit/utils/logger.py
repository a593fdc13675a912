"""
Logging Utilities
=================

Logging setup for applications that use envkit at startup.

envkit modules only log through ``logging.getLogger(__name__)``; call
:func:`setup_logging` from an entry point to see their diagnostics.
"""

import logging
import logging.handlers
import os
import sys
from typing import Optional

from ..config.options import EnvkitOptions

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5


def setup_logging(
    options: Optional[EnvkitOptions] = None,
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Set up root logging with a console handler and an optional rotating file.

    Args:
        options: envkit options; ``logging.level`` and ``logging.file`` are used
            when the matching argument is not given
        log_level: Logging level name, INFO by default
        log_file: Log file path

    Returns:
        The 'envkit' logger
    """
    logging_options = options.logging if options is not None else {}
    log_level = log_level or logging_options.get('level') or "INFO"
    log_file = log_file or logging_options.get('file')

    numeric_level = getattr(logging, str(log_level).upper(), logging.INFO)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Replace handlers from any earlier call
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=MAX_LOG_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding='utf-8'
        )
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    app_logger = logging.getLogger('envkit')
    app_logger.debug(f"Logging initialized - Level: {log_level}, File: {log_file}")

    return app_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the 'envkit' hierarchy."""
    if name != 'envkit' and not name.startswith('envkit.'):
        name = f"envkit.{name}"
    return logging.getLogger(name)
