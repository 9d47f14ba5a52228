"""
Logging setup shared by the sandbox application and scripts.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from typing import Any, Dict, Optional

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_FILE = "logs/atomlab.log"


def setup_logging(config: Optional[Dict[str, Any]] = None) -> None:
    """
    Configure the root logger from a `logging` config mapping.

    Logs go to the console and to a rotating file (1 MB, 5 backups). The log
    directory is created when missing. A `log_file` of None disables the file.
    """
    config = config or {}
    log_level = str(config.get("level", "INFO")).upper()
    log_format = config.get("format", DEFAULT_LOG_FORMAT)
    log_file_path = config.get("log_file", DEFAULT_LOG_FILE)

    logger = logging.getLogger()
    logger.setLevel(log_level)
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file_path:
        log_dir = os.path.dirname(log_file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file_path, maxBytes=1024 * 1024, backupCount=5
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logging.debug("Logging initialized at %s (file: %s)", log_level, log_file_path)
