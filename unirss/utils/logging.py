"""Logging configuration for unirss."""

import logging
from datetime import datetime
from pathlib import Path

from unirss.utils.files import get_logs_path, init_unirss


def setup_local_logging(level: str = 'INFO') -> Path:
    """Set up local file-based logging.

    Creates a log file in .unirss/logs/ and configures the root logger
    to write to it. Console output is left to the CLI.

    Args:
        level: Logging level (e.g., 'DEBUG', 'INFO'). Defaults to 'INFO'.

    Returns:
        Path: The path to the created log file.

    """
    init_unirss()
    logs_dir = get_logs_path()

    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    log_file = logs_dir / f'run_{timestamp}.log'

    if level.upper() == 'ALL':
        numeric_level = logging.NOTSET
    else:
        numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(numeric_level)
    file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    file_handler.setFormatter(file_formatter)
    root_logger.addHandler(file_handler)

    return log_file
