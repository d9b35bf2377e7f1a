"""
Logging setup for geobuffer.

Every module logs through a child of the 'geobuffer' logger. setup_logging()
attaches a console handler for progress messages and a timestamped log file
that keeps the DEBUG detail of each buffering run.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

ROOT_LOGGER_NAME = 'geobuffer'

FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(log_dir: Optional[Path] = None,
                  console_level: int = logging.INFO) -> Path:
    """
    Attach console and file handlers to the 'geobuffer' logger.

    Handlers from an earlier call are closed and replaced, so calling this
    once per run never duplicates output.

    Args:
        log_dir: Directory for the log file, defaults to <project>/logs
        console_level: Minimum level echoed to stdout

    Returns:
        Path of the new log file
    """
    log_dir = Path(log_dir) if log_dir is not None else Path(__file__).parent.parent / 'logs'
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"geobuffer_{datetime.now():%Y%m%d_%H%M%S}.log"

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(logging.DEBUG)
    for handler in list(root.handlers):
        handler.close()
        root.removeHandler(handler)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter('%(message)s'))

    log_handler = logging.FileHandler(log_file, encoding='utf-8')
    log_handler.setLevel(logging.DEBUG)
    log_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))

    root.addHandler(console)
    root.addHandler(log_handler)
    root.debug(f"Logging to {log_file}")

    return log_file


def get_logger(name: str) -> logging.Logger:
    """Return the 'geobuffer' child logger for a module name."""
    if name == ROOT_LOGGER_NAME or name.startswith(f'{ROOT_LOGGER_NAME}.'):
        return logging.getLogger(name)
    return logging.getLogger(f'{ROOT_LOGGER_NAME}.{name}')
