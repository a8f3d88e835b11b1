"""
Logging setup for the data room.

Importing the package never touches the root logger; applications call
`setup_logging` once, modules log through `get_logger(__name__)`.
"""
import logging
import sys
from pathlib import Path
from typing import Optional
import os

DEFAULT_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "false").lower() == "true"

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'

# Third-party loggers that only matter when something breaks
QUIET_LOGGERS = ("pypdf",)


def _handler(handler: logging.Handler, level: int, datefmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=datefmt))
    return handler


def setup_logging(
    log_level: str = DEFAULT_LOG_LEVEL,
    log_file: Optional[str] = None,
    enable_file_logging: bool = LOG_TO_FILE
) -> None:
    """
    Route data room logs to stdout and, optionally, a log file.

    Args:
        log_level: Console level name; unknown names fall back to INFO
        log_file: Log file path (defaults to LOG_DIR/dataroom.log)
        enable_file_logging: Also write DEBUG and above to the log file
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(_handler(logging.StreamHandler(sys.stdout), level, '%H:%M:%S'))

    if enable_file_logging:
        log_path = Path(log_file) if log_file else LOG_DIR / "dataroom.log"
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        root_logger.addHandler(_handler(file_handler, logging.DEBUG, '%Y-%m-%d %H:%M:%S'))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.ERROR)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger (typically `get_logger(__name__)`)."""
    return logging.getLogger(name)
