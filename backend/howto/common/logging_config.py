"""
Logging setup - console output plus optional daily rotating log files
"""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are too chatty at INFO
_NOISY_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def setup_logging(
    log_level: str = "INFO",
    log_dir: Optional[str] = None,
    log_file_prefix: str = "howto",
    backup_count: int = 14,
) -> None:
    """
    Configure the root logger.

    Args:
        log_level: Root level name (DEBUG/INFO/WARNING/...)
        log_dir: Directory for rotating log files; None disables file output
        log_file_prefix: Log file name, e.g. howto.log, howto.log.2026-02-01
        backup_count: Number of rotated files to keep
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    root = logging.getLogger()
    root.setLevel(level)

    # Re-running setup (tests, reload) must not stack handlers
    for handler in list(root.handlers):
        root.removeHandler(handler)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            path / f"{log_file_prefix}.log",
            when="midnight",
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
