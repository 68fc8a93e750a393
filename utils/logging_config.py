from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from config import get_active_params

_LOGGING_INITIALIZED = False

LOG_PREFIX = "lineraster_"


def _cleanup_old_logs(log_dir: Path, keep_count: int) -> None:
    """Remove old run logs, keeping the newest `keep_count` files."""
    log_files = sorted(
        log_dir.glob(f"{LOG_PREFIX}*.log"),
        key=lambda p: p.stat().st_mtime,
        reverse=True,
    )
    for old_log in log_files[keep_count:]:
        try:
            old_log.unlink()
        except OSError as e:
            logging.getLogger(__name__).warning("Could not delete old log %s: %s", old_log.name, e)


def init_logging(log_dir: Optional[str] = None, verbose: bool = False) -> Optional[Path]:
    """
    Initialise global logging:
    - log directory: `log_dir` or LOG_FOLDER from config
    - log file: lineraster_YYYYMMDD_HHMMSS.log at INFO
    - console: WARNING, or DEBUG when verbose

    Safe to call more than once; only the first call installs handlers.
    Returns the log file path (None when already initialised).
    """
    global _LOGGING_INITIALIZED
    if _LOGGING_INITIALIZED:
        return None

    params = get_active_params()
    directory = Path(log_dir or params["LOG_FOLDER"])
    directory.mkdir(parents=True, exist_ok=True)

    _cleanup_old_logs(directory, keep_count=max(0, params["LOG_KEEP_COUNT"] - 1))

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = directory / f"{LOG_PREFIX}{timestamp}.log"

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    file_handler = logging.FileHandler(log_file, encoding="utf-8", mode="a")
    file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    _LOGGING_INITIALIZED = True
    return log_file
