from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

from loguru import logger as _logger


def setup_logging(level: str = "WARNING", log_dir: Optional[str] = None) -> None:
    # Allow env override for log level (e.g., DEBUG)
    level = str(os.getenv("TINYCLI_LOG_LEVEL", level)).upper()
    log_dir = log_dir or os.getenv("TINYCLI_LOG_DIR")

    _logger.remove()
    _logger.add(
        sink=lambda msg: print(msg, end="", file=sys.stderr),
        level=level,
        colorize=sys.stderr.isatty(),
        backtrace=False,
        diagnose=False,
        format="<level>{level: <8}</level> | {message}",
    )
    # Optional file sink, only when a log directory was asked for
    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        _logger.add(
            Path(log_dir) / "tinycli.log",
            rotation="10 MB",
            retention=10,
            level="DEBUG",
            backtrace=False,
            diagnose=False,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{line} | {message}",
        )
