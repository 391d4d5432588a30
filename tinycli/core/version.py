from __future__ import annotations

from importlib import metadata
from typing import Optional

from loguru import logger as log

DISTRIBUTION = "tinycli"


def get_version(distribution: str = DISTRIBUTION) -> Optional[str]:
    """Return the installed version of ``distribution``, or None if unknown."""
    try:
        return metadata.version(distribution)
    except metadata.PackageNotFoundError:
        log.error(f"An error occurred loading CLI version: distribution '{distribution}' is not installed")
        return None
