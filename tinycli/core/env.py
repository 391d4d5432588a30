from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv


def load_local_environment() -> None:
    """Load environment variables from a `.env` file.

    The working directory's `.env` wins; otherwise ~/.tinycli/.env is used.
    Variables already set in the process environment are not overridden.
    The resolved path is exposed via TINYCLI_ENV_PATH for diagnostics.
    """
    candidates = [Path.cwd() / ".env", Path.home() / ".tinycli" / ".env"]
    for env_path in candidates:
        if env_path.is_file():
            load_dotenv(dotenv_path=env_path, override=False)
            os.environ["TINYCLI_ENV_PATH"] = str(env_path)
            return
