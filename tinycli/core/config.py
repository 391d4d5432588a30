from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Generic, Literal, TypeVar

import yaml
from loguru import logger as log
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic_core import PydanticSerializationError

from tinycli.core.errors import ConfigError, ConfigValueError

DEFAULT_CONFIG_PATH = "tinycli.yaml"

M = TypeVar("M", bound=BaseModel)


class AppSettings(BaseModel):
    # Unknown keys found in the file are kept, the document is an open mapping
    model_config = ConfigDict(extra="allow")

    log_level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    color: bool = True
    default_greeting: str = "Hello"
    default_name: str = "World"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


def default_config_path() -> Path:
    return Path(os.getenv("TINYCLI_CONFIG", DEFAULT_CONFIG_PATH))


class ConfigStore(Generic[M]):
    """Key/value settings persisted as one YAML document.

    The file is typed by the pydantic model passed as ``defaults``. It is
    created with those defaults when missing, and re-read from disk on every
    access. A corrupt or unreadable file never raises: readers get a copy of
    the defaults and a warning is logged. Every ``set`` rewrites the whole
    document; writes are neither atomic nor locked.
    """

    def __init__(self, path: str | Path, defaults: M) -> None:
        self.path = Path(path).expanduser()
        self.defaults = defaults
        self._ensure_config_file_exists()

    @property
    def model(self) -> type[M]:
        return type(self.defaults)

    def _ensure_config_file_exists(self) -> None:
        if not self.path.exists():
            self._write(self.defaults)
            return
        try:
            self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            log.warning(f"Config file {self.path} corrupted or unreadable: {e}. Rewriting with default configuration.")
            self._write(self.defaults)

    def _read(self) -> M:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
            if data is None:
                data = {}
            if not isinstance(data, dict):
                raise ConfigError(f"expected a mapping at top level, got {type(data).__name__}")
            return self.model.model_validate(data)
        except (OSError, UnicodeDecodeError, yaml.YAMLError, ValidationError, ConfigError) as e:
            log.warning(f"Failed to read config file {self.path}: {e}. Using default configuration.")
            return self.defaults.model_copy(deep=True)

    def _write(self, config: M) -> bool:
        # Serialize before opening, so a bad value never truncates the file
        try:
            text = yaml.safe_dump(
                config.model_dump(mode="json"),
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )
        except (PydanticSerializationError, yaml.YAMLError) as e:
            log.error(f"Failed to serialize config for {self.path}: {e}")
            return False
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            log.error(f"Failed to write config file {self.path}: {e}")
            return False
        return True

    def _check_key(self, key: str, data: Dict[str, Any]) -> None:
        if key in data or key in self.model.model_fields:
            return
        if self.model.model_config.get("extra") == "allow":
            return
        raise KeyError(key)

    def get_all(self) -> M:
        return self._read()

    def get(self, key: str) -> Any:
        data = self._read().model_dump()
        if key not in data:
            raise KeyError(key)
        return data[key]

    def set(self, key: str, value: Any) -> bool:
        """Validate ``value`` against the model and persist the full document.

        Returns False when the file could not be written.
        """
        data = self._read().model_dump()
        self._check_key(key, data)
        data[key] = value
        try:
            updated = self.model.model_validate(data)
        except ValidationError as e:
            raise ConfigValueError(f"Invalid value for '{key}': {value!r}") from e
        return self._write(updated)

    def reset(self) -> bool:
        return self._write(self.defaults)
