"""
Settings for the catalog and the import pump.

Settings are resolved in layers: built-in defaults, then an optional YAML
file, then environment variables (optionally seeded from a ``.env`` file).

Expected YAML format:
```yaml
catalog:
  backend: json          # memory, csv or json
  path: data/books.json
  max_retries: 3
  backoff:
    kind: exponential    # exponential or linear
    base_delay: 0.05
    max_delay: 2.0
  log_level: INFO
  log_format: json
```
"""

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from bookshelf.core.errors import ConfigurationError

ENV_PREFIX = "BOOKSHELF_"


class BackoffSettings(BaseModel):
    """Backoff policy parameters (delays in seconds)."""

    kind: Literal["exponential", "linear"] = "exponential"
    base_delay: float = Field(default=0.05, ge=0)
    max_delay: float = Field(default=2.0, ge=0)


class CatalogSettings(BaseModel):
    """
    Resolved catalog configuration.

    Attributes:
        backend: Storage backend ("memory", "csv" or "json")
        path: Storage file for file-backed backends
        max_retries: Sink write retries per item during imports
        backoff: Delay policy between retries
        log_level: Logger level name
        log_format: "json" or "text"
    """

    backend: Literal["memory", "csv", "json"] = "json"
    path: str | None = "data/books.json"
    max_retries: int = Field(default=3, ge=0)
    backoff: BackoffSettings = Field(default_factory=BackoffSettings)
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"


class SettingsLoader:
    """
    Loads catalog settings from a YAML configuration file.
    """

    def __init__(self, config_path: str | Path):
        """
        Args:
            config_path: Path to the YAML configuration file

        Raises:
            FileNotFoundError: If the file does not exist
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

    def load_section(self) -> dict[str, Any]:
        """
        Read the raw ``catalog`` section.

        Raises:
            ConfigurationError: If YAML is invalid or the section is missing
        """
        with open(self.config_path, encoding="utf-8") as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {self.config_path}: {e}") from e

        if not isinstance(config, dict) or "catalog" not in config:
            raise ConfigurationError("Configuration file must contain a 'catalog' section")

        section = config["catalog"] or {}
        if not isinstance(section, dict):
            raise ConfigurationError("'catalog' section must be a mapping")

        return section

    def load(self) -> CatalogSettings:
        return _build_settings(self.load_section())


def _env_overrides() -> dict[str, Any]:
    overrides: dict[str, Any] = {}

    if backend := os.getenv(f"{ENV_PREFIX}BACKEND"):
        overrides["backend"] = backend.lower()
    if path := os.getenv(f"{ENV_PREFIX}PATH"):
        overrides["path"] = path
    if max_retries := os.getenv(f"{ENV_PREFIX}MAX_RETRIES"):
        overrides["max_retries"] = max_retries
    if backoff := os.getenv(f"{ENV_PREFIX}BACKOFF"):
        overrides["backoff"] = {"kind": backoff.lower()}
    if log_level := os.getenv("LOG_LEVEL"):
        overrides["log_level"] = log_level
    if log_format := os.getenv("LOG_FORMAT"):
        overrides["log_format"] = log_format.lower()

    return overrides


def _build_settings(values: dict[str, Any]) -> CatalogSettings:
    try:
        return CatalogSettings.model_validate(values)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid catalog settings: {e}") from e


def load_settings(
    config_path: str | Path | None = None,
    env_file: str | Path | None = None,
) -> CatalogSettings:
    """
    Resolve settings from defaults, YAML and the environment.

    Args:
        config_path: Optional YAML file with a ``catalog`` section
        env_file: Optional ``.env`` file loaded before reading the environment
            (existing variables are not overridden)

    Returns:
        Validated settings

    Raises:
        FileNotFoundError: If config_path is given but missing
        ConfigurationError: If any layer holds invalid values
    """
    values: dict[str, Any] = {}
    if config_path is not None:
        values.update(SettingsLoader(config_path).load_section())

    if env_file is not None:
        load_dotenv(env_file, override=False)

    overrides = _env_overrides()
    if "backoff" in overrides:
        backoff = dict(values.get("backoff") or {})
        backoff.update(overrides.pop("backoff"))
        values["backoff"] = backoff
    values.update(overrides)

    return _build_settings(values)
