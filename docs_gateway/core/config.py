"""Service-wide configuration.

Settings are read once from the environment at process start and are
immutable afterwards. The resulting value is handed to `create_app` and
injected into handlers; nothing reads it from module globals.
"""

import logging
import os
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError

# Defaults point at the public directory of the sibling frontend checkout
DEFAULT_DOCS_PATH = "../react-testing/public"
DEFAULT_CONFIG_PATH = "../react-testing/public/gitdocai.config.json"
DEFAULT_ALLOW_ORIGIN = "http://localhost:5173"

# Name of the document index served by GET /api/docs/list
INDEX_FILENAME = "index.json"


class Settings(BaseSettings):
    # flat = easy env overrides (PORT, DOCS_PATH, CONFIG_PATH, ALLOW_ORIGIN)
    port: int = Field(8080, ge=1, le=65535)
    docs_path: str = DEFAULT_DOCS_PATH
    config_path: str = DEFAULT_CONFIG_PATH
    allow_origin: str = DEFAULT_ALLOW_ORIGIN

    host: str = "0.0.0.0"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        frozen=True,
        env_ignore_empty=True,  # PORT="" behaves like an unset variable
        extra="ignore",
    )

    @field_validator("docs_path", "config_path", mode="before")
    @classmethod
    def _absolute(cls, value):
        if isinstance(value, (str, os.PathLike)):
            return os.path.abspath(os.fspath(value))
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"unknown log level {value!r}")
        return value

    @property
    def docs_root(self) -> Path:
        return Path(self.docs_path)

    @property
    def config_file(self) -> Path:
        return Path(self.config_path)


def load_settings(**overrides) -> Settings:
    """
    Build the settings value and verify the documents root exists.

    Keyword overrides that are None are ignored so environment values and
    defaults still apply.

    Raises:
        ConfigurationError: if a value cannot be parsed or the documents
            root is missing
    """
    filtered = {k: v for k, v in overrides.items() if v is not None}
    try:
        settings = Settings(**filtered)
    except ValidationError as e:
        raise ConfigurationError(f"invalid configuration: {e}") from e

    if not settings.docs_root.exists():
        raise ConfigurationError(f"docs path does not exist: {settings.docs_path}")
    return settings
