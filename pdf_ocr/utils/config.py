"""Configuration management for the PDF OCR pipeline.

Loads and validates YAML application settings with sensible defaults,
and exposes environment-backed credentials loaded from a ``.env`` file.
"""

import logging
import os
from pathlib import Path

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

from pdf_ocr.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

API_KEY_ENV = "MISTRAL_API_KEY"


class OCRConfig(BaseModel):
    """Configuration for the Mistral OCR backend."""

    model: str = "mistral-ocr-latest"
    api_base: str = "https://api.mistral.ai/v1"
    timeout_s: float = 120.0
    signed_url_expiry_hours: int = 24


class OutputConfig(BaseModel):
    """Configuration for where and how results are written."""

    output_dir: str | None = None
    combined_output_file: str = "result.json"
    single_file_mode: bool = False


class ApiConfig(BaseModel):
    """Bind address of the HTTP API server."""

    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)


class AppConfig(BaseModel):
    """Top-level application configuration."""

    ocr: OCRConfig = Field(default_factory=OCRConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
    log_level: str = "INFO"


def load_config(path: Path | None = None) -> AppConfig:
    """Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.
            Defaults to configs/config.yaml.

    Returns:
        Validated application configuration.
    """
    if path is None:
        path = Path("configs/config.yaml")

    if path.exists():
        logger.info("Loading configuration from %s", path)
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
        return AppConfig(**raw)

    logger.info("No config file found at %s, using defaults", path)
    return AppConfig()


class EnvConfig:
    """Environment-backed settings such as API credentials.

    Values from a ``.env`` file in the working directory are loaded into
    the process environment on construction without overriding variables
    that are already set.

    Args:
        load_env_file: Whether to read a ``.env`` file first.
    """

    def __init__(self, load_env_file: bool = True) -> None:
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True))
        self._env = os.environ

    def get(self, key: str) -> str | None:
        return self._env.get(key)

    def get_required(self, key: str) -> str:
        """Return a configuration value that must be present and non-empty.

        Raises:
            ConfigurationError: If the key is unset or empty.
        """
        value = self._env.get(key)
        if not value:
            raise ConfigurationError(f"Required configuration '{key}' is not set")
        return value

    def has(self, key: str) -> bool:
        """Return True if ``key`` is set to a non-empty value."""
        return bool(self._env.get(key))
