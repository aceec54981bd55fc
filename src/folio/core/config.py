"""Configuration management for Folio."""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from folio.core.errors import ConfigurationError

CONFIG_ENV_VAR = 'FOLIO_CONFIG'
LOG_LEVEL_ENV_VAR = 'FOLIO_LOG_LEVEL'
INPUT_PATH_ENV_VAR = 'FOLIO_INPUT_PATH'

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
LOG_FORMATS = ('console', 'json')


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = Field(default="INFO")
    format: str = Field(default="console")

    @field_validator('level')
    @classmethod
    def validate_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return value

    @field_validator('format')
    @classmethod
    def validate_format(cls, value: str) -> str:
        value = value.lower()
        if value not in LOG_FORMATS:
            raise ValueError(f"Unknown log format: {value}")
        return value


class EngineConfig(BaseModel):
    """Engine configuration."""
    input_path: Optional[Path] = Field(default=None, description="Root directory read by ReadFiles")
    output_path: Optional[Path] = Field(default=None, description="Root directory for written output")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Global metadata")


class FolioConfig(BaseModel):
    """Configuration for Folio."""
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    engine: EngineConfig = Field(default_factory=EngineConfig)


def _read_yaml(config_path: Path) -> Dict[str, Any]:
    if not config_path.is_file():
        raise ConfigurationError(
            f"Config file not found: {config_path}",
            details={'path': str(config_path)}
        )
    try:
        with open(config_path, encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in {config_path}: {e}",
            details={'path': str(config_path)}
        ) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file must contain a mapping: {config_path}",
            details={'path': str(config_path)}
        )
    return data


def load_config(path: Optional[Union[str, Path]] = None) -> FolioConfig:
    """Load configuration.

    The file named by ``path`` is used first, then the one named by the
    ``FOLIO_CONFIG`` environment variable. Without either, defaults apply.
    ``FOLIO_LOG_LEVEL`` and ``FOLIO_INPUT_PATH`` override the file values.
    Variables from a ``.env`` file in the working directory are loaded first.

    Args:
        path: Optional path to a YAML config file

    Returns:
        Validated configuration

    Raises:
        ConfigurationError: If the file is missing or invalid
    """
    load_dotenv(find_dotenv(usecwd=True))

    config_path = path or os.getenv(CONFIG_ENV_VAR)
    data = _read_yaml(Path(config_path)) if config_path else {}

    log_level = os.getenv(LOG_LEVEL_ENV_VAR)
    if log_level:
        data.setdefault('logging', {})['level'] = log_level

    input_path = os.getenv(INPUT_PATH_ENV_VAR)
    if input_path:
        data.setdefault('engine', {})['input_path'] = input_path

    try:
        return FolioConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration: {e}",
            details={'path': str(config_path) if config_path else None}
        ) from e
