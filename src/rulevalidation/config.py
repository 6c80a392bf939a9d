"""Configuration management for rulevalidation using Pydantic models."""

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .result import MISSING_VALUE_MESSAGE
from .rule_set import MissingValueResultFactory, missing_value_messages

CONFIG_FILE_NAME = ".rulevalidation.json"


class OutputFormat(str, Enum):
    """Report output formats."""
    TABLE = "table"
    JSON = "json"
    MARKDOWN = "markdown"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class MessagesConfig(BaseModel):
    """Missing-value message configuration section."""
    missing_value: str = Field(alias="missingValue", default=MISSING_VALUE_MESSAGE)
    per_key: dict[str, str] = Field(alias="perKey", default_factory=dict)

    @field_validator("missing_value")
    @classmethod
    def validate_missing_value(cls, v):
        if not v.strip():
            raise ValueError("missing_value message must not be blank")
        return v

    model_config = ConfigDict(populate_by_name=True)


class OutputConfig(BaseModel):
    """Output configuration section."""
    format: OutputFormat = OutputFormat.TABLE

    model_config = ConfigDict(use_enum_values=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN

    model_config = ConfigDict(use_enum_values=True)


class RuleValidationConfig(BaseModel):
    """Complete rulevalidation configuration model."""
    messages: MessagesConfig = Field(default_factory=MessagesConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")

    def missing_value_result_factory(self) -> MissingValueResultFactory:
        """Missing-value factory built from the ``messages`` section."""
        return missing_value_messages(self.messages.per_key, self.messages.missing_value)


def load_config(config_path: str | Path | None = None) -> RuleValidationConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .rulevalidation.json

    Returns:
        RuleValidationConfig: Loaded and validated configuration

    Raises:
        ValueError: If the configuration file is invalid
    """
    if config_path is None:
        config_path = find_config_file()
    else:
        config_path = Path(config_path)

    if config_path is None or not config_path.exists():
        return RuleValidationConfig()

    try:
        with open(config_path, encoding="utf-8") as f:
            config_data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {config_path}: {e}") from e

    if not isinstance(config_data, dict):
        raise ValueError(f"Config file {config_path} must contain a JSON object")

    try:
        return RuleValidationConfig(**config_data)
    except ValidationError as e:
        raise ValueError(f"Failed to load config from {config_path}: {e}") from e


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .rulevalidation.json by searching up the directory tree.

    Args:
        start_dir: Directory to start search from (default: current directory)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = Path(start_dir).resolve()

    while True:
        config_file = current / CONFIG_FILE_NAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:  # Reached root directory
            break
        current = parent

    return None
