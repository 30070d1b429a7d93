"""Configuration loading and validation."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Tuple, Type

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from streamline.core.functional.selection import first_non_null
from streamline.retry.policy import RetryPolicy

CONFIG_ENV_VAR = "STREAMLINE_CONFIG"


class ConfigError(ValueError):
    """Config file is missing, unreadable or does not match the schema."""


class SentimentConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    base_url: str = Field(default="https://api.alternative.me/fng/", min_length=1)
    timeout_sec: float = Field(default=10.0, gt=0)
    default_limit: int = Field(default=1, ge=0)
    user_agent: str = Field(default="streamline/0.1", min_length=1)


class RetrySettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    max_retries: int = Field(default=3, ge=0)
    delay_sec: float = Field(default=1.0, ge=0)
    backoff: float = Field(default=2.0, ge=1)
    max_delay_sec: Optional[float] = Field(default=30.0, ge=0)

    def to_policy(
        self, retry_on: Tuple[Type[BaseException], ...] = (ConnectionError,)
    ) -> RetryPolicy:
        return RetryPolicy(
            max_retries=self.max_retries,
            retry_on=retry_on,
            delay_sec=self.delay_sec,
            backoff=self.backoff,
            max_delay_sec=self.max_delay_sec,
        )


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: str = Field(default="INFO", pattern=r"^(TRACE|DEBUG|INFO|SUCCESS|WARNING|ERROR|CRITICAL)$")
    log_dir: Optional[str] = None


class AppConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    sentiment: SentimentConfig = Field(default_factory=SentimentConfig)
    retry: RetrySettings = Field(default_factory=RetrySettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def resolve_config_path(path: str | Path | None = None) -> Optional[Path]:
    """Explicit path first, then $STREAMLINE_CONFIG, else None."""
    resolved = first_non_null(
        lambda: path,
        lambda: os.environ.get(CONFIG_ENV_VAR) or None,
    )
    return Path(resolved) if resolved is not None else None


def load_config(path: str | Path | None = None) -> AppConfig:
    config_path = resolve_config_path(path)
    if config_path is None:
        return AppConfig()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read config {config_path}: {e}") from e
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Config root must be a mapping, got {type(raw).__name__}")

    try:
        return AppConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {config_path}: {e}") from e
