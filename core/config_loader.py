"""Configuration loader: YAML file plus environment overrides."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

from core.config_models import AppConfig, LoggingConfig, parse_bool

LOG_LEVEL_ENV = "SIMPLE_EVENTS_LOG_LEVEL"
TRACE_ENV = "SIMPLE_EVENTS_TRACE"


def _apply_env_overrides(config: AppConfig) -> AppConfig:
    level = os.getenv(LOG_LEVEL_ENV)
    if level:
        config.logging = LoggingConfig(level=level, format=config.logging.format)
    trace = os.getenv(TRACE_ENV)
    if trace is not None:
        config.dispatcher.trace = parse_bool(trace)
    return config


def load_config(
    config_path: Optional[Path] = None,
    env_path: Optional[Path] = None,
) -> AppConfig:
    """Load configuration from YAML and environment variables.

    A missing config file yields the defaults; values from the environment
    (optionally seeded from ``env_path``) win over the file.
    """

    base_path = Path(__file__).resolve().parents[1]
    if config_path is None:
        config_path = base_path / "config.yaml"
    if env_path is None:
        default_env = base_path / ".env"
        if default_env.exists():
            env_path = default_env

    if env_path is not None:
        load_dotenv(dotenv_path=env_path, override=False)

    data: object = {}
    if Path(config_path).exists():
        with open(config_path, "r", encoding="utf-8") as fp:
            data = yaml.safe_load(fp) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{config_path}: top level must be a mapping")

    return _apply_env_overrides(AppConfig.from_dict(data))


def configure_logging(config: Optional[AppConfig] = None) -> None:
    config = config or AppConfig()
    logging.basicConfig(
        level=config.logging.numeric_level,
        format=config.logging.format,
    )
