"""Dataclass models for dispatcher and logging settings."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

_TRUTHY = {"1", "true", "yes", "on"}


def parse_bool(value: object) -> bool:
    """Interpret a YAML or environment flag; strings must read 1, true, yes or on."""

    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


@dataclass
class LoggingConfig:
    """Root logging level and record format."""

    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT

    def __post_init__(self) -> None:
        self.level = str(self.level).upper()
        if self.level not in _LEVELS:
            raise ValueError(f"unknown log level: {self.level}")

    @property
    def numeric_level(self) -> int:
        return logging.getLevelName(self.level)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, object]]) -> "LoggingConfig":
        if not data:
            return cls()
        return cls(**data)


@dataclass
class DispatcherConfig:
    """Dispatcher behaviour switches."""

    trace: bool = False  # log every publish at DEBUG

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, object]]) -> "DispatcherConfig":
        if not data:
            return cls()
        return cls(trace=parse_bool(data.get("trace", False)))


@dataclass
class AppConfig:
    """Top level configuration model."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    dispatcher: DispatcherConfig = field(default_factory=DispatcherConfig)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, object]]) -> "AppConfig":
        if not data:
            return cls()
        return cls(
            logging=LoggingConfig.from_dict(data.get("logging")),
            dispatcher=DispatcherConfig.from_dict(data.get("dispatcher")),
        )
