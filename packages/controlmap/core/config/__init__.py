"""Configuration models and loaders."""

from controlmap.core.config.loader import (
    configure_logging_from_config,
    detect_format,
    load_app_config,
    load_config,
)
from controlmap.core.config.models import AppConfig, CreatorConfig, LoggingConfig, XMLOutputConfig

__all__ = [
    "AppConfig",
    "CreatorConfig",
    "LoggingConfig",
    "XMLOutputConfig",
    "configure_logging_from_config",
    "detect_format",
    "load_app_config",
    "load_config",
]
