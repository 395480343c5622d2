"""Configuration models and the lazily loaded global settings."""

from .config import (
    Config,
    ImportSettings,
    LazyConfig,
    MonitoringConfig,
    VisualizationSettings,
    find_config_file,
    settings,
)

__all__ = [
    "Config",
    "ImportSettings",
    "VisualizationSettings",
    "MonitoringConfig",
    "LazyConfig",
    "find_config_file",
    "settings",
]
