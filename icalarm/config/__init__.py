"""Configuration for icalarm."""

from icalarm.config.loader import get_config_path, load_config
from icalarm.config.schema import Config, LoggingConfig, RenderConfig

__all__ = ["Config", "LoggingConfig", "RenderConfig", "get_config_path", "load_config"]
