"""Configuration infrastructure - loading and runtime settings."""

from .monitor_model import MonitorModel
from .yaml_loader import DEFAULT_CONFIG_PATH, YAMLConfigLoader

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "MonitorModel",
    "YAMLConfigLoader",
]
