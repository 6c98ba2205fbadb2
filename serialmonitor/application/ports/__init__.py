"""Application layer ports - interfaces for presentation layer."""

from .config_port import MonitorConfigPort

__all__ = [
    "MonitorConfigPort",
]
