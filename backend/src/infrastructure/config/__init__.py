"""Settings and logging for the listings service."""

from .logger import get_logger, setup_logger
from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "get_logger", "setup_logger"]
