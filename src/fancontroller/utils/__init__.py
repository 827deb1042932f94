"""
Utilities submodule for the Fan Controller.

Provides helper functions, configuration management and dial rendering.
"""

from .config import ConfigManager, ConfigError
from .helpers import setup_logging, get_app_data_path

__all__ = ["ConfigManager", "ConfigError", "setup_logging", "get_app_data_path"]
