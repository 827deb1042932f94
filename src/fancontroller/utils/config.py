"""
Configuration management for the Fan Controller.

This module provides a ConfigManager for loading, validating, and saving application
settings to a JSON file. It ensures data integrity through atomic writes, default value
merging, and strict validation, preventing corrupted or invalid configurations from
affecting the application.
"""

import json
import logging
import re
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .helpers import get_app_data_path
from fancontroller import constants


class ConfigError(Exception):
    """Custom exception for configuration-related errors, such as I/O or permission issues."""


class ConfigManager:
    """
    Manages loading, saving, and validation of the Fan Controller's configuration.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None) -> None:
        """
        Initializes the ConfigManager. Without a path, the file lives in the app data directory.
        """
        self.logger = logging.getLogger("FanController.Config")
        if config_path is None:
            try:
                config_path = get_app_data_path() / constants.config.defaults.CONFIG_FILENAME
            except OSError as e:
                raise ConfigError(f"Failed to resolve application directory: {e}") from e
        self.config_path = Path(config_path)
        self._last_config: Optional[Dict[str, Any]] = None


    def _validate_numeric(self, key: str, value: Any, default: Any, min_v: float, max_v: float) -> Union[int, float]:
        """Validates a numeric value is within a given range."""
        try:
            if isinstance(value, bool):
                raise TypeError("Booleans are not numeric settings")
            num_value = float(value)
            if not (min_v <= num_value <= max_v):
                raise ValueError("Value out of range")
            return int(num_value) if isinstance(default, int) else num_value
        except (TypeError, ValueError):
            self.logger.warning(constants.config.messages.INVALID_NUMERIC.format(key=key, value=value, default=default))
            return default


    def _validate_color_hex(self, key: str, value: Any, default: str) -> str:
        """Validates a value is a valid 6-digit hex color string."""
        if isinstance(value, str) and re.fullmatch(r"#[0-9a-fA-F]{6}", value):
            return value
        self.logger.warning(constants.config.messages.INVALID_COLOR.format(key=key, value=value, default=default))
        return default


    def _validate_string(self, key: str, value: Any, default: str) -> str:
        """Validates a value is a string."""
        if isinstance(value, str):
            return value
        self.logger.warning(constants.config.messages.INVALID_STRING.format(key=key, value=value, default=default))
        return default


    def _validate_config(self, loaded_config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validates the configuration, merges it with defaults for missing keys,
        and sanitizes all values.
        """
        defaults = constants.config.defaults
        validated = defaults.DEFAULT_CONFIG.copy()
        validated.update(loaded_config)
        default_ref = defaults.DEFAULT_CONFIG

        unknown_keys = set(loaded_config.keys()) - set(default_ref.keys())
        if unknown_keys:
            self.logger.warning("Ignoring unknown config fields: %s", ", ".join(sorted(unknown_keys)))

        for key in ["off_color", "on_color", "indicator_color", "label_color"]:
            validated[key] = self._validate_color_hex(key, validated.get(key), default_ref[key])

        validated["font_family"] = self._validate_string("font_family", validated.get("font_family"), default_ref["font_family"])
        validated["label_font_size"] = self._validate_numeric("label_font_size", validated.get("label_font_size"), default_ref["label_font_size"], defaults.LABEL_FONT_SIZE_MIN, defaults.LABEL_FONT_SIZE_MAX)
        validated["font_weight"] = self._validate_numeric("font_weight", validated.get("font_weight"), default_ref["font_weight"], 1, 1000)

        for key in ["window_width", "window_height"]:
            validated[key] = self._validate_numeric(key, validated.get(key), default_ref[key], constants.dial.MIN_WINDOW_SIZE, constants.dial.MAX_WINDOW_SIZE)

        supported_languages = list(constants.i18n.LANGUAGE_MAP.keys())
        if validated.get("language") not in [None] + supported_languages:
            self.logger.warning(constants.config.messages.INVALID_LANGUAGE.format(value=validated.get("language")))
            validated["language"] = None

        final_config = {key: validated[key] for key in default_ref if key in validated}
        return final_config


    def load(self) -> Dict[str, Any]:
        """Loads and validates the configuration from the file."""
        if not self.config_path.exists():
            self.logger.info("Configuration file not found. Creating with default settings.")
            return self.reset_to_defaults()
        try:
            with self.config_path.open("r", encoding="utf-8") as f:
                config = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError):
            self.logger.error("Configuration file is corrupt. Backing it up and using defaults.")
            try:
                corrupt_path = self.config_path.with_name(f"{self.config_path.name}.corrupt")
                shutil.move(self.config_path, corrupt_path)
            except OSError:
                self.logger.exception("Failed to back up corrupt config file.")
            return self.reset_to_defaults()
        except OSError as e:
            msg = f"OS error reading config file {self.config_path}: {e}"
            self.logger.critical(msg)
            raise ConfigError(msg) from e

        if not isinstance(config, dict):
            self.logger.error("Configuration file does not hold an object. Using defaults.")
            return self.reset_to_defaults()

        validated_config = self._validate_config(config)
        self._last_config = validated_config.copy()
        return validated_config


    def save(self, config: Dict[str, Any]) -> None:
        """Atomically saves the provided configuration to the file."""
        validated_config = self._validate_config(config)

        config_to_save = { key: value for key, value in validated_config.items() if value is not None }
        last_config_to_compare = { k: v for k, v in self._last_config.items() if v is not None } if self._last_config else None

        if last_config_to_compare == config_to_save:
            self.logger.debug("Skipping save, configuration is unchanged.")
            return

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", delete=False, dir=self.config_path.parent, encoding="utf-8"
            ) as temp_f:
                json.dump(config_to_save, temp_f, indent=4)
                temp_path = temp_f.name
            shutil.move(temp_path, self.config_path)
            self._last_config = validated_config.copy()
            self.logger.debug("Configuration saved successfully to %s", self.config_path)
        except OSError as e:
            msg = f"Failed to save configuration to {self.config_path}: {e}"
            self.logger.error(msg)
            raise ConfigError(msg) from e


    def reset_to_defaults(self) -> Dict[str, Any]:
        """Resets the configuration to factory defaults and saves it."""
        self.logger.info("Resetting configuration to default values.")
        defaults = constants.config.defaults.DEFAULT_CONFIG.copy()
        self.save(defaults)
        return defaults
