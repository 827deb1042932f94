"""
Constants for application configuration defaults and constraints.
"""
from typing import Final, Dict, Any

from .color import color
from .dial import dial

class ConfigMessages:
    """Log message templates for configuration validation."""
    INVALID_NUMERIC: Final[str] = "Invalid {key} '{value}', resetting to default '{default}'"
    INVALID_COLOR: Final[str] = "Invalid color '{value}' for {key}, resetting to default '{default}'"
    INVALID_STRING: Final[str] = "Invalid {key} '{value}', resetting to default '{default}'"
    INVALID_LANGUAGE: Final[str] = "Unsupported language '{value}', falling back to system locale"

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        for attr_name in dir(self):
            if not attr_name.startswith('_') and attr_name.isupper():
                value = getattr(self, attr_name)
                if not isinstance(value, str) or not value:
                    raise ValueError(f"ConfigMessages.{attr_name} must be a non-empty string.")


class ConfigConstants:
    """Defines default values and constraints for all application settings."""
    # An empty family selects the platform's default typeface.
    DEFAULT_FONT_FAMILY: Final[str] = ""
    DEFAULT_LABEL_FONT_SIZE: Final[int] = dial.LABEL_TEXT_SIZE
    DEFAULT_FONT_WEIGHT: Final[int] = 700
    LABEL_FONT_SIZE_MIN: Final[int] = 6
    LABEL_FONT_SIZE_MAX: Final[int] = 200

    CONFIG_FILENAME: Final[str] = "FanController_Config.json"

    DEFAULT_CONFIG: Final[Dict[str, Any]] = {
        "language": None,
        "off_color": color.DIAL_OFF_COLOR,
        "on_color": color.DIAL_ON_COLOR,
        "indicator_color": color.INDICATOR_COLOR,
        "label_color": color.LABEL_COLOR,
        "font_family": DEFAULT_FONT_FAMILY,
        "label_font_size": DEFAULT_LABEL_FONT_SIZE,
        "font_weight": DEFAULT_FONT_WEIGHT,
        "window_width": dial.DEFAULT_WINDOW_WIDTH,
        "window_height": dial.DEFAULT_WINDOW_HEIGHT,
    }

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not (self.LABEL_FONT_SIZE_MIN <= self.DEFAULT_LABEL_FONT_SIZE <= self.LABEL_FONT_SIZE_MAX):
            raise ValueError("DEFAULT_LABEL_FONT_SIZE must be within the label font size range")
        if not (1 <= self.DEFAULT_FONT_WEIGHT <= 1000):
            raise ValueError("DEFAULT_FONT_WEIGHT must be between 1 and 1000")
        if not self.CONFIG_FILENAME:
            raise ValueError("CONFIG_FILENAME must not be empty")

        actual_keys = set(self.DEFAULT_CONFIG.keys())
        expected_keys = {
            "language", "off_color", "on_color", "indicator_color", "label_color",
            "font_family", "label_font_size", "font_weight", "window_width", "window_height",
        }
        if actual_keys != expected_keys:
            missing = expected_keys - actual_keys
            extra = actual_keys - expected_keys
            raise ValueError(f"DEFAULT_CONFIG key mismatch. Missing: {missing or 'None'}. Extra: {extra or 'None'}.")


class ConfigurationConstants:
    """Container for configuration-related constant groups."""
    def __init__(self) -> None:
        self.defaults = ConfigConstants()
        self.messages = ConfigMessages()

# Singleton instance for easy access
config = ConfigurationConstants()
