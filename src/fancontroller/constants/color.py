"""
Defines the named color palette used by the dial.
"""
from typing import Final

class ColorConstants:
    """Defines a static palette of named colors."""
    BLACK: Final[str] = "#000000"
    GRAY: Final[str] = "#888888"
    GREEN: Final[str] = "#00FF00"

    # Dial Colors
    DIAL_OFF_COLOR: Final[str] = GRAY
    DIAL_ON_COLOR: Final[str] = GREEN
    INDICATOR_COLOR: Final[str] = BLACK
    LABEL_COLOR: Final[str] = BLACK

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        for attr_name in dir(self):
            if not attr_name.startswith('_') and attr_name.isupper():
                value = getattr(self, attr_name)
                if not (isinstance(value, str) and value.startswith("#") and len(value) == 7):
                    raise ValueError(f"Color '{attr_name}' must be a 7-character hex string.")

# Singleton instance for easy access
color = ColorConstants()
