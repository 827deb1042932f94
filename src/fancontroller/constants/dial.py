"""
Constants for dial geometry and rendering.

Angles are in radians. The four speed slots start at 9*pi/8 (202.5 degrees)
and step clockwise on screen by pi/4, leaving the top-right of the dial open.
"""
import math
from typing import Final

class DialConstants:
    """Defines the geometry and text metrics of the fan dial."""
    START_ANGLE: Final[float] = math.pi * (9 / 8.0)
    ANGLE_STEP: Final[float] = math.pi / 4

    # Fraction of the half-size used for the dial radius.
    RADIUS_SCALE: Final[float] = 0.8

    # Labels sit outside the dial edge, the indicator inside it.
    RADIUS_OFFSET_LABEL: Final[int] = 30
    RADIUS_OFFSET_INDICATOR: Final[int] = -35

    # Indicator radius is the dial radius divided by this.
    INDICATOR_RADIUS_DIVISOR: Final[int] = 12

    LABEL_TEXT_SIZE: Final[int] = 55

    DEFAULT_WINDOW_WIDTH: Final[int] = 480
    DEFAULT_WINDOW_HEIGHT: Final[int] = 480
    MIN_WINDOW_SIZE: Final[int] = 100
    MAX_WINDOW_SIZE: Final[int] = 4000

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not (0.0 < self.RADIUS_SCALE <= 1.0):
            raise ValueError("RADIUS_SCALE must be in (0, 1]")
        if self.ANGLE_STEP * 4 > 2 * math.pi:
            raise ValueError("ANGLE_STEP too large to fit four speed slots on the dial")
        if self.INDICATOR_RADIUS_DIVISOR <= 0:
            raise ValueError("INDICATOR_RADIUS_DIVISOR must be positive")
        if self.LABEL_TEXT_SIZE < 1:
            raise ValueError("LABEL_TEXT_SIZE must be positive")
        if self.MAX_WINDOW_SIZE < self.MIN_WINDOW_SIZE:
            raise ValueError("MAX_WINDOW_SIZE must be >= MIN_WINDOW_SIZE")
        if not (self.MIN_WINDOW_SIZE <= self.DEFAULT_WINDOW_WIDTH <= self.MAX_WINDOW_SIZE):
            raise ValueError("DEFAULT_WINDOW_WIDTH out of range")
        if not (self.MIN_WINDOW_SIZE <= self.DEFAULT_WINDOW_HEIGHT <= self.MAX_WINDOW_SIZE):
            raise ValueError("DEFAULT_WINDOW_HEIGHT out of range")

# Singleton instance for easy access
dial = DialConstants()
