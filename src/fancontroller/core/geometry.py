"""
Geometry helpers for placing the indicator and labels around the dial.
"""

import math

from PyQt6.QtCore import QPointF

from fancontroller import constants
from fancontroller.core.fan_speed import FanSpeed


def position_for(speed: FanSpeed, center: QPointF, radius: float) -> QPointF:
    """
    Returns the point on the circle of `radius` around `center` for `speed`'s slot.

    Slot 0 sits at START_ANGLE and each following slot is ANGLE_STEP further on.
    Screen coordinates have y pointing down, so the slots run clockwise.
    """
    angle = constants.dial.START_ANGLE + speed.ordinal * constants.dial.ANGLE_STEP
    return QPointF(center.x() + radius * math.cos(angle),
                   center.y() + radius * math.sin(angle))


def radius_for_size(width: float, height: float) -> float:
    """Dial radius for a widget of the given size. Zero size gives a zero radius."""
    return min(width, height) / 2.0 * constants.dial.RADIUS_SCALE


def label_radius(radius: float) -> float:
    return radius + constants.dial.RADIUS_OFFSET_LABEL


def indicator_radius(radius: float) -> float:
    return radius + constants.dial.RADIUS_OFFSET_INDICATOR
