"""
Core submodule for the Fan Controller.

Contains the speed selection state and the dial geometry. The DialController
lives in `fancontroller.core.dial_controller` and is imported from there.
"""

from fancontroller.core.fan_speed import FanSpeed, FanSpeedState
from fancontroller.core.geometry import position_for, radius_for_size

__all__ = [
    "FanSpeed",
    "FanSpeedState",
    "position_for",
    "radius_for_size",
]
