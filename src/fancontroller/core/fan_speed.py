"""
Fan speed selection state.

`FanSpeed` is the closed, ordered set of speeds the dial can show. Each member's
value is the i18n key of its label. `FanSpeedState` holds the one currently
selected speed for a dial and notifies listeners when it changes.
"""

import logging
from enum import Enum
from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal

from fancontroller import constants
from fancontroller.constants.i18n import DialStrings

logger = logging.getLogger("FanController.FanSpeed")


class FanSpeed(Enum):
    """Available fan speeds, in dial order. Values are i18n label keys."""
    OFF = "FAN_OFF"
    LOW = "FAN_LOW"
    MEDIUM = "FAN_MEDIUM"
    HIGH = "FAN_HIGH"

    @property
    def ordinal(self) -> int:
        """Zero-based position of this speed in dial order."""
        return list(FanSpeed).index(self)

    @property
    def label_key(self) -> str:
        return self.value

    def next(self) -> "FanSpeed":
        """Returns the following speed, wrapping from HIGH back to OFF."""
        members = list(FanSpeed)
        return members[(self.ordinal + 1) % len(members)]


class FanSpeedState(QObject):
    """
    Holds the selected speed of a single dial.

    The selection starts at OFF and only changes through `advance()`.
    """
    speed_changed = pyqtSignal(object)

    def __init__(self, i18n: Optional[DialStrings] = None, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.logger = logging.getLogger(f"{constants.app.APP_NAME}.{self.__class__.__name__}")
        self._i18n = i18n or DialStrings()
        self._current: FanSpeed = FanSpeed.OFF

    @property
    def current(self) -> FanSpeed:
        return self._current

    def advance(self) -> FanSpeed:
        """Moves the selection to the next speed and returns it."""
        previous = self._current
        self._current = previous.next()
        self.logger.debug("Fan speed advanced: %s -> %s", previous.name, self._current.name)
        self.speed_changed.emit(self._current)
        return self._current

    def label(self, speed: Optional[FanSpeed] = None, i18n: Optional[DialStrings] = None) -> str:
        """Returns the localized label for `speed`, defaulting to the current speed."""
        return (i18n or self._i18n).label(speed or self._current)
