"""
Dial controller for the Fan Controller.

Binds the speed selection and the dial geometry to the three host callbacks a
dial needs: size changed, click and draw. It owns no Qt widget itself; the
view forwards events here and reacts to the controller's signals, so the same
controller can be driven by any QPainter-capable host.
"""

import logging
from typing import Any, Callable, Dict, Optional

from PyQt6.QtCore import QObject, QPointF, pyqtSignal
from PyQt6.QtGui import QColor, QPainter

from fancontroller import constants
from fancontroller.constants.i18n import DialStrings
from fancontroller.core.fan_speed import FanSpeed, FanSpeedState
from fancontroller.core.geometry import radius_for_size
from fancontroller.utils.dial_renderer import DialRenderer


class DialController(QObject):
    """
    Owns the state of one fan dial: the selected speed, the size and the radius.
    """
    redraw_requested = pyqtSignal()
    description_changed = pyqtSignal(str)

    def __init__(self, config: Optional[Dict[str, Any]] = None, i18n: Optional[DialStrings] = None,
                 parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.logger = logging.getLogger(f"{constants.app.APP_NAME}.{self.__class__.__name__}")
        self.i18n = i18n or DialStrings((config or {}).get("language"))
        self.speed_state = FanSpeedState(self.i18n, self)
        self.renderer = DialRenderer(config)

        # Radius stays 0.0 until the host reports a size.
        self.radius: float = 0.0
        self._width: float = 0.0
        self._height: float = 0.0
        self._click_listener: Optional[Callable[[], bool]] = None

    @property
    def current_speed(self) -> FanSpeed:
        return self.speed_state.current

    @property
    def center(self) -> QPointF:
        return QPointF(self._width / 2.0, self._height / 2.0)

    @property
    def fill_color(self) -> QColor:
        return self.renderer.fill_color_for(self.current_speed)

    @property
    def accessible_description(self) -> str:
        return self.speed_state.label()

    def labels(self) -> Dict[FanSpeed, str]:
        """Localized label text for every speed, in dial order."""
        return {speed: self.speed_state.label(speed) for speed in FanSpeed}

    def on_size_changed(self, width: float, height: float) -> None:
        """Recomputes the dial radius for the new size. A zero size gives a zero radius."""
        self._width = float(width)
        self._height = float(height)
        self.radius = radius_for_size(self._width, self._height)
        self.logger.debug("Dial resized to %sx%s, radius %.2f", width, height, self.radius)

    def set_click_listener(self, listener: Optional[Callable[[], bool]]) -> None:
        """
        Installs a host click listener. It runs before the dial's own click
        handling; returning True consumes the click and the speed is left as is.
        """
        self._click_listener = listener

    def perform_click(self) -> bool:
        """Handles a click on the dial. Always reports the click as handled."""
        if self._click_listener is not None and self._click_listener():
            self.logger.debug("Click consumed by host listener; speed unchanged.")
            return True

        speed = self.speed_state.advance()
        self.description_changed.emit(self.speed_state.label(speed))
        self.redraw_requested.emit()
        return True

    def on_draw(self, painter: Optional[QPainter]) -> None:
        """Draws the dial onto `painter`. A missing or inactive painter is ignored."""
        if painter is None or not painter.isActive():
            return
        self.renderer.draw_dial(painter, self.current_speed, self.center, self.radius, self.labels())
