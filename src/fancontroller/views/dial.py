"""
The fan dial widget.

DialView is the Qt host for a DialController: it forwards resize, paint and
input events to the controller and applies the redraw and accessibility
updates the controller asks for.
"""

import logging
from typing import Any, Callable, Dict, Optional

from PyQt6.QtCore import QSize, Qt
from PyQt6.QtGui import QKeyEvent, QMouseEvent, QPainter, QPaintEvent, QResizeEvent
from PyQt6.QtWidgets import QWidget

from fancontroller import constants
from fancontroller.constants.i18n import DialStrings
from fancontroller.core.dial_controller import DialController
from fancontroller.core.input_handler import InputHandler


class DialView(QWidget):
    """A clickable circular dial that cycles the fan through its speeds."""

    def __init__(self, config: Optional[Dict[str, Any]] = None, i18n: Optional[DialStrings] = None,
                 parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.logger = logging.getLogger(f"{constants.app.APP_NAME}.{self.__class__.__name__}")
        self.config: Dict[str, Any] = config or constants.config.defaults.DEFAULT_CONFIG.copy()
        self.i18n = i18n or DialStrings(self.config.get("language"))

        self.controller = DialController(self.config, self.i18n, self)
        self.input_handler = InputHandler(self, self.controller)

        self.controller.redraw_requested.connect(self.update)
        self.controller.description_changed.connect(self.setAccessibleDescription)

        # The dial takes focus so it can be operated from the keyboard.
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setMinimumSize(constants.dial.MIN_WINDOW_SIZE, constants.dial.MIN_WINDOW_SIZE)
        self.setAccessibleName(self.i18n.DIAL_ACCESSIBLE_NAME)
        self.setAccessibleDescription(self.controller.accessible_description)
        self.logger.debug("DialView initialized.")

    def sizeHint(self) -> QSize:
        return QSize(int(self.config.get("window_width", constants.dial.DEFAULT_WINDOW_WIDTH)),
                     int(self.config.get("window_height", constants.dial.DEFAULT_WINDOW_HEIGHT)))

    def set_click_listener(self, listener: Optional[Callable[[], bool]]) -> None:
        self.controller.set_click_listener(listener)

    def perform_click(self) -> bool:
        """Programmatic click, the same path a mouse or keyboard click takes."""
        return self.controller.perform_click()

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        size = event.size()
        self.controller.on_size_changed(size.width(), size.height())

    def paintEvent(self, event: QPaintEvent) -> None:
        """
        Handles all painting for the widget by delegating to the controller.
        """
        painter = QPainter(self)
        try:
            self.controller.on_draw(painter)
        except Exception as e:
            self.logger.error(f"Error in paintEvent: {e}", exc_info=True)
        finally:
            if painter.isActive():
                painter.end()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        """Delegates mouse press events to the InputHandler."""
        if not self.input_handler.handle_mouse_press(event):
            super().mousePressEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        """Delegates mouse release events to the InputHandler."""
        if not self.input_handler.handle_mouse_release(event):
            super().mouseReleaseEvent(event)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        """Delegates key press events to the InputHandler."""
        if not self.input_handler.handle_key_press(event):
            super().keyPressEvent(event)
