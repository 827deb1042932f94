"""
Input Handler for the fan dial.

This module encapsulates the mouse and keyboard interaction logic, separating it
from the dial widget. It turns a completed left click, or Space/Enter while the
dial has focus, into a single click on the DialController.
"""

import logging
from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, Qt
from PyQt6.QtGui import QKeyEvent, QMouseEvent

if TYPE_CHECKING:
    from fancontroller.views.dial import DialView
    from fancontroller.core.dial_controller import DialController

ACTIVATION_KEYS = tuple(key.value for key in (Qt.Key.Key_Space, Qt.Key.Key_Return, Qt.Key.Key_Enter))


class InputHandler(QObject):
    """
    Handles mouse and keyboard input for the DialView.
    """
    def __init__(self, widget: 'DialView', controller: 'DialController') -> None:
        super().__init__(widget)
        self.widget = widget
        self.controller = controller
        self.logger = logging.getLogger("FanController.Core.InputHandler")

        self._pressed: bool = False

    def handle_mouse_press(self, event: QMouseEvent) -> bool:
        """Arms a click on left-button press. Returns True if the event was used."""
        if event.button() == Qt.MouseButton.LeftButton:
            self._pressed = True
            event.accept()
            return True
        return False

    def handle_mouse_release(self, event: QMouseEvent) -> bool:
        """Completes a click when the left button is released inside the widget."""
        if event.button() != Qt.MouseButton.LeftButton:
            return False
        was_pressed, self._pressed = self._pressed, False
        if was_pressed and self.widget.rect().contains(event.position().toPoint()):
            self.logger.debug("Click detected on dial.")
            self.controller.perform_click()
        event.accept()
        return True

    def handle_key_press(self, event: QKeyEvent) -> bool:
        """Treats Space and Enter as a click, matching push-button behavior."""
        if event.key() in ACTIVATION_KEYS and not event.isAutoRepeat():
            self.logger.debug("Keyboard activation on dial.")
            self.controller.perform_click()
            event.accept()
            return True
        return False
