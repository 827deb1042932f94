"""
Unit tests for InputHandler.
"""
import unittest
from unittest.mock import MagicMock

from PyQt6.QtCore import QEvent, QPointF, Qt
from PyQt6.QtGui import QKeyEvent, QMouseEvent
from PyQt6.QtWidgets import QApplication, QWidget

from fancontroller.core.input_handler import InputHandler


class TestInputHandler(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app = QApplication.instance() or QApplication([])

    def setUp(self):
        self.widget = QWidget()
        self.widget.resize(100, 100)
        self.controller = MagicMock()
        self.handler = InputHandler(self.widget, self.controller)

    def _mouse(self, kind, x, y, button=Qt.MouseButton.LeftButton):
        pos = QPointF(x, y)
        return QMouseEvent(kind, pos, pos, button, button, Qt.KeyboardModifier.NoModifier)

    def test_press_then_release_inside_clicks(self):
        self.assertTrue(self.handler.handle_mouse_press(self._mouse(QEvent.Type.MouseButtonPress, 50, 50)))
        self.assertTrue(self.handler.handle_mouse_release(self._mouse(QEvent.Type.MouseButtonRelease, 60, 40)))
        self.controller.perform_click.assert_called_once_with()

    def test_release_outside_cancels(self):
        self.handler.handle_mouse_press(self._mouse(QEvent.Type.MouseButtonPress, 50, 50))
        self.handler.handle_mouse_release(self._mouse(QEvent.Type.MouseButtonRelease, 150, 50))
        self.controller.perform_click.assert_not_called()

    def test_press_is_disarmed_after_release(self):
        self.handler.handle_mouse_press(self._mouse(QEvent.Type.MouseButtonPress, 50, 50))
        self.handler.handle_mouse_release(self._mouse(QEvent.Type.MouseButtonRelease, 50, 50))
        self.handler.handle_mouse_release(self._mouse(QEvent.Type.MouseButtonRelease, 50, 50))
        self.controller.perform_click.assert_called_once_with()

    def test_other_buttons_are_not_handled(self):
        press = self._mouse(QEvent.Type.MouseButtonPress, 50, 50, Qt.MouseButton.MiddleButton)
        release = self._mouse(QEvent.Type.MouseButtonRelease, 50, 50, Qt.MouseButton.MiddleButton)
        self.assertFalse(self.handler.handle_mouse_press(press))
        self.assertFalse(self.handler.handle_mouse_release(release))
        self.controller.perform_click.assert_not_called()

    def test_space_clicks_but_auto_repeat_does_not(self):
        space = QKeyEvent(QEvent.Type.KeyPress, Qt.Key.Key_Space.value, Qt.KeyboardModifier.NoModifier)
        repeat = QKeyEvent(QEvent.Type.KeyPress, Qt.Key.Key_Space.value, Qt.KeyboardModifier.NoModifier, "", True)
        self.assertTrue(self.handler.handle_key_press(space))
        self.assertFalse(self.handler.handle_key_press(repeat))
        self.controller.perform_click.assert_called_once_with()


if __name__ == "__main__":
    unittest.main()
