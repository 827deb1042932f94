"""Unit tests for Fan Controller constants.

Validates constant values across all constant classes for type correctness,
range validity, and consistency.
"""

import math
import unittest

from fancontroller import constants
from fancontroller.constants.color import ColorConstants
from fancontroller.constants.config import ConfigConstants
from fancontroller.constants.dial import DialConstants


class TestConstants(unittest.TestCase):
    """Tests for validating Fan Controller constants."""

    def test_dial_constants(self):
        """Validate DialConstants properties."""
        self.assertAlmostEqual(math.degrees(constants.dial.START_ANGLE), 202.5)
        self.assertAlmostEqual(math.degrees(constants.dial.ANGLE_STEP), 45.0)
        self.assertEqual(constants.dial.RADIUS_SCALE, 0.8)
        self.assertEqual(constants.dial.RADIUS_OFFSET_LABEL, 30)
        self.assertEqual(constants.dial.RADIUS_OFFSET_INDICATOR, -35)

    def test_color_constants(self):
        """Validate ColorConstants properties."""
        self.assertEqual(constants.color.DIAL_OFF_COLOR, constants.color.GRAY)
        self.assertEqual(constants.color.DIAL_ON_COLOR, constants.color.GREEN)
        self.assertFalse(hasattr(ColorConstants, "WHITE"))
        self.assertFalse(hasattr(ColorConstants, "RED"))

    def test_config_defaults(self):
        """Validate the default config uses the constant palette."""
        defaults = constants.config.defaults.DEFAULT_CONFIG
        self.assertEqual(defaults["off_color"], constants.color.DIAL_OFF_COLOR)
        self.assertEqual(defaults["label_font_size"], constants.dial.LABEL_TEXT_SIZE)
        self.assertIsNone(defaults["language"])

    def test_invalid_color_is_rejected(self):
        class BadColors(ColorConstants):
            GREEN = "green"
        with self.assertRaises(ValueError):
            BadColors()

    def test_invalid_radius_scale_is_rejected(self):
        class BadDial(DialConstants):
            RADIUS_SCALE = 1.5
        with self.assertRaises(ValueError):
            BadDial()

    def test_config_key_mismatch_is_rejected(self):
        class BadConfig(ConfigConstants):
            DEFAULT_CONFIG = {"language": None}
        with self.assertRaises(ValueError):
            BadConfig()


if __name__ == "__main__":
    unittest.main()
