"""
Provides centralized, immutable constants for the Fan Controller application.

This package exposes singleton instances of constant groups, ensuring they
are validated on import and easily accessible from a single namespace.

Usage:
    from fancontroller import constants

    # Access application metadata
    print(constants.app.VERSION)

    # Access a translated string
    print(constants.i18n.DialStrings("de_DE").FAN_OFF)

    # Access dial geometry
    inset = constants.dial.RADIUS_OFFSET_INDICATOR
"""

from .app import app
from .color import color
from .config import config
from .dial import dial
from . import i18n
from .logs import logs

__all__ = [
    "app",
    "color",
    "config",
    "dial",
    "i18n",
    "logs",
]
