"""
Views submodule for the Fan Controller.

Contains UI-related classes like DialView.
"""

from .dial import DialView

__all__ = ["DialView"]
