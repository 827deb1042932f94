import os

import pytest

# Tests run headless unless a platform is chosen explicitly.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from fancontroller.constants.i18n import DialStrings


@pytest.fixture(scope="session")
def q_app():
    """Provides a QApplication instance for the test session."""
    return QApplication.instance() or QApplication([])


@pytest.fixture
def i18n_en() -> DialStrings:
    """English strings, independent of the machine's locale."""
    return DialStrings("en_US")
