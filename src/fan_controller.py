"""
Application entry point and lifecycle management for the Fan Controller.
"""

import logging
import signal
import sys
from typing import Optional

from PyQt6.QtWidgets import QApplication, QMessageBox

from fancontroller import constants
from fancontroller.constants.i18n import DialStrings
from fancontroller.utils.config import ConfigManager
from fancontroller.utils.helpers import setup_logging
from fancontroller.views.dial import DialView


def main() -> int:
    """
    Main entry point for the Fan Controller application.

    Orchestrates the application's startup sequence:
    1. Sets up logging.
    2. Loads configuration.
    3. Loads the strings for the user's chosen language.
    4. Creates the dial window and runs the application event loop.

    Returns:
        An integer exit code.
    """
    # 1. Set up logging immediately so that any subsequent errors can be recorded.
    setup_logging()
    logger = logging.getLogger("FanController.Main")

    # The QApplication must be created before any UI elements.
    app = QApplication(sys.argv)
    app.setApplicationName(constants.app.APP_NAME)
    app.setApplicationVersion(constants.app.VERSION)

    i18n_strings: Optional[DialStrings] = None

    try:
        # 2. Load the application configuration from the file.
        config_manager = ConfigManager()
        config = config_manager.load()

        # 3. Load the strings for the user's saved language.
        i18n_strings = DialStrings(config.get("language"))

        # 4. Create and show the dial.
        dial = DialView(config=config, i18n=i18n_strings)
        dial.setWindowTitle(i18n_strings.APP_WINDOW_TITLE)
        dial.resize(dial.sizeHint())

        signal.signal(signal.SIGINT, lambda s, f: QApplication.instance().quit())
        signal.signal(signal.SIGTERM, lambda s, f: QApplication.instance().quit())

        dial.show()
        logger.info("%s %s started.", constants.app.APP_NAME, constants.app.VERSION)

        # 5. Start the application event loop.
        return app.exec()

    except Exception as e:
        # This is a global catch-all for any critical error during startup.
        logger.critical("A critical error occurred during startup: %s", e, exc_info=True)
        title = i18n_strings.ERROR_WINDOW_TITLE if i18n_strings else "Application Error"
        message = (i18n_strings.CRITICAL_ERROR_MESSAGE.format(error=e) if i18n_strings
                   else f"A critical error occurred and Fan Controller must close:\n\n{e}")
        QMessageBox.critical(None, title, message)
        return 1

if __name__ == "__main__":
    sys.exit(main())
