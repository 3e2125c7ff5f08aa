"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) architecture and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the Data Model (SceneState) and the settings.
2. Instantiates the SceneController, which owns the model.
3. Instantiates the Main Window (View) and passes the controller into it.
4. Prevents circular import errors by being the orchestrator.
"""
import logging
import sys

from PySide6.QtWidgets import QApplication

from rastervis.config import ViewSettings
from rastervis.controller.scene import SceneController
from rastervis.logging_config import setup_logging
from rastervis.model.state import SceneState
from rastervis.view.main_window import MainWindow, VISIBLE_APP_NAME


def main() -> None:
    # 1. Setup Logging (Console + Optional File)
    # RASTERVIS_LOG_LEVEL=DEBUG (or run.py --debug) logs every rasterized segment
    setup_logging(level=logging.INFO)

    # 2. Create the Qt Application
    app = QApplication(sys.argv)
    app.setApplicationName(VISIBLE_APP_NAME)

    # 3. Initialize the Data Model and settings
    settings = ViewSettings.from_env()
    state = SceneState()

    # 4. Controller owns the state and the reveal timers
    controller = SceneController(state, settings)

    # 5. Initialize the Main Window, passing the controller
    window = MainWindow(controller, settings)
    window.show()

    # 6. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
