"""
Main Application Window
=======================
The primary GUI container: input panel on the left, canvas on the right,
status bar at the bottom.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects panel signals to the SceneController and controller
   signals back to the canvas and status bar.
"""
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import QMainWindow, QSplitter, QStatusBar

from rastervis.config import ViewSettings, WINDOW_SIZE, DEMO_CIRCLE_RADIUS
from rastervis.controller.scene import SceneController
from rastervis.view.canvas import RasterCanvas
from rastervis.view.input_panel import InputPanel

VISIBLE_APP_NAME = "Rasterizace: Bresenham"


class MainWindow(QMainWindow):
    def __init__(self, controller: SceneController, settings: ViewSettings) -> None:
        super().__init__()
        self.controller = controller
        self.settings = settings

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(*WINDOW_SIZE)

        # --- SPLITTER (CONTENT AREA) ---
        splitter = QSplitter(Qt.Horizontal)
        self.setCentralWidget(splitter)

        # --- LEFT SIDE: Inputs ---
        self.input_panel = InputPanel()
        splitter.addWidget(self.input_panel)

        # --- RIGHT SIDE: Canvas ---
        self.canvas = RasterCanvas(controller.state, settings)
        splitter.addWidget(self.canvas)

        # Set initial proportions (1 part sidebar : 4 parts canvas)
        splitter.setSizes([250, 950])

        self.setStatusBar(QStatusBar())

        # --- SIGNAL CONNECTIONS ---
        self.input_panel.fields_changed.connect(self.on_fields_changed)
        self.input_panel.start_requested.connect(self.controller.start)
        self.input_panel.clear_requested.connect(self.controller.clear)

        self.controller.scene_changed.connect(self.canvas.update)
        self.controller.status_message.connect(self.statusBar().showMessage)

        # --- ACTIONS ---
        self._create_actions()

    def _create_actions(self) -> None:
        self.act_demo = QAction("Ukázka", self)
        self.act_demo.setShortcut(QKeySequence(Qt.Key.Key_Space))
        self.act_demo.setShortcutContext(Qt.ShortcutContext.WindowShortcut)
        self.act_demo.triggered.connect(self.on_demo)
        self.addAction(self.act_demo)

        self.act_start = QAction("Start", self)
        self.act_start.setShortcut(QKeySequence("Ctrl+Return"))
        self.act_start.triggered.connect(self.controller.start)
        self.addAction(self.act_start)

        self.act_exit = QAction("Ukončit", self)
        self.act_exit.setShortcut(QKeySequence("Ctrl+Q"))
        self.act_exit.triggered.connect(self.close)
        self.addAction(self.act_exit)

    def on_fields_changed(self) -> None:
        self.controller.set_inputs(self.input_panel.line_fields(), self.input_panel.circle_fields())

    def on_demo(self) -> None:
        """Show the demo circle in the inputs too, then run it."""
        self.input_panel.set_circle_fields(0.0, 0.0, DEMO_CIRCLE_RADIUS)
        self.controller.run_demo()

    def closeEvent(self, event, /) -> None:
        self.controller.animator.stop()
        event.accept()
