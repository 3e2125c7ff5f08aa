"""
Input Control Panel
"""
from __future__ import annotations

from PySide6.QtCore import Signal, QLocale
from PySide6.QtGui import QDoubleValidator
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGroupBox, QFormLayout, QLineEdit, QPushButton, QHBoxLayout, QLabel
)

LINE_KEYS = ("x1", "y1", "x2", "y2")
CIRCLE_KEYS = ("x", "y", "r")


class InputPanel(QWidget):
    # Any field edited
    fields_changed = Signal()
    start_requested = Signal()
    clear_requested = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._edits: dict[str, QLineEdit] = {}

        layout = QVBoxLayout(self)

        # --- Line Group ---
        grp_line = QGroupBox("Úsečka (Bresenham)")
        form_line = QFormLayout(grp_line)
        form_line.addRow("X1:", self._add_edit("x1"))
        form_line.addRow("Y1:", self._add_edit("y1"))
        form_line.addRow("X2:", self._add_edit("x2"))
        form_line.addRow("Y2:", self._add_edit("y2"))
        layout.addWidget(grp_line)

        # --- Circle Group ---
        grp_circle = QGroupBox("Kružnice (Bresenham)")
        form_circle = QFormLayout(grp_circle)
        form_circle.addRow("Střed X:", self._add_edit("x"))
        form_circle.addRow("Střed Y:", self._add_edit("y"))
        form_circle.addRow("Poloměr:", self._add_edit("r"))
        layout.addWidget(grp_circle)

        # --- Actions ---
        buttons = QHBoxLayout()
        self.btn_start = QPushButton("Start")
        self.btn_start.setMinimumHeight(40)
        self.btn_start.clicked.connect(lambda: self.start_requested.emit())
        buttons.addWidget(self.btn_start)

        self.btn_clear = QPushButton("Vymazat")
        self.btn_clear.setMinimumHeight(40)
        self.btn_clear.clicked.connect(self.on_clear_clicked)
        buttons.addWidget(self.btn_clear)
        layout.addLayout(buttons)

        hint = QLabel("Mezerník: ukázková kružnice")
        hint.setWordWrap(True)
        layout.addWidget(hint)

        layout.addStretch()

    def _add_edit(self, key: str) -> QLineEdit:
        edit = QLineEdit()
        # Validator only guides typing; the model parses and validates the text itself
        validator = QDoubleValidator(edit)
        validator.setNotation(QDoubleValidator.Notation.StandardNotation)
        validator.setLocale(QLocale.c())
        edit.setValidator(validator)
        edit.setClearButtonEnabled(True)
        edit.textChanged.connect(lambda *_: self.fields_changed.emit())
        self._edits[key] = edit
        return edit

    def line_fields(self) -> tuple[str, ...]:
        return tuple(self._edits[k].text() for k in LINE_KEYS)

    def circle_fields(self) -> tuple[str, ...]:
        return tuple(self._edits[k].text() for k in CIRCLE_KEYS)

    def set_circle_fields(self, x: float, y: float, r: float) -> None:
        """Fill the circle fields without emitting one change per field."""
        self.blockSignals(True)
        try:
            for key, value in zip(CIRCLE_KEYS, (x, y, r)):
                self._edits[key].setText(f"{value:g}")
        finally:
            self.blockSignals(False)

    def on_clear_clicked(self) -> None:
        self.blockSignals(True)
        try:
            for edit in self._edits.values():
                edit.clear()
        finally:
            self.blockSignals(False)
        self.clear_requested.emit()
