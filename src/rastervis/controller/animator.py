"""
Timer-driven Reveal
===================
Drives RevealSchedules with QTimers on the GUI thread.

Why is this file needed?
------------------------
1. Pacing: Points appear one step at a time so students can follow the
   algorithm. The pacing never changes which points are produced.
2. Signals: Each tick is announced with a Qt Signal, so the controller can
   append to the scene state and the canvas can repaint.
"""
from __future__ import annotations

import logging
from typing import Any, Sequence

from PySide6.QtCore import QObject, QTimer, Signal

from rastervis.controller.reveal import RevealSchedule

logger = logging.getLogger(__name__)


class RevealAnimator(QObject):
    """Runs any number of named reveal channels ("line", "circle", ...) in parallel."""
    revealed = Signal(str, object)  # (channel, item)
    finished = Signal(str)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._schedules: dict[str, RevealSchedule[Any]] = {}
        self._timers: dict[str, QTimer] = {}

    def start(self, channel: str, items: Sequence[Any], interval_ms: int) -> None:
        """(Re)start a channel. A running schedule on the same channel is discarded."""
        self.stop(channel)
        schedule: RevealSchedule[Any] = RevealSchedule(items)
        if schedule.finished:
            logger.debug("Nothing to reveal on channel '%s'", channel)
            self.finished.emit(channel)
            return

        timer = QTimer(self)
        timer.setInterval(interval_ms)
        timer.timeout.connect(lambda: self._tick(channel))
        self._schedules[channel] = schedule
        self._timers[channel] = timer
        timer.start()
        logger.debug("Revealing %d items on '%s' every %d ms", len(schedule), channel, interval_ms)

    def stop(self, channel: str | None = None) -> None:
        """Stop one channel, or all of them when `channel` is None."""
        channels = list(self._timers) if channel is None else [channel]
        for name in channels:
            timer = self._timers.pop(name, None)
            if timer is not None:
                timer.stop()
                timer.deleteLater()
            self._schedules.pop(name, None)

    def is_running(self, channel: str | None = None) -> bool:
        if channel is None:
            return bool(self._timers)
        return channel in self._timers

    def _tick(self, channel: str) -> None:
        schedule = self._schedules.get(channel)
        if schedule is None:
            return
        item = schedule.advance()
        if item is not None:
            self.revealed.emit(channel, item)
        if schedule.finished:
            self.stop(channel)
            self.finished.emit(channel)
