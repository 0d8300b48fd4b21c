"""Timer execution engine for mtimer.

States
------
IDLE        Not running.
PLAYING     Asking the sound source to play entry *i*.
WAITING     Polling in fixed ticks until entry *i*'s delay has elapsed.
DONE        Every entry played and waited out.
CANCELLED   ``cancel()`` was called during a run.

Transitions
-----------
IDLE | DONE | CANCELLED → PLAYING(0)     (run)
PLAYING(i) → WAITING(i)                  (play requested, or no sound)
WAITING(i) → PLAYING(i+1)                (delay elapsed)
WAITING(last) → DONE                     (delay elapsed)
WAITING(i) → CANCELLED                   (cancel)
PLAYING(i) → IDLE                        (playback error, re-raised)

Playback is fire-and-forget: the delay clock starts when the play
request is issued, so a sound longer than its delay overlaps the next
entry.  The wait is a coarse poll; it may overshoot by up to one tick
but never returns early.
"""

from __future__ import annotations

import threading
import time
from enum import Enum
from typing import Callable, Protocol

from PyQt6.QtCore import QObject, pyqtSignal

from ..utils import get_logger
from .sequence import TimerSequence

logger = get_logger(__name__)


class SoundSource(Protocol):
    def play(self, sound_handle: int) -> None: ...


# ── enums ─────────────────────────────────────────────────────────────────


class TimerState(Enum):
    IDLE = "idle"
    PLAYING = "playing"
    WAITING = "waiting"
    DONE = "done"
    CANCELLED = "cancelled"


# ── constants ─────────────────────────────────────────────────────────────

TICK_INCREMENT = 0.1  # seconds between elapsed-time checks


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Runs a :class:`TimerSequence` to completion, one entry at a time.

    Signals
    -------
    state_changed(new_state: TimerState)
        Emitted on every state transition.
    entry_started(index: int)
        Emitted before each entry's play step.
    finished()
        Emitted after the last entry's delay has elapsed.

    ``clock`` and ``sleep`` default to :func:`time.monotonic` and
    :func:`time.sleep`; the Qt audio output passes a ``sleep`` that also
    pumps the Qt event loop.
    """

    state_changed = pyqtSignal(object)
    entry_started = pyqtSignal(int)
    finished = pyqtSignal()

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        tick: float = TICK_INCREMENT,
    ) -> None:
        super().__init__(parent)
        self._clock = clock
        self._sleep = sleep
        self._tick = tick

        self._state: TimerState = TimerState.IDLE
        self._index: int | None = None
        self._running: bool = False
        self._cancel = threading.Event()

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def current_index(self) -> int | None:
        """Index of the entry being played or waited on, if any."""
        return self._index

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def tick(self) -> float:
        return self._tick

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def run(self, sequence: TimerSequence, sound_source: SoundSource) -> bool:
        """Play every entry of *sequence* in order, blocking until done.

        Returns ``True`` when the sequence completed and ``False`` when
        it was cancelled.  Playback errors propagate unchanged and stop
        the run before any later entry.
        """
        if self._running:
            raise RuntimeError("TimerEngine.run() is already in progress")
        self._running = True
        self._cancel.clear()
        try:
            for ix, entry in enumerate(sequence):
                self._index = ix
                start = self._clock()
                self.entry_started.emit(ix)
                self._set_state(TimerState.PLAYING)
                self._play(ix, entry.sound_handle, sound_source)
                self._set_state(TimerState.WAITING)
                if not self._wait(start, entry.time_delay.total_seconds()):
                    logger.info("Timer cancelled at index [%d]", ix)
                    self._set_state(TimerState.CANCELLED)
                    return False
        except BaseException:
            self._set_state(TimerState.IDLE)
            raise
        finally:
            self._running = False
            self._index = None

        self._set_state(TimerState.DONE)
        self.finished.emit()
        return True

    def cancel(self) -> None:
        """Stop the current run at its next tick.  Safe from any thread."""
        self._cancel.set()

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _play(
        self, ix: int, sound_handle: int | None, sound_source: SoundSource
    ) -> None:
        if sound_handle is None:
            logger.warning("No sound at index [%d]!", ix)
            return
        logger.debug("Playing sound %d at index [%d]", sound_handle, ix)
        sound_source.play(sound_handle)

    def _wait(self, start: float, delay: float) -> bool:
        """Sleep in ticks until *delay* seconds have passed since *start*.

        Returns ``False`` if cancelled first.
        """
        while self._clock() - start < delay:
            if self._cancel.is_set():
                return False
            self._sleep(self._tick)
        return not self._cancel.is_set()

    def _set_state(self, new_state: TimerState) -> None:
        self._state = new_state
        self.state_changed.emit(new_state)
