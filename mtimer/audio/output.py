"""Audio output capability and its QtMultimedia implementation.

The engine only needs three things from an output: open the default
device, play a file once at a gain, and sleep while keeping playback
alive.  ``QtAudioOutput`` does this with :class:`QSoundEffect`, which
loads asynchronously and plays on the Qt event loop, so ``sleep`` pumps
pending events before and after each pause.
"""

from __future__ import annotations

import sys
import time
from pathlib import Path
from typing import Protocol

from PyQt6.QtCore import QCoreApplication, QObject, QUrl
from PyQt6.QtMultimedia import QAudioDevice, QMediaDevices, QSoundEffect

from ..errors import IoError, PlaybackError, StreamError
from ..utils import get_logger

logger = get_logger(__name__)

MIN_GAIN = 0.0
MAX_GAIN = 2.0
LOAD_TIMEOUT = 2.0  # seconds to wait for QSoundEffect to decode a file
_LOAD_POLL = 0.01
START_GRACE = 5.0  # seconds an effect may take to report playing


class AudioOutput(Protocol):
    def open(self) -> None: ...

    def play_once(self, path: Path, gain: float) -> None: ...

    def sleep(self, seconds: float) -> None: ...


def clamp_gain(gain: float) -> float:
    return max(MIN_GAIN, min(gain, MAX_GAIN))


class QtAudioOutput(QObject):
    """Plays WAV files through the default audio device.

    Usage::

        out = QtAudioOutput()
        out.open()
        out.play_once(Path("sound/default/go.wav"), 0.5)
        out.sleep(1.0)
    """

    def __init__(self, parent: QObject | None = None) -> None:
        app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
        super().__init__(parent)
        self._app = app
        self._device: QAudioDevice | None = None
        self._effects: list[_Playing] = []

    # ── public API ────────────────────────────────────────────────────

    @property
    def is_open(self) -> bool:
        return self._device is not None

    def open(self) -> None:
        """Select the default output device.  Raises :class:`StreamError`."""
        device = QMediaDevices.defaultAudioOutput()
        if device.isNull():
            raise StreamError("no default audio output device available")
        self._device = device
        logger.debug("Opened audio output '%s'", device.description())

    def play_once(self, path: Path, gain: float) -> None:
        """Start playing *path* once and return immediately.

        Raises :class:`IoError` if *path* cannot be opened and
        :class:`PlaybackError` if Qt cannot decode it.
        """
        try:
            with open(path, "rb"):
                pass
        except OSError as exc:
            raise IoError.from_os_error(exc) from exc

        if self._device is None:
            self.open()

        # QSoundEffect volume is linear 0.0-1.0; boost above 1.0 is not supported.
        volume = min(clamp_gain(gain), 1.0)

        effect = QSoundEffect(self._device, self)
        effect.setSource(QUrl.fromLocalFile(str(Path(path).resolve())))
        effect.setLoopCount(1)
        effect.setVolume(volume)

        status = self._wait_loaded(effect)
        if status != QSoundEffect.Status.Ready:
            effect.deleteLater()
            if status == QSoundEffect.Status.Error:
                raise PlaybackError(f"cannot decode '{path}'")
            raise PlaybackError(f"timed out loading '{path}'")

        effect.play()
        self._prune()
        self._effects.append(_Playing(effect))

    def sleep(self, seconds: float) -> None:
        """Sleep for *seconds* while letting Qt deliver playback events."""
        QCoreApplication.processEvents()
        time.sleep(seconds)
        QCoreApplication.processEvents()
        self._prune()

    def close(self) -> None:
        for item in self._effects:
            item.effect.stop()
            item.effect.deleteLater()
        self._effects.clear()
        self._device = None

    # ── internal ──────────────────────────────────────────────────────

    def _wait_loaded(self, effect: QSoundEffect) -> QSoundEffect.Status:
        deadline = time.monotonic() + LOAD_TIMEOUT
        pending = (QSoundEffect.Status.Null, QSoundEffect.Status.Loading)
        while effect.status() in pending and time.monotonic() < deadline:
            QCoreApplication.processEvents()
            time.sleep(_LOAD_POLL)
        return effect.status()

    def _prune(self) -> None:
        """Drop references to effects that have finished playing.

        An effect that has not reported playing yet is kept for
        ``START_GRACE`` seconds, since ``play()`` starts asynchronously.
        """
        now = time.monotonic()
        alive: list[_Playing] = []
        for item in self._effects:
            if item.effect.isPlaying():
                item.seen_playing = True
                alive.append(item)
            elif not item.seen_playing and now - item.started_at < START_GRACE:
                alive.append(item)
            else:
                item.effect.deleteLater()
        self._effects = alive


class _Playing:
    __slots__ = ("effect", "started_at", "seen_playing")

    def __init__(self, effect: QSoundEffect) -> None:
        self.effect = effect
        self.started_at = time.monotonic()
        self.seen_playing = False
