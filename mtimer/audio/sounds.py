"""Default cue synthesis and handle-based playback.

The built-in cues are generated with numpy (sine tones shaped by ADSR
envelopes) and cached as WAV files under ``<sounds_dir>/default/`` the
first time they are needed, so a fresh install needs no audio assets.

Default cues
------------
- ``start``       ascending three-note chime
- ``stop``        descending two-note pair
- ``go``          long bell marking the end of a timer
- ``N_second(s)`` N short ticks, for the last 1-5 seconds
- ``10_seconds``  two-tone double tap
"""

from __future__ import annotations

import io
import wave
from pathlib import Path
from typing import Callable

import numpy as np

from PyQt6.QtCore import QObject

from ..timer.interner import StringInterner
from ..timer.presets import (
    DEFAULT_START,
    DEFAULT_STOP,
    DEFAULT_END,
    DEFAULT_1SEC,
    DEFAULT_2SECS,
    DEFAULT_3SECS,
    DEFAULT_4SECS,
    DEFAULT_5SECS,
    DEFAULT_10SECS,
)
from ..utils import get_logger
from .output import AudioOutput, clamp_gain

logger = get_logger(__name__)

SAMPLE_RATE = 44100


# ═══════════════════════════════════════════════════════════════════════════
#  WAV SYNTHESIS HELPERS
# ═══════════════════════════════════════════════════════════════════════════


def _make_envelope(
    length: int,
    attack: int = 200,
    decay: int = 400,
    sustain_level: float = 0.7,
    release: int = 800,
) -> np.ndarray:
    """ADSR envelope (all durations in samples)."""
    env = np.full(length, sustain_level, dtype=np.float64)
    a = min(attack, length)
    if a > 0:
        env[:a] = np.linspace(0.0, 1.0, a)
    d_end = min(a + decay, length)
    if d_end > a:
        env[a:d_end] = np.linspace(1.0, sustain_level, d_end - a)
    r_start = max(length - release, d_end)
    if r_start < length:
        start_level = env[r_start - 1] if r_start > 0 else sustain_level
        env[r_start:] = np.linspace(start_level, 0.0, length - r_start)
    return env


def _sine(freq: float, duration_s: float) -> np.ndarray:
    """Pure sine wave at *freq* Hz for *duration_s* seconds."""
    t = np.arange(int(SAMPLE_RATE * duration_s)) / SAMPLE_RATE
    return np.sin(2 * np.pi * freq * t)


def _silence(duration_s: float) -> np.ndarray:
    return np.zeros(int(SAMPLE_RATE * duration_s))


def _to_wav_bytes(samples: np.ndarray) -> bytes:
    """Convert a float64 array (-1..1) to 16-bit mono PCM WAV bytes."""
    pcm = (np.clip(samples, -1.0, 1.0) * 32767).astype("<i2")

    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(SAMPLE_RATE)
        wf.writeframes(pcm.tobytes())
    return buf.getvalue()


def _note(freq: float, duration_s: float, gain: float, **env) -> np.ndarray:
    tone = _sine(freq, duration_s) * gain
    return tone * _make_envelope(len(tone), **env)


# ═══════════════════════════════════════════════════════════════════════════
#  CUE GENERATORS
# ═══════════════════════════════════════════════════════════════════════════


def _generate_start() -> bytes:
    """Ascending chime (C5, E5, G5)."""
    parts: list[np.ndarray] = []
    for freq in (523.25, 659.25, 783.99):
        parts.append(_note(freq, 0.12, 0.6, attack=100, decay=200, sustain_level=0.4, release=300))
        parts.append(_silence(0.03))
    parts.append(_silence(0.05))
    return _to_wav_bytes(np.concatenate(parts))


def _generate_stop() -> bytes:
    """Descending pair (G5, C5)."""
    high = _note(783.99, 0.15, 0.5, attack=80, decay=200, sustain_level=0.4, release=300)
    low = _note(523.25, 0.30, 0.5, attack=80, decay=300, sustain_level=0.4, release=800)
    return _to_wav_bytes(np.concatenate([high, _silence(0.04), low, _silence(0.05)]))


def _generate_go() -> bytes:
    """Long bell (A4 with an octave overtone), slow decay."""
    duration = 1.2
    combined = _sine(440.0, duration) * 0.45 + _sine(880.0, duration) * 0.12
    env = _make_envelope(
        len(combined),
        attack=int(SAMPLE_RATE * 0.01),
        decay=int(SAMPLE_RATE * 0.3),
        sustain_level=0.35,
        release=int(SAMPLE_RATE * 0.8),
    )
    return _to_wav_bytes(combined * env)


def _generate_ticks(count: int) -> Callable[[], bytes]:
    """*count* short 1 kHz ticks, evenly spaced within half a second."""

    def generate() -> bytes:
        gap = 0.5 / count - 0.04
        parts: list[np.ndarray] = []
        for _ in range(count):
            parts.append(_note(1000.0, 0.04, 0.4, attack=40, decay=100, sustain_level=0.2, release=200))
            parts.append(_silence(max(gap, 0.02)))
        return _to_wav_bytes(np.concatenate(parts))

    return generate


def _generate_double_tap() -> bytes:
    """Two-tone double tap (800 Hz, 1200 Hz)."""
    low = _note(800.0, 0.06, 0.4, attack=40, decay=100, sustain_level=0.3, release=300)
    high = _note(1200.0, 0.06, 0.4, attack=40, decay=100, sustain_level=0.3, release=300)
    return _to_wav_bytes(np.concatenate([low, _silence(0.08), high, _silence(0.05)]))


# Map cue paths (relative to the sound folder) to generator functions
DEFAULT_SOUNDS: dict[str, Callable[[], bytes]] = {
    DEFAULT_START: _generate_start,
    DEFAULT_STOP: _generate_stop,
    DEFAULT_END: _generate_go,
    DEFAULT_1SEC: _generate_ticks(1),
    DEFAULT_2SECS: _generate_ticks(2),
    DEFAULT_3SECS: _generate_ticks(3),
    DEFAULT_4SECS: _generate_ticks(4),
    DEFAULT_5SECS: _generate_ticks(5),
    DEFAULT_10SECS: _generate_double_tap,
}


def ensure_default_sounds(sounds_dir: Path) -> list[Path]:
    """Write any missing default cue under *sounds_dir*.

    Returns the paths that were generated.
    """
    written: list[Path] = []
    for rel_path, gen_fn in DEFAULT_SOUNDS.items():
        path = sounds_dir / rel_path
        if path.exists():
            continue
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(gen_fn())
        written.append(path)
    if written:
        logger.info("Generated %d default sound(s) in %s", len(written), sounds_dir)
    return written


# ═══════════════════════════════════════════════════════════════════════════
#  SOUND MANAGER
# ═══════════════════════════════════════════════════════════════════════════


class SoundManager(QObject):
    """Interns sound paths into handles and plays them by handle.

    Usage::

        mgr = SoundManager(output, sounds_dir=Path("sound"), volume=0.5)
        handle = mgr.intern("default/go.wav")
        mgr.play(handle)
    """

    def __init__(
        self,
        output: AudioOutput,
        parent: QObject | None = None,
        *,
        sounds_dir: Path,
        volume: float = 0.5,
        interner: StringInterner | None = None,
    ) -> None:
        super().__init__(parent)
        self._output = output
        self._sounds_dir = Path(sounds_dir)
        self._volume = clamp_gain(volume)
        self._paths = interner if interner is not None else StringInterner()

    # ── public API ────────────────────────────────────────────────────

    @property
    def volume(self) -> float:
        """Playback gain, 0.0-2.0."""
        return self._volume

    @volume.setter
    def volume(self, gain: float) -> None:
        self._volume = clamp_gain(gain)

    @property
    def sounds_dir(self) -> Path:
        return self._sounds_dir

    @property
    def output(self) -> AudioOutput:
        return self._output

    def intern(self, path: str) -> int | None:
        return self._paths.intern(path)

    def path_for(self, sound_handle: int) -> Path:
        """Resolve *sound_handle* to a file under the sound folder."""
        return self._sounds_dir / self._paths[sound_handle]

    def play(self, sound_handle: int) -> None:
        """Play the sound behind *sound_handle* once at the current volume."""
        self._output.play_once(self.path_for(sound_handle), self._volume)
