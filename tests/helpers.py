"""Shared test helpers for mtimer."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from mtimer.errors import PlaybackError


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class FakeClock:
    """Deterministic ``clock``/``sleep`` pair, counted in whole milliseconds.

    ``on_sleep`` (if set) is called after every sleep with the new time.
    """

    def __init__(self):
        self._ms = 0
        self.sleeps: list[float] = []
        self.on_sleep: Callable[[float], None] | None = None

    @property
    def now(self) -> float:
        return self._ms / 1000

    def clock(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self._ms += round(seconds * 1000)
        if self.on_sleep is not None:
            self.on_sleep(self.now)


class RecordingSource:
    """Sound source that records ``(handle, time)`` for every play.

    ``fail_on`` makes the n-th play call (0-based) raise PlaybackError.
    """

    def __init__(self, clock: FakeClock | None = None, fail_on: int | None = None):
        self.clock = clock
        self.fail_on = fail_on
        self.plays: list[tuple[int, float | None]] = []

    @property
    def handles(self) -> list[int]:
        return [handle for handle, _ in self.plays]

    @property
    def times(self) -> list[float | None]:
        return [at for _, at in self.plays]

    def play(self, sound_handle: int) -> None:
        if self.fail_on is not None and len(self.plays) == self.fail_on:
            raise PlaybackError("device unplugged")
        self.plays.append((sound_handle, self.clock.now if self.clock else None))


class FakeAudioOutput:
    """AudioOutput that records ``play_once`` calls instead of playing."""

    def __init__(self, clock: FakeClock | None = None, error: Exception | None = None):
        self.clock = clock
        self.error = error
        self.opened = False
        self.played: list[tuple[Path, float]] = []

    def open(self) -> None:
        self.opened = True

    def play_once(self, path: Path, gain: float) -> None:
        if self.error is not None:
            raise self.error
        self.played.append((Path(path), gain))

    def sleep(self, seconds: float) -> None:
        if self.clock is not None:
            self.clock.sleep(seconds)
