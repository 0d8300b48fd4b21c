"""Error types raised by mtimer.

Every failure the timer can report derives from :class:`TimerError`, so
the command line only has to catch one type.  A sound with no handle is
*not* an error (see :mod:`mtimer.timer.engine`).
"""

from __future__ import annotations

import errno


class TimerError(Exception):
    """Base class for all mtimer errors."""


class InvalidPath(TimerError):
    """A folder or file could not be located."""

    def __init__(self, path: str) -> None:
        self.path = str(path)
        super().__init__(f"Cannot find path '{self.path}'")


class InvalidFile(TimerError):
    """A plan file could not be opened or read."""

    def __init__(self, file: str) -> None:
        self.file = str(file)
        super().__init__(f"Error loading file '{self.file}'")


class InvalidParse(TimerError):
    """A plan line does not follow the ``filename.wav: 1`` grammar."""

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(
            f"Invalid line '{line}' in file: should be in 'filename.wav: 1' format"
        )


class InvalidArgument(TimerError):
    """A command-line argument is out of its accepted range."""

    def __init__(self, arg: str) -> None:
        self.arg = arg
        super().__init__(f"Invalid argument for '{arg}'")


class IoError(TimerError):
    """Wraps an underlying :class:`OSError` by its errno name."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"IO Error: '{kind}'")

    @classmethod
    def from_os_error(cls, exc: OSError) -> "IoError":
        if exc.errno is not None:
            kind = errno.errorcode.get(exc.errno, str(exc.errno))
        else:
            kind = type(exc).__name__
        return cls(kind)


class PlaybackError(TimerError):
    """The audio output could not load or play a sound."""

    def __init__(self, error: str) -> None:
        self.error = str(error)
        super().__init__(f"Playback Error: '{self.error}'")


class StreamError(TimerError):
    """No audio output stream could be opened."""

    def __init__(self, error: str) -> None:
        self.error = str(error)
        super().__init__(f"Stream Error: '{self.error}'")
