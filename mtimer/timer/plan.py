"""Timer plan parsing.

A plan is a text file with one directive per line::

    # warm up
    default/start.wav: 30
    bell.wav

    default/go.wav: 1

Each entry is ``<path ending in .wav>[: <seconds>]``; the delay defaults
to 1 second.  Lines starting with ``#`` and blank lines are skipped.
The first malformed line aborts the whole load.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from ..errors import InvalidFile, InvalidParse

SOUND_SUFFIX = ".wav"
DEFAULT_DELAY = 1  # seconds

_DELAY_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class ImportEntry:
    """One (sound path, delay in seconds) pair before interning."""

    sound_path: str
    time_delay: int = DEFAULT_DELAY

    def __post_init__(self) -> None:
        if self.time_delay < 0:
            raise ValueError("time_delay must be non-negative")


# ── parsed line variants ──────────────────────────────────────────────────


@dataclass(frozen=True)
class Entry:
    entry: ImportEntry


@dataclass(frozen=True)
class Comment:
    pass


@dataclass(frozen=True)
class Blank:
    pass


ParsedLine = Union[Entry, Comment, Blank]


# ── parsing ───────────────────────────────────────────────────────────────


def parse_line(line: str) -> ParsedLine:
    """Interpret one line of a plan.

    Raises :class:`InvalidParse` when the path does not end in ``.wav``
    or the delay is not a non-negative integer.
    """
    stripped = line.strip()
    if stripped.startswith("#"):
        return Comment()
    if not stripped:
        return Blank()

    path_token, sep, delay_token = stripped.partition(":")
    sound_path = path_token.strip()
    if not sound_path.endswith(SOUND_SUFFIX):
        raise InvalidParse(line)

    if sep:
        delay_token = delay_token.strip()
        if not _DELAY_RE.fullmatch(delay_token):
            raise InvalidParse(line)
        delay = int(delay_token)
    else:
        delay = DEFAULT_DELAY

    return Entry(ImportEntry(sound_path, delay))


def parse_file(path: str | Path) -> list[ImportEntry]:
    """Read a plan file into its entries, in file order.

    Raises :class:`InvalidFile` if the file cannot be opened or read and
    propagates the first :class:`InvalidParse`.
    """
    entries: list[ImportEntry] = []
    try:
        fh = open(path, encoding="utf-8")
    except OSError as exc:
        raise InvalidFile(str(path)) from exc

    with fh:
        while True:
            try:
                raw = fh.readline()
            except (OSError, UnicodeDecodeError) as exc:
                raise InvalidFile(str(path)) from exc
            if not raw:
                break
            parsed = parse_line(raw.rstrip("\r\n"))
            if isinstance(parsed, Entry):
                entries.append(parsed.entry)

    return entries
