"""Built-in cue sounds and the ``time`` subcommand's sequence expansion.

Paths are relative to the sound folder.
"""

from __future__ import annotations

from .plan import ImportEntry

DEFAULT_START = "default/start.wav"
DEFAULT_STOP = "default/stop.wav"
DEFAULT_END = "default/go.wav"
DEFAULT_1SEC = "default/1_second.wav"
DEFAULT_2SECS = "default/2_seconds.wav"
DEFAULT_3SECS = "default/3_seconds.wav"
DEFAULT_4SECS = "default/4_seconds.wav"
DEFAULT_5SECS = "default/5_seconds.wav"
DEFAULT_10SECS = "default/10_seconds.wav"

# Countdown thresholds, longest first: (threshold, cues played from it).
COUNTDOWN_THRESHOLDS: tuple[tuple[int, tuple[tuple[str, int], ...]], ...] = (
    (10, (
        (DEFAULT_10SECS, 5),
        (DEFAULT_5SECS, 1),
        (DEFAULT_4SECS, 1),
        (DEFAULT_3SECS, 1),
        (DEFAULT_2SECS, 1),
        (DEFAULT_1SEC, 1),
    )),
    (5, (
        (DEFAULT_5SECS, 1),
        (DEFAULT_4SECS, 1),
        (DEFAULT_3SECS, 1),
        (DEFAULT_2SECS, 1),
        (DEFAULT_1SEC, 1),
    )),
    (3, (
        (DEFAULT_3SECS, 1),
        (DEFAULT_2SECS, 1),
        (DEFAULT_1SEC, 1),
    )),
)


def basic_entries(length: int, countdown: bool = False) -> list[ImportEntry]:
    """Entries for a plain timer of *length* seconds.

    Without *countdown*: the start cue, then the end cue after *length*
    seconds.  With *countdown*, the last 10, 5 or 3 seconds (the largest
    threshold strictly below *length*) are announced second by second.
    """
    if length < 0:
        raise ValueError("length must be non-negative")

    if countdown:
        for threshold, cues in COUNTDOWN_THRESHOLDS:
            if length > threshold:
                entries = [ImportEntry(DEFAULT_START, length - threshold)]
                entries.extend(ImportEntry(path, delay) for path, delay in cues)
                entries.append(ImportEntry(DEFAULT_END, 1))
                return entries

    return [ImportEntry(DEFAULT_START, length), ImportEntry(DEFAULT_END, 1)]
