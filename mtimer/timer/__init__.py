"""Timer package."""

from .engine import TimerEngine, TimerState, TICK_INCREMENT
from .interner import StringInterner, MAX_HANDLES
from .plan import (
    ImportEntry,
    Entry,
    Comment,
    Blank,
    ParsedLine,
    parse_line,
    parse_file,
)
from .presets import basic_entries
from .sequence import TimerEntry, TimerSequence

__all__ = [
    "TimerEngine",
    "TimerState",
    "TICK_INCREMENT",
    "StringInterner",
    "MAX_HANDLES",
    "ImportEntry",
    "Entry",
    "Comment",
    "Blank",
    "ParsedLine",
    "parse_line",
    "parse_file",
    "basic_entries",
    "TimerEntry",
    "TimerSequence",
]
