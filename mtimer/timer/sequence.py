"""Ordered timer steps built from plan entries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Iterable, Iterator, Protocol, overload

from .plan import ImportEntry


class Interner(Protocol):
    def intern(self, string: str) -> int | None: ...


@dataclass(frozen=True)
class TimerEntry:
    """A sound handle (``None`` when unresolved) and the delay until the
    next entry starts."""

    sound_handle: int | None
    time_delay: timedelta


class TimerSequence:
    """Read-only, ordered list of :class:`TimerEntry` values."""

    def __init__(self, entries: Iterable[TimerEntry] = ()) -> None:
        self._entries: tuple[TimerEntry, ...] = tuple(entries)

    @classmethod
    def build(
        cls, entries: Iterable[ImportEntry], interner: Interner
    ) -> "TimerSequence":
        """Resolve each entry's path through *interner*, keeping order.

        Only path strings are deduplicated; repeated steps stay repeated.
        """
        return cls(
            TimerEntry(
                sound_handle=interner.intern(entry.sound_path),
                time_delay=timedelta(seconds=entry.time_delay),
            )
            for entry in entries
        )

    @property
    def total_delay(self) -> timedelta:
        return sum((e.time_delay for e in self._entries), timedelta())

    @overload
    def __getitem__(self, index: int) -> TimerEntry: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[TimerEntry, ...]: ...

    def __getitem__(self, index):
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TimerEntry]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimerSequence):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"TimerSequence({list(self._entries)!r})"
