"""String store for sound file paths.

Paths are interned into small integer handles (0..65535) so a timer
sequence holds ints instead of repeated path strings.  Handles are
assigned in first-seen order starting at 0.
"""

from __future__ import annotations

from typing import Iterator

MAX_HANDLES = 1 << 16  # handles fit in an unsigned 16-bit integer


class StringInterner:
    """Stores up to :data:`MAX_HANDLES` distinct strings.

    Usage::

        store = StringInterner()
        store.intern("default/start.wav")   # -> 0
        store.intern("default/go.wav")      # -> 1
        store.intern("default/start.wav")   # -> 0
        store[1]                            # -> "default/go.wav"
    """

    def __init__(self, capacity: int = MAX_HANDLES) -> None:
        if not 0 <= capacity <= MAX_HANDLES:
            raise ValueError(f"capacity must be within 0..{MAX_HANDLES}")
        self._capacity = capacity
        self._strings: list[str] = []
        self._index: dict[str, int] = {}

    def intern(self, string: str) -> int | None:
        """Return the handle for *string*, inserting it if new.

        Returns ``None`` once the store is full and *string* has not
        been seen before.  Strings already stored keep resolving.
        """
        handle = self._index.get(string)
        if handle is not None:
            return handle
        if len(self._strings) >= self._capacity:
            return None
        handle = len(self._strings)
        self._strings.append(string)
        self._index[string] = handle
        return handle

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._strings) >= self._capacity

    def __getitem__(self, handle: int) -> str:
        if not 0 <= handle < len(self._strings):
            raise IndexError(f"unknown sound handle {handle}")
        return self._strings[handle]

    def __contains__(self, string: object) -> bool:
        return string in self._index

    def __len__(self) -> int:
        return len(self._strings)

    def __iter__(self) -> Iterator[str]:
        return iter(self._strings)
