"""Tests for building timer sequences from plan entries."""

from datetime import timedelta

import pytest

from mtimer.timer.interner import StringInterner
from mtimer.timer.plan import ImportEntry
from mtimer.timer.sequence import TimerEntry, TimerSequence


class TestBuild:

    def test_order_preserved(self):
        entries = [ImportEntry("a.wav", 3), ImportEntry("b.wav", 1), ImportEntry("c.wav", 2)]
        seq = TimerSequence.build(entries, StringInterner())
        assert [e.time_delay.total_seconds() for e in seq] == [3, 1, 2]
        assert [e.sound_handle for e in seq] == [0, 1, 2]

    def test_repeated_paths_share_handle_but_not_steps(self):
        store = StringInterner()
        entries = [ImportEntry("bell.wav", 1), ImportEntry("go.wav", 1), ImportEntry("bell.wav", 5)]
        seq = TimerSequence.build(entries, store)
        assert len(seq) == 3
        assert seq[0].sound_handle == seq[2].sound_handle == 0
        assert seq[1].sound_handle == 1
        assert len(store) == 2

    def test_delays_become_timedeltas(self):
        seq = TimerSequence.build([ImportEntry("a.wav", 90)], StringInterner())
        assert seq[0] == TimerEntry(0, timedelta(seconds=90))

    def test_exhausted_interner_gives_none_handle(self):
        store = StringInterner(capacity=1)
        seq = TimerSequence.build(
            [ImportEntry("a.wav", 1), ImportEntry("b.wav", 2), ImportEntry("a.wav", 3)], store
        )
        assert [e.sound_handle for e in seq] == [0, None, 0]
        assert seq[1].time_delay == timedelta(seconds=2)

    def test_empty(self):
        seq = TimerSequence.build([], StringInterner())
        assert len(seq) == 0
        assert list(seq) == []
        assert seq.total_delay == timedelta()

    def test_total_delay(self):
        entries = [ImportEntry("a.wav", 3), ImportEntry("b.wav", 0), ImportEntry("c.wav", 4)]
        assert TimerSequence.build(entries, StringInterner()).total_delay == timedelta(seconds=7)

    def test_accepts_generator(self):
        seq = TimerSequence.build((ImportEntry(f"{i}.wav", i) for i in range(3)), StringInterner())
        assert len(seq) == 3

    def test_existing_interner_handles_continue(self):
        store = StringInterner()
        store.intern("x.wav")
        seq = TimerSequence.build([ImportEntry("y.wav", 1), ImportEntry("x.wav", 1)], store)
        assert [e.sound_handle for e in seq] == [1, 0]


class TestSequenceModel:

    def test_read_only(self):
        seq = TimerSequence([TimerEntry(0, timedelta(seconds=1))])
        with pytest.raises(TypeError):
            seq[0] = TimerEntry(1, timedelta(seconds=2))

    def test_slicing(self):
        seq = TimerSequence(TimerEntry(i, timedelta(seconds=i)) for i in range(4))
        assert [e.sound_handle for e in seq[1:3]] == [1, 2]

    def test_equality(self):
        a = TimerSequence([TimerEntry(None, timedelta(seconds=1))])
        b = TimerSequence([TimerEntry(None, timedelta(seconds=1))])
        assert a == b
        assert a != TimerSequence()
