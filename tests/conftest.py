"""Shared pytest fixtures for mtimer tests."""

import sys
import pytest

from PyQt6.QtCore import QCoreApplication

from mtimer.settings import Settings
from mtimer.timer.engine import TimerEngine

from helpers import FakeClock


@pytest.fixture(scope="session")
def qapp():
    """A single QCoreApplication instance shared across the entire test run."""
    app = QCoreApplication.instance() or QCoreApplication(sys.argv)
    yield app


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def engine(qapp, fake_clock):
    """TimerEngine driven by a fake clock (no real sleeping)."""
    return TimerEngine(parent=None, clock=fake_clock.clock, sleep=fake_clock.sleep)


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at empty sound and plan folders under tmp_path."""
    sounds = tmp_path / "sound"
    plans = tmp_path / "plans"
    sounds.mkdir()
    plans.mkdir()
    return Settings(volume=50, sounds_dir=str(sounds), plans_dir=str(plans))
