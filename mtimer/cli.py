"""Command line interface for mtimer.

Usage:
    mtimer time LENGTH [-v VOLUME] [-c]
        Play the start cue, wait LENGTH seconds, then play the end cue.
        With ``-c`` the last 10, 5 or 3 seconds are counted down.

    mtimer plan NAME [-v VOLUME]
        Run the timer plan ``<plans_dir>/NAME.txt``.

Exit status is 0 on success, 1 on any timer error and 130 when the run
is interrupted with Ctrl+C.
"""

from __future__ import annotations

import argparse
import logging
import os
import signal
import sys
from typing import Sequence

from .audio.output import QtAudioOutput
from .audio.sounds import SoundManager, ensure_default_sounds
from .errors import InvalidArgument, InvalidPath, TimerError
from .settings import Settings, load_settings
from .timer.engine import TimerEngine
from .timer.plan import ImportEntry, parse_file
from .timer.presets import basic_entries
from .timer.sequence import TimerSequence
from .utils import configure_logging, get_logger

logger: logging.Logger = get_logger("mtimer")

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_CANCELLED = 130

PLAN_SUFFIX = ".txt"
LOG_LEVEL_ENV = "MTIMER_LOG_LEVEL"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mtimer",
        description="Minimal timer: plays sound cues at timed offsets.",
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        type=str.upper,
        default=None,
        help=f"Logging level (default: ${LOG_LEVEL_ENV} or WARNING)",
    )
    subcommands = parser.add_subparsers(dest="command", required=True)

    basic = subcommands.add_parser(
        "time", help="Create a timer of given length, volume and countdown"
    )
    basic.add_argument("length", type=int, help="length of the timer in seconds")
    basic.add_argument(
        "-v", "--volume", type=int, default=None,
        help="volume of the sounds, from 0 to 100 (default: from settings)",
    )
    basic.add_argument(
        "-c", "--countdown", action="store_true", default=None,
        help="count down the last seconds (by default, sound played at end only)",
    )

    plan = subcommands.add_parser("plan", help="Run a timer from a .txt timer plan")
    plan.add_argument("name", help="name of the timer plan (no .txt needed)")
    plan.add_argument(
        "-v", "--volume", type=int, default=None,
        help="volume of the sounds, from 0 to 100 (default: from settings)",
    )
    return parser


# ── runners ───────────────────────────────────────────────────────────────


def _gain(volume: int | None, settings: Settings) -> float:
    """Convert a 0-100 volume to a 0.0-1.0 gain."""
    if volume is None:
        return settings.gain
    if not 0 <= volume <= 100:
        raise InvalidArgument("volume")
    return volume / 100.0


def _open_output() -> QtAudioOutput:
    output = QtAudioOutput()
    output.open()
    return output


def run_entries(entries: Sequence[ImportEntry], gain: float, settings: Settings) -> bool:
    """Build a sequence from *entries* and run it through the audio output.

    Returns ``False`` if the run was cancelled with SIGINT.
    """
    ensure_default_sounds(settings.sounds_path)
    output = _open_output()
    sound_mgr = SoundManager(output, sounds_dir=settings.sounds_path, volume=gain)
    sequence = TimerSequence.build(entries, sound_mgr)
    engine = TimerEngine(sleep=output.sleep)

    logger.info(
        "Running %d entries (%.0f s) at gain %.2f",
        len(sequence), sequence.total_delay.total_seconds(), gain,
    )
    previous = signal.signal(signal.SIGINT, lambda _signum, _frame: engine.cancel())
    try:
        return engine.run(sequence, sound_mgr)
    finally:
        signal.signal(signal.SIGINT, previous)


def run_timer_basic(
    length: int, volume: int | None, countdown: bool | None, settings: Settings
) -> bool:
    if length < 0:
        raise InvalidArgument("length")
    gain = _gain(volume, settings)
    if countdown is None:
        countdown = settings.countdown
    return run_entries(basic_entries(length, countdown), gain, settings)


def run_timer_plan(name: str, volume: int | None, settings: Settings) -> bool:
    gain = _gain(volume, settings)
    plans_dir = settings.plans_path
    if not plans_dir.is_dir():
        raise InvalidPath(str(plans_dir))
    filename = name if name.endswith(PLAN_SUFFIX) else f"{name}{PLAN_SUFFIX}"
    entries = parse_file(plans_dir / filename)
    return run_entries(entries, gain, settings)


def run_cli(args: argparse.Namespace, settings: Settings) -> bool:
    """Dispatch to the runner for ``args.command``."""
    if args.command == "time":
        return run_timer_basic(args.length, args.volume, args.countdown, settings)
    return run_timer_plan(args.name, args.volume, settings)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level or os.environ.get(LOG_LEVEL_ENV) or "WARNING")

    try:
        completed = run_cli(args, load_settings())
    except TimerError as exc:
        logger.debug("Timer failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    if not completed:
        print("Timer cancelled.", file=sys.stderr)
        return EXIT_CANCELLED
    return EXIT_OK
