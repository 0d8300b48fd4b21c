"""User settings with JSON persistence.

Settings are stored at:
    ~/.config/mtimer/settings.json

Usage::

    settings = load_settings()
    settings.volume = 70
    save_settings(settings)
"""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict, fields
from pathlib import Path

from .utils import get_logger

logger = get_logger(__name__)

CONFIG_DIR = Path.home() / ".config" / "mtimer"
SETTINGS_PATH = CONFIG_DIR / "settings.json"
DATA_DIR = Path.home() / ".local" / "share" / "mtimer"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── audio ─────────────────────────────────────────────────────────
    volume: int = 50                       # 0-100
    sounds_dir: str = str(DATA_DIR / "sound")

    # ── plans ─────────────────────────────────────────────────────────
    plans_dir: str = str(DATA_DIR / "plans")

    # ── basic timer ───────────────────────────────────────────────────
    countdown: bool = False

    @property
    def gain(self) -> float:
        """``volume`` clamped to 0-100 and scaled to 0.0-1.0."""
        return max(0, min(self.volume, 100)) / 100.0

    @property
    def sounds_path(self) -> Path:
        return Path(self.sounds_dir).expanduser()

    @property
    def plans_path(self) -> Path:
        return Path(self.plans_dir).expanduser()


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults."""
    try:
        if SETTINGS_PATH.exists():
            data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
            # Only use keys that exist in the dataclass
            valid_keys = {f.name for f in fields(Settings)}
            filtered = {k: v for k, v in data.items() if k in valid_keys}
            return Settings(**filtered)
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", SETTINGS_PATH, exc)
    return Settings()


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
