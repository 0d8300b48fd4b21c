"""Audio package."""

from .output import AudioOutput, QtAudioOutput
from .sounds import SoundManager, ensure_default_sounds, DEFAULT_SOUNDS

__all__ = [
    "AudioOutput",
    "QtAudioOutput",
    "SoundManager",
    "ensure_default_sounds",
    "DEFAULT_SOUNDS",
]
