"""mtimer: sequences timed audio cues from a duration or a timer plan."""

__version__ = "0.1.0"
