#!/usr/bin/env python3
"""mtimer entry point.

Run with:
    python main.py time 30 -c
    python -m mtimer plan workout
"""

import sys

from mtimer.cli import main


if __name__ == "__main__":
    sys.exit(main())
