"""Allow running mtimer as a module: python -m mtimer."""

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
