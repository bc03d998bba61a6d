"""Allow `python -m st3pbot`."""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
