"""Entry point for ``python -m sv``."""

import sys

from sv.cli import main

if __name__ == "__main__":
    sys.exit(main())
