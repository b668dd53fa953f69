"""Entry point for running tsurch as a module: python -m tsurch."""

import sys

from tsurch.cli import main

if __name__ == "__main__":
    sys.exit(main())
