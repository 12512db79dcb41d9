"""Main entry point for the MTG notation tool."""

import sys

from mtg_notation.cli import main

if __name__ == "__main__":
    sys.exit(main())
