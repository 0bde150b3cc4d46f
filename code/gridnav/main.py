"""
Main entry point for gridnav.

Usage: python -m gridnav.main [command] [options]
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
