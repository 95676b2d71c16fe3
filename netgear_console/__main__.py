"""
Main entry point for the netgear_console package.

Allows running the CLI as: python -m netgear_console
"""

import sys

from netgear_console.cli import main

if __name__ == "__main__":
    sys.exit(main())
