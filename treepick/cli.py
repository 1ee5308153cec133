#!/usr/bin/env python
"""Command-line interface for treepick."""

import sys

from .app import main

def run_cli():
    """Run the treepick command-line interface."""
    sys.exit(main())

if __name__ == "__main__":
    run_cli()
