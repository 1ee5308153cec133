"""
Main entry point for treepick when run as a module.

This allows you to run the picker using:
    python -m treepick commands.json

It simply imports and runs the main function from cli.py.
"""

from .cli import run_cli

if __name__ == "__main__":
    run_cli()
