"""
Entry point for the playsplash package.

This allows running: python -m playsplash
"""

from .cli.main import cli

if __name__ == "__main__":
    cli()
