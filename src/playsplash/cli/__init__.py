"""Command-line interface for playsplash."""
