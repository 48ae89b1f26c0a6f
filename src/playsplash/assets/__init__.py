"""Bundled splash video."""
