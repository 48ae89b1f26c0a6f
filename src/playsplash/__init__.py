"""playsplash - play a splash video while starting Playnite."""

__version__ = "0.1.0"
