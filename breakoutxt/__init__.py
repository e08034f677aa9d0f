"""Breakout arcade game with a splash screen, main menu and volume settings."""

__version__ = "0.1.0"