"""Balloon maze defense: a tower-defense game played on a randomly carved maze."""

__version__ = "0.1.0"