"""Catharsis: one word a day, one ticket per solved day."""

__version__ = "0.1.0"
