"""Dungeon Archeology: a pygame game of digging crystals out of a cave beneath your laboratory."""

__version__ = "0.1.0"