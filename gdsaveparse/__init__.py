"""Decode Grim Dawn character, stash and formula save files into JSON."""

__version__ = "0.1.0"