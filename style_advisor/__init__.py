"""Outfit recommendation backend serving predefined catalog outfits."""

__version__ = "0.1.0"
