"""atomchess: Atomic Chess rules layered over python-chess."""

__version__ = "0.1.0"
