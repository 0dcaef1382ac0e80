"""binctl — convert text to and from strings of binary digits."""

__version__ = "0.1.0"
