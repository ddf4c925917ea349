"""Layout adaptation of canvas elements across canvas sizes."""

__version__ = "0.1.0"
