"""Quick Notes: a small local note store with a display bridge."""

__version__ = "0.1.0"
