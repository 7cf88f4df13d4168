"""citectl — traffic citation evaluation CLI utility."""

__version__ = "0.1.0"
