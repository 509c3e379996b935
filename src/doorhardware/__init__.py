"""Door hardware placement engine."""

__version__ = "0.1.0"
