"""Feature structures, lexicons, registries and CCG building blocks."""

__version__ = "0.1.0"