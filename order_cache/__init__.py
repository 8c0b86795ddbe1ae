"""Order cache service: in-memory order lookups over HTTP."""

__version__ = "0.1.0"
