"""Account balance transaction server."""

__version__ = "0.1.0"
