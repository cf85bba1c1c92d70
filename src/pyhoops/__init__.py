"""Fantasy basketball picks built from balldontlie box scores."""

__version__ = "0.1.0"
