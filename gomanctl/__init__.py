"""gomanctl — scaffold commands for goman-based Go CLI applications."""

__version__ = "0.1.0"
