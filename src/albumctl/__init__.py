"""albumctl — album catalog validation toolkit."""

__version__ = "0.1.0"
