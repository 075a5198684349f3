"""Lines of Action rules engine."""

__version__ = "0.1.0"
