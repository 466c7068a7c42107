"""Monthly travel-expense calculator."""

__version__ = "0.1.0"
