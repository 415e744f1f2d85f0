"""advancepurge - Prune redundant locale, manual and documentation data."""

__version__ = "0.1.0"
