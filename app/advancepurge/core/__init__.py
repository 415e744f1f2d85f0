"""Core configuration, path and theme handling."""
