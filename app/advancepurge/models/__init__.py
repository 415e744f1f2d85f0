"""Data models for advancepurge.

This module exports the configuration model types.
"""

from advancepurge.models.config import Category, PurgeConfig, PurgeMode

__all__ = [
    "Category",
    "PurgeConfig",
    "PurgeMode",
]
