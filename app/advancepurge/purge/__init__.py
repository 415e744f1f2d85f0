"""Directory purge engine.

This module provides the category target table, the purge operator
and the result types reported for each category.
"""

from advancepurge.purge.models import CategoryReport, PurgeActionResult
from advancepurge.purge.operator import PurgeOperator, remove_tree
from advancepurge.purge.targets import PURGE_TARGETS, PurgeTarget, get_target

__all__ = [
    "PURGE_TARGETS",
    "CategoryReport",
    "PurgeActionResult",
    "PurgeOperator",
    "PurgeTarget",
    "get_target",
    "remove_tree",
]
