"""
Functional idioms - декларативные замены типовых императивных циклов.
"""

from streamline.core.functional.grouping import aggregate_by, group_by
from streamline.core.functional.selection import (
    NoValuePresent,
    coalesce,
    first_non_null,
    first_non_null_or_raise,
)

__all__ = [
    # Selection
    "NoValuePresent",
    "coalesce",
    "first_non_null",
    "first_non_null_or_raise",
    # Grouping
    "aggregate_by",
    "group_by",
]
