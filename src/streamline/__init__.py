"""
streamline - declarative replacements for common imperative loops

- first-non-null selection over lazy sources
- bounded retry with a recovery action between attempts
- group-then-aggregate (weighted average per key)
- typed client for the Fear & Greed sentiment index
"""

__version__ = "0.1.0"

from streamline.core.functional import (
    NoValuePresent,
    aggregate_by,
    coalesce,
    first_non_null,
    first_non_null_or_raise,
    group_by,
)
from streamline.core.math import (
    WeightedAverageUndefined,
    group_weighted_average,
    weighted_average,
)
from streamline.retry import BoundedRetry, RetryPolicy, bounded_retry, retry_with_recovery

__all__ = [
    "__version__",
    # Selection
    "NoValuePresent",
    "coalesce",
    "first_non_null",
    "first_non_null_or_raise",
    # Grouping / aggregation
    "WeightedAverageUndefined",
    "aggregate_by",
    "group_by",
    "group_weighted_average",
    "weighted_average",
    # Retry
    "BoundedRetry",
    "RetryPolicy",
    "bounded_retry",
    "retry_with_recovery",
]
