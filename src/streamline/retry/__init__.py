"""Retry - bounded retry с recovery-действием (reconnect) между попытками."""

from .executor import (
    BoundedRetry,
    RetryAttempt,
    bounded_retry,
    retry_with_recovery,
)
from .policy import RetryPolicy

__all__ = [
    "BoundedRetry",
    "RetryAttempt",
    "RetryPolicy",
    "bounded_retry",
    "retry_with_recovery",
]
