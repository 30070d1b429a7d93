"""Sentiment - клиент индекса Fear & Greed."""

from .client import TRANSIENT_ERRORS, FearGreedClient, SentimentApiError

__all__ = [
    "FearGreedClient",
    "SentimentApiError",
    "TRANSIENT_ERRORS",
]
