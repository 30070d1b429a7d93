"""
Domain models and value objects.

Contains domain entities: Transaction, WeightedValue, sentiment index readings.
"""

from streamline.core.domain.sentiment import (
    SENTIMENT_MAX,
    SENTIMENT_MIN,
    SentimentClassification,
    SentimentIndexResponse,
    SentimentMetadata,
    SentimentReading,
    classify_sentiment,
)
from streamline.core.domain.transaction import Transaction, average_price_by_symbol
from streamline.core.domain.weighted_value import WeightedValue

__all__ = [
    # Transaction model
    "Transaction",
    "average_price_by_symbol",
    # WeightedValue model
    "WeightedValue",
    # Sentiment models
    "SENTIMENT_MAX",
    "SENTIMENT_MIN",
    "SentimentClassification",
    "SentimentIndexResponse",
    "SentimentMetadata",
    "SentimentReading",
    "classify_sentiment",
]
