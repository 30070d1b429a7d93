"""
Sentiment - Модели индекса Fear & Greed

Источник: GET https://api.alternative.me/fng/?limit=N

Формат ответа (числа приходят строками):
    {
      "name": "Fear and Greed Index",
      "data": [
        {"value": "40", "value_classification": "Fear",
         "timestamp": "1551157200", "time_until_update": "68499"}
      ],
      "metadata": {"error": null}
    }

time_until_update присутствует только у самой свежей записи.
Строки приводятся к int в lax-режиме Pydantic.
"""

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Final, List, Optional

from pydantic import BaseModel, Field

from streamline.core.math.numerical_safeguards import validate_in_range


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

SENTIMENT_MIN: Final[int] = 0
SENTIMENT_MAX: Final[int] = 100

# Верхние границы (включительно) диапазонов классификации
EXTREME_FEAR_MAX: Final[int] = 24
FEAR_MAX: Final[int] = 46
NEUTRAL_MAX: Final[int] = 54
GREED_MAX: Final[int] = 75


# =============================================================================
# ENUMS
# =============================================================================


class SentimentClassification(str, Enum):
    """Классификация значения индекса (строки совпадают с API)"""

    EXTREME_FEAR = "Extreme Fear"
    FEAR = "Fear"
    NEUTRAL = "Neutral"
    GREED = "Greed"
    EXTREME_GREED = "Extreme Greed"


def classify_sentiment(value: int) -> SentimentClassification:
    """
    Классификация значения индекса по диапазонам.

    0-24 Extreme Fear, 25-46 Fear, 47-54 Neutral, 55-75 Greed, 76-100 Extreme Greed.

    Raises:
        ValueError: Если value вне [0, 100]
    """
    validate_in_range(value, "value", SENTIMENT_MIN, SENTIMENT_MAX)

    if value <= EXTREME_FEAR_MAX:
        return SentimentClassification.EXTREME_FEAR
    if value <= FEAR_MAX:
        return SentimentClassification.FEAR
    if value <= NEUTRAL_MAX:
        return SentimentClassification.NEUTRAL
    if value <= GREED_MAX:
        return SentimentClassification.GREED
    return SentimentClassification.EXTREME_GREED


# =============================================================================
# MODELS
# =============================================================================


class SentimentReading(BaseModel):
    """
    Одно значение индекса.

    Immutable модель (frozen=True).
    """

    value: int = Field(..., ge=SENTIMENT_MIN, le=SENTIMENT_MAX, description="Значение индекса")
    value_classification: SentimentClassification = Field(..., description="Классификация")
    timestamp: int = Field(..., gt=0, description="Время значения (unix, секунды)")
    time_until_update: Optional[int] = Field(
        None, ge=0, description="Секунд до следующего обновления (только у свежей записи)"
    )

    model_config = {"frozen": True}

    def observed_at(self) -> datetime:
        """Время значения как aware UTC datetime."""
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)

    def next_update_at(self) -> Optional[datetime]:
        """
        Ожидаемое время следующего обновления.

        Returns:
            observed_at + time_until_update, или None если поле отсутствует
        """
        if self.time_until_update is None:
            return None
        return self.observed_at() + timedelta(seconds=self.time_until_update)


class SentimentMetadata(BaseModel):
    """Метаданные ответа API."""

    error: Optional[str] = Field(None, description="Сообщение об ошибке API (null при успехе)")

    model_config = {"frozen": True}


class SentimentIndexResponse(BaseModel):
    """
    Полный ответ API индекса.

    Immutable модель (frozen=True).
    """

    name: str = Field(..., min_length=1, description="Название индекса")
    data: List[SentimentReading] = Field(default_factory=list, description="Значения")
    metadata: SentimentMetadata = Field(default_factory=SentimentMetadata)

    model_config = {"frozen": True}

    def latest(self) -> Optional[SentimentReading]:
        """Самое свежее значение (максимальный timestamp) или None."""
        return max(self.data, key=lambda r: r.timestamp, default=None)
