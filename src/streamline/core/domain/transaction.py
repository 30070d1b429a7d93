"""
Transaction - Модель исполненной сделки по инструменту

Immutable Pydantic модель: символ, цена за акцию, количество.
Используется как вход для group-then-aggregate расчётов
(средняя цена по символу, взвешенная по количеству).
"""

from typing import Dict, Iterable

from pydantic import BaseModel, Field, field_validator

from streamline.core.math.numerical_safeguards import is_valid_float
from streamline.core.math.weighted import group_weighted_average


# =============================================================================
# TRANSACTION MODEL
# =============================================================================


class Transaction(BaseModel):
    """
    Модель исполненной сделки.

    Immutable модель (frozen=True).
    """

    symbol: str = Field(..., min_length=1, description="Тикер (например, 'AAPL')")
    price_per_share: float = Field(..., gt=0, description="Цена за единицу")
    quantity: float = Field(..., gt=0, description="Количество")
    executed_at_utc_ms: int | None = Field(
        None, gt=0, description="Время исполнения (UTC, миллисекунды)"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("price_per_share", "quantity")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        """NaN/Inf запрещены"""
        if not is_valid_float(v):
            raise ValueError(f"value must be finite, got {v}")
        return v

    def notional(self) -> float:
        """
        Объём сделки в валюте котировки.

        Returns:
            price_per_share × quantity
        """
        return self.price_per_share * self.quantity


# =============================================================================
# AGGREGATES
# =============================================================================


def average_price_by_symbol(transactions: Iterable[Transaction]) -> Dict[str, float]:
    """
    Средняя цена по каждому символу, взвешенная по количеству.

    Args:
        transactions: Коллекция сделок

    Returns:
        dict: symbol → Σ(price × qty) / Σ qty
    """
    return group_weighted_average(
        transactions,
        key=lambda t: t.symbol,
        value=lambda t: t.price_per_share,
        weight=lambda t: t.quantity,
    )
