"""
Weighted Average - взвешенное среднее и group-then-aggregate

Формула:
    weighted_average = Σ value(x) × weight(x) / Σ weight(x)

ИНВАРИАНТЫ:
1. Σ weight == 0 (в т.ч. пустая коллекция) → WeightedAverageUndefined
2. NaN/Inf в value или weight → ValueError
3. Отрицательный weight → ValueError
4. Decimal на входе → Decimal на выходе (без потери точности через float)

Пример:
    records = [("A", 10, 2), ("A", 20, 2), ("B", 5, 1)]
    group_weighted_average(records, key=itemgetter(0),
                           value=itemgetter(1), weight=itemgetter(2))
    → {"A": 15.0, "B": 5.0}
"""

from typing import Callable, Dict, Hashable, Iterable, TypeVar

from streamline.core.functional.grouping import aggregate_by
from streamline.core.math.numerical_safeguards import (
    Number,
    validate_finite,
    validate_non_negative,
)

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class WeightedAverageUndefined(ArithmeticError):
    """
    Взвешенное среднее не определено: суммарный вес равен нулю.

    Возникает для пустой коллекции и для коллекции, где все веса нулевые.
    """


# =============================================================================
# WEIGHTED AVERAGE
# =============================================================================


def weighted_average(
    items: Iterable[T],
    value: Callable[[T], Number],
    weight: Callable[[T], Number],
) -> Number:
    """
    Взвешенное среднее по коллекции с двумя accessor-функциями.

    Args:
        items: Коллекция (проходится один раз)
        value: Accessor значения
        weight: Accessor веса (>= 0)

    Returns:
        Σ value × weight / Σ weight

    Raises:
        WeightedAverageUndefined: Если Σ weight == 0
        ValueError: Если value/weight NaN/Inf или weight < 0

    Examples:
        >>> weighted_average([(10, 2), (20, 2)], value=lambda p: p[0], weight=lambda p: p[1])
        15.0
    """
    weighted_sum: Number = 0
    total_weight: Number = 0
    count = 0

    for item in items:
        v = value(item)
        w = weight(item)
        validate_finite(v, "value")
        validate_non_negative(w, "weight")

        weighted_sum += v * w
        total_weight += w
        count += 1

    if total_weight == 0:
        raise WeightedAverageUndefined(
            f"weighted average is undefined: total weight is zero over {count} item(s)"
        )

    return weighted_sum / total_weight


def weighted_average_of(weighted_values: Iterable) -> Number:
    """
    Взвешенное среднее по объектам с атрибутами `value` и `weight`
    (например, WeightedValue).
    """
    return weighted_average(
        weighted_values,
        value=lambda wv: wv.value,
        weight=lambda wv: wv.weight,
    )


def group_weighted_average(
    records: Iterable[T],
    key: Callable[[T], K],
    value: Callable[[T], Number],
    weight: Callable[[T], Number],
) -> Dict[K, Number]:
    """
    Group-then-aggregate: взвешенное среднее по каждой группе.

    Args:
        records: Входная коллекция
        key: Функция извлечения ключа группы
        value: Accessor значения
        weight: Accessor веса

    Returns:
        dict: ключ → взвешенное среднее группы (одна запись на ключ)

    Raises:
        WeightedAverageUndefined: Если в какой-либо группе Σ weight == 0
    """
    return aggregate_by(
        records,
        key=key,
        reducer=lambda group: weighted_average(group, value=value, weight=weight),
    )
