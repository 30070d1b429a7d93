"""
Numerical Safeguards - Safe Math Primitives

Модуль обеспечивает численную устойчивость агрегатов:
- Проверка конечности значений (NaN/Inf не пропагируют)
- Безопасное деление с явным fallback
- Epsilon-сравнения float
- Валидация входов (positive / non-negative / range)

ИНВАРИАНТЫ:
1. NaN/Inf на входе валидаторов → ValueError
2. Float сравнения учитывают машинную точность
3. Decimal поддерживается наравне с float (math.isfinite принимает Decimal)
"""

import math
from decimal import Decimal
from typing import Final, Union

Number = Union[int, float, Decimal]

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для общих вычислений
EPS_CALC: Final[float] = 1e-12

# Относительная толерантность для is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для is_close / is_zero
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: Number) -> bool:
    """
    Проверка, является ли значение конечным числом (не NaN, не Inf).

    Args:
        value: Проверяемое значение (int, float или Decimal)

    Returns:
        True если значение finite
    """
    return math.isfinite(value)


# =============================================================================
# БЕЗОПАСНОЕ ДЕЛЕНИЕ
# =============================================================================


def safe_divide(numerator: Number, denominator: Number, fallback: Number = 0.0) -> Number:
    """
    Деление с fallback при нулевом или невалидном знаменателе.

    Args:
        numerator: Числитель
        denominator: Знаменатель
        fallback: Значение при делении на ноль или NaN/Inf (default: 0.0)

    Returns:
        numerator / denominator или fallback

    Examples:
        >>> safe_divide(10.0, 2.0)
        5.0
        >>> safe_divide(10.0, 0.0)
        0.0
        >>> safe_divide(1.0, float('nan'), fallback=-1.0)
        -1.0
    """
    if not is_valid_float(numerator) or not is_valid_float(denominator):
        return fallback
    if denominator == 0:
        return fallback

    result = numerator / denominator
    if not is_valid_float(result):
        return fallback
    return result


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_zero(value: Number, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """Проверка, близко ли значение к нулю (abs(value) <= tol)."""
    return abs(value) <= tol


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_finite(value: Number, name: str) -> None:
    """
    Валидация, что значение конечное.

    Raises:
        ValueError: Если value NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid number (not NaN/Inf), got {value}")


def validate_positive(value: Number, name: str) -> None:
    """
    Валидация, что значение строго положительное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    validate_finite(value, name)

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_non_negative(value: Number, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    validate_finite(value, name)

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_in_range(
    value: Number,
    name: str,
    min_value: Number | None = None,
    max_value: Number | None = None,
) -> None:
    """
    Валидация, что значение в заданном диапазоне (границы включены).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Raises:
        ValueError: Если value вне диапазона или NaN/Inf
    """
    validate_finite(value, name)

    if min_value is not None and value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")
