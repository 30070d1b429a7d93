"""
First-non-null selection - ленивый выбор первого присутствующего значения.

Декларативная замена цепочки `if x is None: x = ...` из императивного кода:
источники (zero-argument callables) вычисляются по порядку, не более одного
раза каждый, до первого результата, отличного от None.

ИНВАРИАНТЫ:
1. Если k-й источник первым вернул значение, вычислено ровно k источников
2. Falsy значения (0, "", False, []) считаются присутствующими
3. Исключение источника пропагирует без изменений и прерывает перебор
"""

from typing import Callable, Iterable, Optional, TypeVar

T = TypeVar("T")

Source = Callable[[], Optional[T]]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NoValuePresent(LookupError):
    """Ни один источник не вернул значение."""


# =============================================================================
# SELECTION
# =============================================================================


def _iter_present(sources: Iterable[Source]):
    for source in sources:
        value = source()
        if value is not None:
            yield value


def first_non_null(*sources: Source, default: Optional[T] = None) -> Optional[T]:
    """
    Первый результат источника, отличный от None.

    Args:
        *sources: Zero-argument callables, вычисляются лениво и по порядку
        default: Значение, если все источники вернули None (default: None)

    Returns:
        Первое присутствующее значение или default

    Examples:
        >>> first_non_null(lambda: None, lambda: "env", lambda: "file")
        'env'
        >>> first_non_null(lambda: None, default=42)
        42
    """
    return next(_iter_present(sources), default)


def first_non_null_or_raise(*sources: Source, message: Optional[str] = None) -> T:
    """
    Как first_non_null, но без default.

    Raises:
        NoValuePresent: Если ни один источник не вернул значение
    """
    for value in _iter_present(sources):
        return value
    raise NoValuePresent(message or f"none of {len(sources)} sources yielded a value")


def coalesce(*values: Optional[T], default: Optional[T] = None) -> Optional[T]:
    """
    Eager-вариант: первое значение, отличное от None, среди уже вычисленных.

    Examples:
        >>> coalesce(None, 0, 5)
        0
        >>> coalesce(None, None, default="x")
        'x'
    """
    return next((v for v in values if v is not None), default)
