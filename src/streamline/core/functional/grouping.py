"""
Group-then-aggregate - разбиение коллекции по ключу и свёртка каждой группы.

Аналог Collectors.groupingBy(key, reducing(...)): результат - dict с одной
записью на каждый ключ, присутствующий во входных данных.
Порядок записей внутри группы совпадает с порядком входа.
Порядок между группами не гарантируется.
"""

from collections import defaultdict
from typing import Callable, Dict, Hashable, Iterable, List, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
R = TypeVar("R")


def group_by(records: Iterable[T], key: Callable[[T], K]) -> Dict[K, List[T]]:
    """
    Разбиение записей по ключу.

    Args:
        records: Входная коллекция (любой iterable, проходится один раз)
        key: Функция извлечения ключа

    Returns:
        dict: ключ → список записей (каждый список непустой)

    Examples:
        >>> group_by(["ab", "ac", "b"], key=lambda s: s[0])
        {'a': ['ab', 'ac'], 'b': ['b']}
    """
    groups: Dict[K, List[T]] = defaultdict(list)
    for record in records:
        groups[key(record)].append(record)
    return dict(groups)


def aggregate_by(
    records: Iterable[T],
    key: Callable[[T], K],
    reducer: Callable[[List[T]], R],
) -> Dict[K, R]:
    """
    group_by + свёртка каждой группы.

    Args:
        records: Входная коллекция
        key: Функция извлечения ключа
        reducer: Свёртка непустой группы в агрегат

    Returns:
        dict: ключ → агрегат

    Examples:
        >>> aggregate_by([1, 2, 3, 4], key=lambda n: n % 2, reducer=sum)
        {1: 4, 0: 6}
    """
    return {k: reducer(group) for k, group in group_by(records, key).items()}
