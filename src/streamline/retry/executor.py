"""Bounded retry с recovery-действием между попытками.

Декларативная замена цикла вида:

    for i in range(MAX_RETRIES + 1):
        try:
            return repository.save(record)
        except ConnectionError:
            if i == MAX_RETRIES:
                raise
            repository.reconnect()

Семантика:
- успех → результат возвращается сразу
- исключение из policy.retry_on → warning в лог; если попытка не последняя,
  выполняется recovery() и пауза policy.delay_for(attempt)
- попытки исчерпаны → последнее исключение пробрасывается без изменений
- исключение вне retry_on → пробрасывается сразу, без recovery
- исключение внутри recovery() → пробрасывается, run прерывается
"""

import functools
import time
from dataclasses import dataclass, replace
from typing import Callable, List, Optional, Tuple, Type, TypeVar

from loguru import logger

from streamline.retry.policy import RetryPolicy

T = TypeVar("T")


@dataclass(frozen=True)
class RetryAttempt:
    """Неудачная попытка в истории последнего run."""

    attempt: int
    error: BaseException
    recovered: bool


class BoundedRetry:
    """Исполнитель bounded retry.

    Хранит историю неудачных попыток последнего вызова run() (last_attempts).
    Экземпляр не предназначен для одновременного использования из нескольких потоков.
    """

    def __init__(
        self,
        policy: Optional[RetryPolicy] = None,
        sleep: Callable[[float], None] = time.sleep,
        name: str = "operation",
    ):
        """
        Args:
            policy: параметры retry (default RetryPolicy())
            sleep: функция паузы (подменяется в тестах)
            name: имя операции для логов
        """
        self.policy = policy or RetryPolicy()
        self.name = name
        self._sleep = sleep
        self._attempts: List[RetryAttempt] = []

    @property
    def last_attempts(self) -> Tuple[RetryAttempt, ...]:
        return tuple(self._attempts)

    def run(self, operation: Callable[[], T], recovery: Optional[Callable[[], None]] = None) -> T:
        """Выполнить operation с не более чем policy.max_attempts попытками.

        Args:
            operation: zero-argument callable
            recovery: действие между попытками (например, reconnect)

        Returns:
            Результат первой успешной попытки

        Raises:
            Последнее исключение operation, если попытки исчерпаны,
            либо любое исключение вне policy.retry_on.
        """
        policy = self.policy
        self._attempts = []

        for attempt in range(1, policy.max_attempts + 1):
            try:
                return operation()
            except policy.retry_on as e:
                if attempt == policy.max_attempts:
                    self._attempts.append(RetryAttempt(attempt, e, recovered=False))
                    logger.error(
                        "{} failed after {} attempt(s): {!r}", self.name, attempt, e
                    )
                    raise

                logger.warning(
                    "{} attempt {}/{} failed: {!r}",
                    self.name, attempt, policy.max_attempts, e,
                )
                self._attempts.append(RetryAttempt(attempt, e, recovered=False))
                if recovery is not None:
                    recovery()
                    self._attempts[-1] = replace(self._attempts[-1], recovered=True)

                delay = policy.delay_for(attempt)
                if delay > 0:
                    self._sleep(delay)

        # max_attempts >= 1, цикл всегда завершается return или raise
        raise AssertionError("unreachable")


def retry_with_recovery(
    operation: Callable[[], T],
    recovery: Optional[Callable[[], None]] = None,
    max_retries: int = 3,
    retry_on: Tuple[Type[BaseException], ...] = (ConnectionError,),
    delay_sec: float = 0.0,
    backoff: float = 1.0,
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """Однократный bounded retry без явного создания BoundedRetry."""
    policy = RetryPolicy(
        max_retries=max_retries,
        retry_on=retry_on,
        delay_sec=delay_sec,
        backoff=backoff,
    )
    return BoundedRetry(policy, sleep=sleep).run(operation, recovery)


def bounded_retry(
    policy: Optional[RetryPolicy] = None,
    recovery: Optional[Callable[[], None]] = None,
    sleep: Callable[[float], None] = time.sleep,
):
    """Декоратор: каждый вызов функции выполняется через BoundedRetry."""

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            executor = BoundedRetry(policy, sleep=sleep, name=func.__qualname__)
            return executor.run(lambda: func(*args, **kwargs), recovery)

        return wrapper

    return decorator
