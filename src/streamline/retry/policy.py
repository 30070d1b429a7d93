"""Retry policy - параметры bounded retry.

max_retries = N означает не более N+1 попыток всего.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Type


@dataclass(frozen=True)
class RetryPolicy:
    """Конфигурация bounded retry.

    - max_retries: число повторов после первой попытки (>= 0)
    - retry_on: классы исключений, после которых делается повтор
    - delay_sec / backoff: пауза после неудачной попытки k = delay_sec * backoff ** (k-1)
    - max_delay_sec: верхняя граница паузы (None - без ограничения)
    """
    max_retries: int = 3
    retry_on: Tuple[Type[BaseException], ...] = (ConnectionError,)
    delay_sec: float = 0.0
    backoff: float = 1.0
    max_delay_sec: Optional[float] = None

    def __post_init__(self):
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {self.max_retries}")
        if not self.retry_on:
            raise ValueError("retry_on must name at least one exception class")
        if self.delay_sec < 0:
            raise ValueError(f"delay_sec must be >= 0, got {self.delay_sec}")
        if self.backoff < 1.0:
            raise ValueError(f"backoff must be >= 1.0, got {self.backoff}")
        if self.max_delay_sec is not None and self.max_delay_sec < 0:
            raise ValueError(f"max_delay_sec must be >= 0, got {self.max_delay_sec}")

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1

    def delay_for(self, attempt: int) -> float:
        """Пауза после неудачной попытки `attempt` (1-based)."""
        if attempt < 1:
            raise ValueError(f"attempt must be >= 1, got {attempt}")
        delay = self.delay_sec * self.backoff ** (attempt - 1)
        if self.max_delay_sec is not None:
            delay = min(delay, self.max_delay_sec)
        return delay
