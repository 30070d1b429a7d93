"""
Fear & Greed Index Client

HTTP клиент индекса Fear & Greed (api.alternative.me).

Поток fetch():
1. GET {base_url}?limit=N&format=json через BoundedRetry
   (ConnectionError / Timeout → reconnect: пересоздание HTTP сессии)
2. HTTP статус, JSON декодирование, metadata.error
3. JSON Schema валидация сырого ответа (contracts)
4. Парсинг в SentimentIndexResponse (Pydantic)

Любая ошибка шагов 2-4 → SentimentApiError.
Исчерпание retry → последнее сетевое исключение без изменений.
"""

import time
from typing import Any, Callable, Dict, Optional

import requests
from jsonschema import ValidationError as SchemaValidationError
from loguru import logger
from pydantic import ValidationError

from streamline.config import AppConfig, RetrySettings, SentimentConfig
from streamline.core.contracts import validate_fear_greed_response
from streamline.core.domain.sentiment import SentimentIndexResponse, SentimentReading
from streamline.retry import BoundedRetry, RetryPolicy

# Сетевые ошибки, после которых имеет смысл reconnect + повтор
TRANSIENT_ERRORS = (
    requests.ConnectionError,
    requests.Timeout,
    ConnectionError,
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class SentimentApiError(RuntimeError):
    """Некорректный ответ API: HTTP статус, JSON, схема или metadata.error."""


# =============================================================================
# CLIENT
# =============================================================================


class FearGreedClient:
    """
    Клиент GET /fng/.

    Использование:
        with FearGreedClient() as client:
            reading = client.latest()
    """

    def __init__(
        self,
        config: Optional[SentimentConfig] = None,
        retry_policy: Optional[RetryPolicy] = None,
        session_factory: Callable[[], requests.Session] = requests.Session,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Args:
            config: параметры endpoint (default SentimentConfig())
            retry_policy: параметры retry (default RetrySettings() с TRANSIENT_ERRORS)
            session_factory: фабрика HTTP сессий (вызывается при создании и reconnect)
            sleep: функция паузы между попытками
        """
        self.config = config or SentimentConfig()
        self._session_factory = session_factory
        self._session = self._new_session()
        self._retry = BoundedRetry(
            retry_policy or RetrySettings().to_policy(TRANSIENT_ERRORS),
            sleep=sleep,
            name="fng_fetch",
        )

    @classmethod
    def from_app_config(cls, app_config: AppConfig, **kwargs) -> "FearGreedClient":
        return cls(
            config=app_config.sentiment,
            retry_policy=app_config.retry.to_policy(TRANSIENT_ERRORS),
            **kwargs,
        )

    # -------------------------------------------------------------------------
    # session lifecycle
    # -------------------------------------------------------------------------

    def _new_session(self) -> requests.Session:
        session = self._session_factory()
        session.headers.update({"User-Agent": self.config.user_agent, "Accept": "application/json"})
        return session

    def reconnect(self) -> None:
        """Закрыть текущую сессию и открыть новую."""
        logger.info("Reconnecting to {}", self.config.base_url)
        self._session.close()
        self._session = self._new_session()

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "FearGreedClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # API
    # -------------------------------------------------------------------------

    def fetch(self, limit: Optional[int] = None) -> SentimentIndexResponse:
        """
        Загрузка значений индекса.

        Args:
            limit: Количество значений (0 - вся история; default config.default_limit)

        Returns:
            SentimentIndexResponse

        Raises:
            ValueError: Если limit < 0
            SentimentApiError: Некорректный ответ API
            requests.ConnectionError / requests.Timeout: retry исчерпан
        """
        if limit is None:
            limit = self.config.default_limit
        if limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")

        params = {"limit": limit, "format": "json"}

        def request() -> requests.Response:
            return self._session.get(
                self.config.base_url, params=params, timeout=self.config.timeout_sec
            )

        response = self._retry.run(request, recovery=self.reconnect)
        payload = self._decode(response)
        parsed = self._parse(payload)

        logger.debug("Fetched {} sentiment reading(s)", len(parsed.data))
        return parsed

    def latest(self) -> SentimentReading:
        """
        Самое свежее значение индекса.

        Raises:
            SentimentApiError: Если API вернул пустой data
        """
        reading = self.fetch(limit=1).latest()
        if reading is None:
            raise SentimentApiError("API returned no readings")
        return reading

    # -------------------------------------------------------------------------
    # response handling
    # -------------------------------------------------------------------------

    @staticmethod
    def _decode(response: requests.Response) -> Dict[str, Any]:
        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise SentimentApiError(f"HTTP {response.status_code} from sentiment API") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise SentimentApiError("Sentiment API returned invalid JSON") from e

        if not isinstance(payload, dict):
            raise SentimentApiError(
                f"Sentiment API returned {type(payload).__name__}, expected object"
            )

        metadata = payload.get("metadata")
        if isinstance(metadata, dict) and metadata.get("error") is not None:
            raise SentimentApiError(f"Sentiment API error: {metadata['error']}")

        return payload

    @staticmethod
    def _parse(payload: Dict[str, Any]) -> SentimentIndexResponse:
        try:
            validate_fear_greed_response(payload)
        except SchemaValidationError as e:
            raise SentimentApiError(f"Response violates schema: {e.message}") from e

        try:
            return SentimentIndexResponse.model_validate(payload)
        except ValidationError as e:
            raise SentimentApiError(f"Response cannot be parsed: {e}") from e
