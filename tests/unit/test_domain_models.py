"""
Tests for Domain Models

Покрывает:
- Transaction: валидация, immutability, notional, средняя цена по символу
- WeightedValue: валидация
- Sentiment: классификация, приведение строк API к int, latest()
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from streamline.core.domain import (
    SentimentClassification,
    SentimentIndexResponse,
    SentimentReading,
    Transaction,
    WeightedValue,
    average_price_by_symbol,
    classify_sentiment,
)
from streamline.core.math import WeightedAverageUndefined


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def transactions():
    return [
        Transaction(symbol="AAPL", price_per_share=10.0, quantity=2),
        Transaction(symbol="AAPL", price_per_share=20.0, quantity=2),
        Transaction(symbol="MSFT", price_per_share=5.0, quantity=1),
    ]


@pytest.fixture
def api_payload():
    """Ответ API в том виде, в каком он приходит (числа строками)."""
    return {
        "name": "Fear and Greed Index",
        "data": [
            {
                "value": "40",
                "value_classification": "Fear",
                "timestamp": "1551157200",
                "time_until_update": "68499",
            },
            {
                "value": "47",
                "value_classification": "Neutral",
                "timestamp": "1551070800",
            },
        ],
        "metadata": {"error": None},
    }


# =============================================================================
# TRANSACTION
# =============================================================================


class TestTransaction:
    def test_create(self):
        tx = Transaction(symbol="AAPL", price_per_share=150.5, quantity=3)
        assert tx.notional() == pytest.approx(451.5)
        assert tx.executed_at_utc_ms is None

    def test_frozen(self):
        tx = Transaction(symbol="AAPL", price_per_share=1.0, quantity=1.0)
        with pytest.raises(ValidationError):
            tx.quantity = 2.0

    @pytest.mark.parametrize("field,value", [
        ("symbol", ""),
        ("price_per_share", 0.0),
        ("price_per_share", float("inf")),
        ("quantity", -1.0),
        ("quantity", float("nan")),
    ])
    def test_invalid_fields(self, field, value):
        data = {"symbol": "AAPL", "price_per_share": 1.0, "quantity": 1.0}
        data[field] = value
        with pytest.raises(ValidationError):
            Transaction(**data)

    def test_average_price_by_symbol(self, transactions):
        assert average_price_by_symbol(transactions) == {"AAPL": 15.0, "MSFT": 5.0}

    def test_average_price_empty(self):
        assert average_price_by_symbol([]) == {}


# =============================================================================
# WEIGHTED VALUE
# =============================================================================


class TestWeightedValue:
    def test_create(self):
        wv = WeightedValue(value=-3.0, weight=2.0)
        assert wv.weighted() == -6.0

    def test_negative_weight_rejected(self):
        with pytest.raises(ValidationError):
            WeightedValue(value=1.0, weight=-0.5)

    def test_infinite_value_rejected(self):
        with pytest.raises(ValidationError):
            WeightedValue(value=float("inf"), weight=1.0)

    def test_zero_weights_have_no_average(self):
        from streamline.core.math import weighted_average_of

        with pytest.raises(WeightedAverageUndefined):
            weighted_average_of([WeightedValue(value=1.0, weight=0.0)])


# =============================================================================
# SENTIMENT
# =============================================================================


class TestClassifySentiment:
    @pytest.mark.parametrize("value,expected", [
        (0, SentimentClassification.EXTREME_FEAR),
        (24, SentimentClassification.EXTREME_FEAR),
        (25, SentimentClassification.FEAR),
        (46, SentimentClassification.FEAR),
        (47, SentimentClassification.NEUTRAL),
        (54, SentimentClassification.NEUTRAL),
        (55, SentimentClassification.GREED),
        (75, SentimentClassification.GREED),
        (76, SentimentClassification.EXTREME_GREED),
        (100, SentimentClassification.EXTREME_GREED),
    ])
    def test_bands(self, value, expected):
        assert classify_sentiment(value) is expected

    @pytest.mark.parametrize("value", [-1, 101])
    def test_out_of_range(self, value):
        with pytest.raises(ValueError):
            classify_sentiment(value)


class TestSentimentModels:
    def test_parse_api_strings(self, api_payload):
        response = SentimentIndexResponse.model_validate(api_payload)

        first = response.data[0]
        assert first.value == 40
        assert first.value_classification is SentimentClassification.FEAR
        assert first.timestamp == 1551157200
        assert first.time_until_update == 68499
        assert response.data[1].time_until_update is None
        assert response.metadata.error is None

    def test_latest_is_max_timestamp(self, api_payload):
        api_payload["data"].reverse()
        response = SentimentIndexResponse.model_validate(api_payload)

        assert response.latest().value == 40

    def test_latest_empty(self):
        response = SentimentIndexResponse(name="Fear and Greed Index")
        assert response.latest() is None

    def test_observed_and_next_update(self):
        reading = SentimentReading(
            value=40,
            value_classification="Fear",
            timestamp=1551157200,
            time_until_update=3600,
        )

        assert reading.observed_at() == datetime(2019, 2, 26, 5, 0, tzinfo=timezone.utc)
        assert reading.next_update_at() == datetime(2019, 2, 26, 6, 0, tzinfo=timezone.utc)

    def test_next_update_unknown(self):
        reading = SentimentReading(value=40, value_classification="Fear", timestamp=1551157200)
        assert reading.next_update_at() is None

    @pytest.mark.parametrize("value", ["-1", "101"])
    def test_value_out_of_range(self, value):
        with pytest.raises(ValidationError):
            SentimentReading(value=value, value_classification="Fear", timestamp=1)

    def test_unknown_classification(self):
        with pytest.raises(ValidationError):
            SentimentReading(value=40, value_classification="Panic", timestamp=1)
