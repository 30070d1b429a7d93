"""
Tests for JSON Schema Contract Validators

- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей, типов и enum
"""

import copy

import pytest
from jsonschema import SchemaError, ValidationError

from streamline.core.contracts import (
    FearGreedResponseValidator,
    SchemaLoader,
    validate_fear_greed_response,
    validators,
)


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_response():
    return {
        "name": "Fear and Greed Index",
        "data": [
            {
                "value": "40",
                "value_classification": "Fear",
                "timestamp": "1551157200",
                "time_until_update": "68499",
            }
        ],
        "metadata": {"error": None},
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    def test_load_schema(self):
        schema = SchemaLoader().load_schema("fear_greed_response")
        assert schema["title"] == "Fear and Greed Index response"

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("fear_greed_response") is loader.load_schema("fear_greed_response")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema_rejected(self, tmp_path):
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema") as exc_info:
            SchemaLoader(tmp_path).load_schema("broken")
        assert isinstance(exc_info.value.__cause__, SchemaError)


# =============================================================================
# FEAR & GREED RESPONSE
# =============================================================================


class TestFearGreedResponseContract:
    def test_valid(self, valid_response):
        validate_fear_greed_response(valid_response)
        assert FearGreedResponseValidator().is_valid(valid_response)

    def test_module_validator_reused(self, monkeypatch, valid_response):
        constructed = []

        def counting_validator(*args, **kwargs):
            constructed.append(args)
            raise AssertionError("validator must not be rebuilt per call")

        monkeypatch.setattr(validators, "Draft202012Validator", counting_validator)

        validate_fear_greed_response(valid_response)
        validate_fear_greed_response(valid_response)

        assert constructed == []

    def test_integer_values_accepted(self, valid_response):
        valid_response["data"][0].update({"value": 40, "timestamp": 1551157200})
        validate_fear_greed_response(valid_response)

    def test_empty_data_accepted(self, valid_response):
        valid_response["data"] = []
        validate_fear_greed_response(valid_response)

    def test_error_string_accepted(self, valid_response):
        valid_response["metadata"]["error"] = "Rate limit exceeded"
        validate_fear_greed_response(valid_response)

    @pytest.mark.parametrize("field", ["name", "data", "metadata"])
    def test_missing_top_level_field(self, valid_response, field):
        del valid_response[field]
        with pytest.raises(ValidationError):
            validate_fear_greed_response(valid_response)

    @pytest.mark.parametrize("field", ["value", "value_classification", "timestamp"])
    def test_missing_reading_field(self, valid_response, field):
        del valid_response["data"][0][field]
        with pytest.raises(ValidationError):
            validate_fear_greed_response(valid_response)

    @pytest.mark.parametrize("patch", [
        {"value": "forty"},
        {"value": 140},
        {"value_classification": "Panic"},
        {"timestamp": "2019-02-26"},
        {"time_until_update": -5},
    ])
    def test_invalid_reading(self, valid_response, patch):
        invalid = copy.deepcopy(valid_response)
        invalid["data"][0].update(patch)
        assert not FearGreedResponseValidator().is_valid(invalid)

    def test_iter_errors_reports_all(self, valid_response):
        valid_response["data"][0]["value_classification"] = "Panic"
        del valid_response["name"]

        errors = list(FearGreedResponseValidator().iter_errors(valid_response))

        assert len(errors) == 2
