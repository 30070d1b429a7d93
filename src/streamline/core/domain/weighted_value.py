"""
WeightedValue - пара (значение, вес) для взвешенных агрегатов.
"""

from pydantic import BaseModel, Field, field_validator

from streamline.core.math.numerical_safeguards import is_valid_float


class WeightedValue(BaseModel):
    """
    Значение с неотрицательным весом.

    Immutable модель (frozen=True).
    """

    value: float = Field(..., description="Значение")
    weight: float = Field(..., ge=0, description="Вес (>= 0)")

    model_config = {"frozen": True}

    @field_validator("value", "weight")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        """NaN/Inf запрещены"""
        if not is_valid_float(v):
            raise ValueError(f"value must be finite, got {v}")
        return v

    def weighted(self) -> float:
        """value × weight"""
        return self.value * self.weight
