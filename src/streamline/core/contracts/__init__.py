"""
Contract Validation Module

Модуль для валидации JSON контрактов внешних API.
"""

from .validators import (
    ContractValidator,
    FearGreedResponseValidator,
    SchemaLoader,
    validate_fear_greed_response,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FearGreedResponseValidator",
    # Functions
    "validate_fear_greed_response",
]
