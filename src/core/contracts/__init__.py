"""
Contract Validation Module

Модуль для валидации JSON контрактов квинтильного распределения.
"""

from .validators import (
    SCHEMA_DIR,
    DistributionValidator,
    SchemaLoader,
    default_schema_loader,
    validate_distribution,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    # Classes
    "SchemaLoader",
    "DistributionValidator",
    # Functions
    "default_schema_loader",
    "validate_distribution",
]
