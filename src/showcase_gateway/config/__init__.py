"""Configuration helpers for the showcase gateway."""

from .base import ConfigurationError, ConfigValidationResult, SerializationError, ValidationError
from .gateway import DEVELOPMENT, PRODUCTION, GatewayConfig

__all__ = [
    "ConfigurationError",
    "ConfigValidationResult",
    "DEVELOPMENT",
    "GatewayConfig",
    "PRODUCTION",
    "SerializationError",
    "ValidationError",
]
