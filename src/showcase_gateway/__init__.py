"""Async data-access gateway for the project showcase GraphQL API."""

from .config import GatewayConfig
from .exceptions import (
    AuthenticationError,
    GatewayError,
    GraphQLRequestError,
    ImageUploadError,
    PayloadValidationError,
)
from .models import ProjectForm
from .services import RemoteDataGateway

__all__ = [
    "AuthenticationError",
    "GatewayConfig",
    "GatewayError",
    "GraphQLRequestError",
    "ImageUploadError",
    "PayloadValidationError",
    "ProjectForm",
    "RemoteDataGateway",
]
