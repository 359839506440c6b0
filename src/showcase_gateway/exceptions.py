"""Shared exception types for the showcase gateway."""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class GatewayError(RuntimeError):
    """Base exception for remote data gateway errors."""

    def __init__(self, message: str, *, error_code: str = "gateway_error") -> None:
        super().__init__(message)
        self.error_code = error_code


class GraphQLRequestError(GatewayError):
    """GraphQL endpoint answered with an HTTP error status or an ``errors`` list."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        super().__init__(message, error_code="GRAPHQL_REQUEST_FAILED")
        self.status_code = status_code
        self.errors = errors or []


class ImageUploadError(GatewayError):
    """Upload endpoint did not return a usable image URL."""

    def __init__(self, message: str = "Image upload failed", *, response: Any = None) -> None:
        super().__init__(message, error_code="IMAGE_UPLOAD_FAILED")
        self.response = response


class AuthenticationError(GatewayError):
    """A bearer token was required but missing or blank."""

    def __init__(self, message: str) -> None:
        super().__init__(message, error_code="AUTHENTICATION_REQUIRED")


class PayloadValidationError(GatewayError):
    """Caller-supplied data failed request payload validation."""

    def __init__(self, message: str, *, details: Optional[List[Dict[str, Any]]] = None) -> None:
        super().__init__(message, error_code="INVALID_PAYLOAD")
        self.details = details or []
