"""HTTP client helpers for the showcase gateway."""

from .auth import ApiKeyCredentials, BearerCredentials, Credentials
from .graphql import execute_graphql_query, normalize_variables
from .server import fetch_token, upload_image

__all__ = [
    "ApiKeyCredentials",
    "BearerCredentials",
    "Credentials",
    "execute_graphql_query",
    "fetch_token",
    "normalize_variables",
    "upload_image",
]
