"""Per-request credentials for gateway HTTP calls.

Each outgoing request is given its own immutable credential object, which
yields exactly one auth header. Nothing is stored on the shared HTTP client.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Union

from ..exceptions import AuthenticationError

API_KEY_HEADER = "x-api-key"
AUTHORIZATION_HEADER = "Authorization"


@dataclass(frozen=True)
class ApiKeyCredentials:
    """Anonymous reads and user creation authenticate with the project API key."""

    api_key: str
    kind = "api-key"

    def headers(self) -> Dict[str, str]:
        return {API_KEY_HEADER: self.api_key}


@dataclass(frozen=True)
class BearerCredentials:
    """Authenticated writes carry the signed-in user's token."""

    token: str
    kind = "bearer"

    @classmethod
    def from_token(cls, token: Optional[str]) -> BearerCredentials:
        if not token or not token.strip():
            raise AuthenticationError("Authorization token is required for this operation")
        return cls(token=token.strip())

    def headers(self) -> Dict[str, str]:
        return {AUTHORIZATION_HEADER: f"Bearer {self.token}"}


Credentials = Union[ApiKeyCredentials, BearerCredentials]

