"""Gateway configuration implementation.

This module provides GatewayConfig, the single configuration object the
RemoteDataGateway is constructed with. It handles:
- Environment selection (production vs. local development)
- GraphQL endpoint URL and API key
- Application server URL used by the upload and token endpoints
- Request timeout

Configuration is assembled once at process start and passed into the
gateway. Nothing reads the environment after that.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional
from urllib.parse import urlparse

from .base import Configuration, ConfigValidationResult, SerializationError

logger = logging.getLogger(__name__)

PRODUCTION = "production"
DEVELOPMENT = "development"

DEFAULT_GRAPHQL_URL = "http://127.0.0.1:4000/graphql"
DEFAULT_API_KEY = "letmein"
DEFAULT_SERVER_URL = "http://localhost:3000"
DEFAULT_TIMEOUT = 30.0

ENV_ENVIRONMENT = "SHOWCASE_ENV"
ENV_NODE_ENVIRONMENT = "NODE_ENV"
ENV_GRAPHQL_URL = "SHOWCASE_GRAPHQL_API_URL"
ENV_API_KEY = "SHOWCASE_GRAPHQL_API_KEY"
ENV_SERVER_URL = "SHOWCASE_SERVER_URL"
ENV_TIMEOUT = "SHOWCASE_HTTP_TIMEOUT"


class GatewayConfig(Configuration):
    """Configuration for the remote data gateway.

    Example usage:
        # Local development defaults
        config = GatewayConfig()

        # From environment variables
        config = GatewayConfig.from_environment()

        config.validate_or_raise()
    """

    def __init__(
        self,
        environment: str = DEVELOPMENT,
        graphql_url: str = DEFAULT_GRAPHQL_URL,
        api_key: str = DEFAULT_API_KEY,
        server_url: str = DEFAULT_SERVER_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.environment = environment
        self.graphql_url = graphql_url
        self.api_key = api_key
        self.server_url = server_url.rstrip("/") if server_url else server_url
        self.timeout = timeout

    def validate(self) -> ConfigValidationResult:
        """Validate endpoint URLs, API key and timeout.

        Returns:
            ConfigValidationResult with validation status and detailed error messages
        """
        result = ConfigValidationResult.success_result()

        if self.environment not in (PRODUCTION, DEVELOPMENT):
            result.add_error(f"Environment must be '{PRODUCTION}' or '{DEVELOPMENT}', got '{self.environment}'")

        for error in self._validate_http_url("GraphQL URL", self.graphql_url, ENV_GRAPHQL_URL):
            result.add_error(error)
        for error in self._validate_http_url("Server URL", self.server_url, ENV_SERVER_URL):
            result.add_error(error)

        if not self.api_key or not self.api_key.strip():
            result.add_error(f"API key is required (set {ENV_API_KEY})")

        if self.timeout is None or self.timeout <= 0:
            result.add_error("Timeout must be a positive number of seconds")

        return result

    def _validate_http_url(self, label: str, url: Optional[str], env_name: str) -> list[str]:
        errors = []

        if not url or not url.strip():
            errors.append(f"{label} is required (set {env_name})")
            return errors

        if not (url.startswith("http://") or url.startswith("https://")):
            errors.append(f"{label} must start with 'http://' or 'https://' (got '{url}')")
            return errors

        if not urlparse(url).netloc:
            errors.append(f"{label} must specify a hostname (got '{url}')")

        return errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a dictionary with the API key masked."""
        return {
            "environment": self.environment,
            "graphql_url": self.graphql_url,
            "api_key": "***" if self.api_key else "",
            "server_url": self.server_url,
            "timeout": self.timeout,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> GatewayConfig:
        """Create GatewayConfig from dictionary data.

        Missing keys take the local development defaults.

        Raises:
            SerializationError: If data cannot be deserialized
        """
        try:
            return cls(
                environment=data.get("environment", DEVELOPMENT),
                graphql_url=data.get("graphql_url", DEFAULT_GRAPHQL_URL),
                api_key=data.get("api_key", DEFAULT_API_KEY),
                server_url=data.get("server_url", DEFAULT_SERVER_URL),
                timeout=float(data.get("timeout", DEFAULT_TIMEOUT)),
            )
        except (AttributeError, TypeError, ValueError) as e:
            raise SerializationError(f"Failed to deserialize GatewayConfig: {e}") from e

    @classmethod
    def from_environment(cls) -> GatewayConfig:
        """Create GatewayConfig from environment variables.

        SHOWCASE_ENV (or NODE_ENV) set to "production" selects the endpoint,
        API key and server URL from SHOWCASE_GRAPHQL_API_URL,
        SHOWCASE_GRAPHQL_API_KEY and SHOWCASE_SERVER_URL. Anything else uses
        the hard-coded local defaults.
        """
        environment = os.environ.get(ENV_ENVIRONMENT) or os.environ.get(ENV_NODE_ENVIRONMENT) or DEVELOPMENT
        environment = environment.strip().lower()
        timeout = _parse_timeout(os.environ.get(ENV_TIMEOUT))

        if environment == PRODUCTION:
            return cls(
                environment=PRODUCTION,
                graphql_url=os.environ.get(ENV_GRAPHQL_URL, ""),
                api_key=os.environ.get(ENV_API_KEY, ""),
                server_url=os.environ.get(ENV_SERVER_URL, ""),
                timeout=timeout,
            )

        return cls(environment=DEVELOPMENT, timeout=timeout)

    def __repr__(self) -> str:
        return (
            f"GatewayConfig(environment={self.environment!r}, graphql_url={self.graphql_url!r}, "
            f"server_url={self.server_url!r}, timeout={self.timeout!r})"
        )


def _parse_timeout(raw: Optional[str]) -> float:
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Invalid {ENV_TIMEOUT} '{raw}', using {DEFAULT_TIMEOUT}")
        return DEFAULT_TIMEOUT
