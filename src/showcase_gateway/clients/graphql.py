"""Stateless GraphQL request helper."""

from __future__ import annotations

import logging
from importlib import metadata
from typing import Any, Dict, Mapping, Optional

import httpx

from ..exceptions import GraphQLRequestError
from .auth import Credentials

logger = logging.getLogger(__name__)

try:
    _PACKAGE_VERSION = metadata.version("showcase-gateway")
except metadata.PackageNotFoundError:  # pragma: no cover - fallback when running from source tree
    _PACKAGE_VERSION = "0.0.0"

USER_AGENT = f"showcase-gateway/{_PACKAGE_VERSION}"


def base_headers() -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Accept": "application/json",
        "User-Agent": USER_AGENT,
    }


def request_headers(credentials: Credentials) -> Dict[str, str]:
    """Headers for one request: the base set plus exactly one auth header."""
    headers = base_headers()
    headers.update(credentials.headers())
    return headers


def normalize_variables(variables: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Copy the variables mapping, coercing a null ``category`` to an empty string."""
    normalized = dict(variables or {})
    if "category" in normalized and normalized["category"] is None:
        normalized["category"] = ""
    return normalized


async def execute_graphql_query(
    client: httpx.AsyncClient,
    graphql_url: str,
    *,
    query: str,
    variables: Optional[Mapping[str, Any]] = None,
    credentials: Credentials,
) -> Dict[str, Any]:
    """Execute a GraphQL operation and return its ``data`` payload.

    Transport failures raised by httpx propagate unchanged. An HTTP error
    status or a non-empty ``errors`` list raises GraphQLRequestError.
    """
    payload = {"query": query, "variables": normalize_variables(variables)}

    logger.debug("GraphQL → %s (%s credentials)", graphql_url, credentials.kind)
    response = await client.post(
        graphql_url,
        json=payload,
        headers=request_headers(credentials),
    )

    if response.is_error:
        logger.error("GraphQL request failed with status %s", response.status_code)
        logger.error("Response body: %s", response.text[:500])
        raise GraphQLRequestError(
            f"GraphQL HTTP {response.status_code}: {response.text[:200]}",
            status_code=response.status_code,
        )

    data = response.json()

    if not isinstance(data, dict):
        logger.error("GraphQL response is not a JSON object: %s", response.text[:500])
        raise GraphQLRequestError(
            f"GraphQL response is not a JSON object: {response.text[:200]}",
            status_code=response.status_code,
        )

    if data.get("errors"):
        logger.warning("GraphQL errors returned: %s", data["errors"])
        raise GraphQLRequestError(
            f"GraphQL query failed: {data['errors']}",
            status_code=response.status_code,
            errors=data["errors"],
        )

    return data.get("data") or {}
