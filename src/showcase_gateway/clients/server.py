"""Application server endpoints used alongside the GraphQL API.

``/api/upload`` stores an image and answers with its hosted URL;
``/api/auth/token`` returns the session token. Both responses are returned
as parsed JSON without any shape checks.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .graphql import base_headers

logger = logging.getLogger(__name__)

UPLOAD_PATH = "/api/upload"
TOKEN_PATH = "/api/auth/token"


async def upload_image(client: httpx.AsyncClient, server_url: str, image_path: str) -> Any:
    """POST ``{"path": image_path}`` to the upload endpoint and return the parsed JSON.

    A successful response carries a ``url`` field; callers decide what a
    missing one means.
    """
    url = server_url.rstrip("/") + UPLOAD_PATH
    logger.debug("Uploading image via %s", url)
    response = await client.post(url, json={"path": image_path}, headers=base_headers())
    return response.json()


async def fetch_token(client: httpx.AsyncClient, server_url: str) -> Any:
    """GET the auth token endpoint and return the parsed JSON."""
    url = server_url.rstrip("/") + TOKEN_PATH
    logger.debug("Fetching token from %s", url)
    response = await client.get(url, headers=base_headers())
    return response.json()
