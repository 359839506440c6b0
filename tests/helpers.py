"""Shared test helpers: endpoint constants and an in-process fake API."""

from __future__ import annotations

import json
from typing import Any, Dict, List

import httpx

GRAPHQL_URL = "http://graphql.test/graphql"
SERVER_URL = "http://app.test"
API_KEY = "test-api-key"


class FakeShowcaseApi:
    """In-process stand-in for the GraphQL endpoint and the app server.

    Every request is recorded; responses can be replaced per test.
    """

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.graphql_status = 200
        self.graphql_response: Any = {"data": {"ok": True}}
        self.upload_response: Any = {"url": "https://cdn.test/uploaded.png"}
        self.token_response: Any = {"token": "session-token"}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path == "/graphql":
            return httpx.Response(self.graphql_status, json=self.graphql_response)
        if path == "/api/upload":
            return httpx.Response(200, json=self.upload_response)
        if path == "/api/auth/token":
            return httpx.Response(200, json=self.token_response)
        return httpx.Response(404, json={"error": f"no route for {path}"})

    def requests_to(self, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]

    @property
    def graphql_requests(self) -> List[httpx.Request]:
        return self.requests_to("/graphql")

    @property
    def upload_requests(self) -> List[httpx.Request]:
        return self.requests_to("/api/upload")

    @staticmethod
    def body(request: httpx.Request) -> Dict[str, Any]:
        return json.loads(request.content)
