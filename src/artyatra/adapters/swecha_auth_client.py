"""Swecha Corpus auth API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from artyatra.domain.uploads import UpstreamResponse


class SwechaAuthClient(Protocol):
    """Interface for the external login, profile and signup endpoints."""

    async def login(self, phone: str, password: str) -> UpstreamResponse:
        """Exchange phone and password for a token."""

    async def me(self, authorization: str) -> UpstreamResponse:
        """Return the profile of the token's owner."""

    async def create_user(self, payload: dict[str, object]) -> UpstreamResponse:
        """Register a new user."""


@dataclass
class HttpxSwechaAuthClient(SwechaAuthClient):
    """Auth client using httpx."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 15.0

    @classmethod
    def create(cls, base_url: str, timeout: float = 15.0) -> "HttpxSwechaAuthClient":
        """Create an auth client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    async def login(self, phone: str, password: str) -> UpstreamResponse:
        """POST credentials to the login endpoint."""
        response = await self.http_client.post(
            f"{self.base_url}/auth/login",
            headers={"accept": "application/json"},
            json={"phone": phone, "password": password},
            timeout=self.timeout,
        )
        return _to_upstream(response)

    async def me(self, authorization: str) -> UpstreamResponse:
        """GET the current user's profile."""
        response = await self.http_client.get(
            f"{self.base_url}/auth/me",
            headers={"accept": "application/json", "Authorization": authorization},
            timeout=self.timeout,
        )
        return _to_upstream(response)

    async def create_user(self, payload: dict[str, object]) -> UpstreamResponse:
        """POST a signup payload to the users endpoint."""
        response = await self.http_client.post(
            f"{self.base_url}/users/",
            headers={"accept": "application/json"},
            json=payload,
            timeout=self.timeout,
        )
        return _to_upstream(response)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _to_upstream(response: httpx.Response) -> UpstreamResponse:
    headers = {}
    if "authorization" in response.headers:
        headers["authorization"] = response.headers["authorization"]
    return UpstreamResponse(
        status_code=response.status_code,
        content=response.content,
        content_type=response.headers.get("content-type", "application/json"),
        headers=headers,
    )
