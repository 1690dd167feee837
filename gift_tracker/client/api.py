"""Async HTTP client for the Gift Tracker API."""

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """A request the server rejected, or one that never reached it."""

    def __init__(self, status_code: int | None, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self.status_code!r}, message={self.message!r})"


class ConnectionFailed(ApiError):
    """The server could not be reached."""

    def __init__(self, message: str):
        super().__init__(None, message)


@dataclass(frozen=True)
class UserProfile:
    """The authenticated user as returned by the server."""

    id: str
    email: str
    name: str
    created_at: str
    preferences: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "UserProfile":
        return cls(
            id=data["id"],
            email=data["email"],
            name=data["name"],
            created_at=data["createdAt"],
            preferences=data.get("preferences") or {},
        )


@dataclass(frozen=True)
class AuthPayload:
    token: str
    user: UserProfile


class ResourceClient:
    """CRUD calls for one collection, e.g. ``/api/people``."""

    def __init__(self, client: "GiftTrackerClient", path: str):
        self.client = client
        self.path = path

    async def list(self) -> list[dict[str, Any]]:
        return await self.client.request("GET", self.path)

    async def get(self, row_id: str) -> dict[str, Any]:
        return await self.client.request("GET", f"{self.path}/{row_id}")

    async def create(self, fields: dict[str, Any]) -> dict[str, Any]:
        return await self.client.request("POST", self.path, json=fields)

    async def update(self, row_id: str, fields: dict[str, Any]) -> dict[str, Any]:
        return await self.client.request("PUT", f"{self.path}/{row_id}", json=fields)

    async def delete(self, row_id: str) -> None:
        await self.client.request("DELETE", f"{self.path}/{row_id}")


class GiftTrackerClient:
    """Thin wrapper over ``httpx.AsyncClient`` that attaches the bearer token.

    ``token`` is owned by the session context; the client only reads it.
    """

    def __init__(
        self,
        base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._http = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)
        self.token: str | None = None

        self.people = ResourceClient(self, "/api/people")
        self.gifts = ResourceClient(self, "/api/gifts")
        self.occasions = ResourceClient(self, "/api/occasions")
        self.budgets = ResourceClient(self, "/api/budgets")

    async def __aenter__(self) -> "GiftTrackerClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def request(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
        authenticated: bool = True,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Raises:
            ConnectionFailed: transport-level failure.
            ApiError: any non-2xx response.
        """
        headers = {}
        if authenticated and self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        try:
            response = await self._http.request(method, path, json=json, headers=headers)
        except httpx.TransportError as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise ConnectionFailed(str(e) or type(e).__name__) from e

        if response.is_error:
            raise ApiError(response.status_code, _error_message(response))
        if response.status_code == httpx.codes.NO_CONTENT or not response.content:
            return None
        return response.json()

    async def register(self, name: str, email: str, password: str) -> AuthPayload:
        data = await self.request(
            "POST",
            "/api/auth/register",
            json={"name": name, "email": email, "password": password},
            authenticated=False,
        )
        return AuthPayload(token=data["token"], user=UserProfile.from_payload(data["user"]))

    async def login(self, email: str, password: str) -> AuthPayload:
        data = await self.request(
            "POST",
            "/api/auth/login",
            json={"email": email, "password": password},
            authenticated=False,
        )
        return AuthPayload(token=data["token"], user=UserProfile.from_payload(data["user"]))

    async def logout(self) -> None:
        await self.request("POST", "/api/auth/logout", authenticated=False)

    async def validate(self) -> UserProfile:
        return UserProfile.from_payload(await self.request("GET", "/api/user/validate"))

    async def me(self) -> UserProfile:
        return UserProfile.from_payload(await self.request("GET", "/api/auth/me"))

    async def update_profile(
        self, name: str | None = None, email: str | None = None
    ) -> UserProfile:
        fields = {
            key: value for key, value in (("name", name), ("email", email)) if value is not None
        }
        return UserProfile.from_payload(await self.request("PUT", "/api/profile", json=fields))

    async def update_preferences(self, **preferences: Any) -> UserProfile:
        return UserProfile.from_payload(
            await self.request("PUT", "/api/profile/preferences", json=preferences)
        )


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.reason_phrase or f"HTTP {response.status_code}"
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.reason_phrase or f"HTTP {response.status_code}"
