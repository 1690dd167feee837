"""Client-side session: who is logged in, and with which token.

State machine::

    UNAUTHENTICATED --restore (token found)--> RESTORING
    RESTORING --validated--> AUTHENTICATED
    RESTORING --any failure--> UNAUTHENTICATED   (stored token cleared)
    UNAUTHENTICATED --login/register--> AUTHENTICATED   (token stored)
    AUTHENTICATED --logout--> UNAUTHENTICATED   (token and profile cleared)

A logout wins over any restore or credential submission still in flight:
their results are discarded when they arrive.

Every operation returns an AuthResult and records its error on the session.
There is no offline or mock identity: if the server cannot be reached the
caller gets a ConnectionFailed error.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum

from gift_tracker.client.api import (
    ApiError,
    AuthPayload,
    ConnectionFailed,
    GiftTrackerClient,
    UserProfile,
)
from gift_tracker.client.storage import TokenStore

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    RESTORING = "restoring"
    AUTHENTICATED = "authenticated"


class NotAuthenticated(Exception):
    """Resource access attempted without an authenticated session."""


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a session operation: a user, an error, or neither (no stored session)."""

    user: UserProfile | None = None
    error: ApiError | None = None

    @property
    def ok(self) -> bool:
        return self.user is not None and self.error is None


Listener = Callable[["SessionContext"], None]


class SessionContext:
    """Holds the current token and profile and mediates auth calls."""

    def __init__(self, client: GiftTrackerClient, store: TokenStore):
        self.client = client
        self.store = store
        self.state = SessionState.UNAUTHENTICATED
        self.user: UserProfile | None = None
        self.error: ApiError | None = None
        self._inflight: asyncio.Task | None = None
        self._listeners: list[Listener] = []
        # Bumped on every logout; results of calls started under an older value are stale
        self._generation = 0

    @property
    def is_authenticated(self) -> bool:
        return self.state is SessionState.AUTHENTICATED

    @property
    def token(self) -> str | None:
        return self.client.token

    @property
    def api(self) -> GiftTrackerClient:
        """The client, with the session token attached, for resource calls."""
        if not self.is_authenticated:
            raise NotAuthenticated("Log in before calling the resource API")
        return self.client

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` after every state change. Returns an unsubscribe function."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def clear_error(self) -> None:
        self.error = None
        self._notify()

    async def restore(self) -> AuthResult:
        """Resume a session from the token store, validating it with the server."""
        if self.is_authenticated:
            return AuthResult(user=self.user)

        token = self.store.load()
        if not token:
            return AuthResult()

        generation = self._generation
        self._transition(SessionState.RESTORING)
        self.client.token = token
        try:
            user = await self.client.validate()
        except ApiError as e:
            if self._superseded(generation):
                return AuthResult()
            if isinstance(e, ConnectionFailed):
                logger.warning(f"Could not validate stored session: {e.message}")
            else:
                logger.info(f"Stored session rejected ({e.status_code})")
            self._clear()
            self.error = e
            self._notify()
            return AuthResult(error=e)

        if self._superseded(generation):
            logger.debug("Session changed while restoring; discarding the result")
            return AuthResult()

        self._authenticated(token, user)
        return AuthResult(user=user)

    async def login(self, email: str, password: str) -> AuthResult:
        return await self._submit(self.client.login, email, password)

    async def register(self, name: str, email: str, password: str) -> AuthResult:
        return await self._submit(self.client.register, name, email, password)

    async def logout(self) -> AuthResult:
        """End the session locally even when the server call fails, reporting the failure."""
        self._generation += 1
        error = None
        try:
            await self.client.logout()
        except ApiError as e:
            logger.warning(f"Logout request failed: {e.message}")
            error = e

        self._clear()
        self.error = error
        self._notify()
        return AuthResult(error=error)

    async def _submit(self, call: Callable[..., Awaitable[AuthPayload]], *args) -> AuthResult:
        # At most one credential submission in flight; later callers share its outcome
        if self._inflight is None or self._inflight.done():
            self._inflight = asyncio.create_task(self._authenticate(call, *args))
        else:
            logger.debug("Credential submission already in flight; waiting on it")
        return await asyncio.shield(self._inflight)

    async def _authenticate(self, call: Callable[..., Awaitable[AuthPayload]], *args) -> AuthResult:
        generation = self._generation
        self.error = None
        try:
            payload = await call(*args)
        except ApiError as e:
            if generation != self._generation:
                return AuthResult()
            self.error = e
            self._notify()
            return AuthResult(error=e)

        if generation != self._generation:
            logger.debug("Session ended during credential submission; discarding the token")
            return AuthResult()

        self.store.save(payload.token)
        self._authenticated(payload.token, payload.user)
        return AuthResult(user=payload.user)

    def _superseded(self, generation: int) -> bool:
        """A logout or a completed login overtook the restore started under ``generation``."""
        return generation != self._generation or self.state is not SessionState.RESTORING

    def _authenticated(self, token: str, user: UserProfile) -> None:
        self.client.token = token
        self.user = user
        self.error = None
        self._transition(SessionState.AUTHENTICATED)

    def _clear(self) -> None:
        self.store.clear()
        self.client.token = None
        self.user = None
        self.state = SessionState.UNAUTHENTICATED

    def _transition(self, state: SessionState) -> None:
        self.state = state
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
