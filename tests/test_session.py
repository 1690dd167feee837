"""Tests for the client session context."""

import asyncio

import httpx
import pytest

from gift_tracker.client import (
    ApiError,
    ConnectionFailed,
    FileTokenStore,
    GiftTrackerClient,
    MemoryTokenStore,
    NotAuthenticated,
    SessionContext,
    SessionState,
)

USER_PAYLOAD = {
    "id": "user-1",
    "email": "alice@example.com",
    "name": "Alice",
    "createdAt": "2026-01-01T12:00:00",
    "preferences": {},
}


def asgi_client(app) -> GiftTrackerClient:
    return GiftTrackerClient("http://testserver", transport=httpx.ASGITransport(app=app))


def mock_client(handler) -> GiftTrackerClient:
    return GiftTrackerClient("http://testserver", transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_register_login_logout(app):
    store = MemoryTokenStore()
    async with asgi_client(app) as client:
        session = SessionContext(client, store)

        result = await session.register("Alice", "alice@example.com", "Secret123!")
        assert result.ok
        assert session.state is SessionState.AUTHENTICATED
        assert session.user.email == "alice@example.com"
        assert store.load() == session.token

        logout = await session.logout()
        assert logout.error is None
        assert session.state is SessionState.UNAUTHENTICATED
        assert session.user is None
        assert session.token is None
        assert store.load() is None

        login = await session.login("alice@example.com", "Secret123!")
        assert login.ok
        assert login.user.id == result.user.id
        assert session.is_authenticated


@pytest.mark.asyncio
async def test_failed_login_reports_error_and_stays_logged_out(app):
    async with asgi_client(app) as client:
        session = SessionContext(client, MemoryTokenStore())
        await session.register("Alice", "alice@example.com", "Secret123!")
        await session.logout()

        result = await session.login("alice@example.com", "Secret124!")

        assert not result.ok
        assert result.error.status_code == 401
        assert result.error.message == "Invalid email or password"
        assert session.error is result.error
        assert session.state is SessionState.UNAUTHENTICATED

        session.clear_error()
        assert session.error is None


@pytest.mark.asyncio
async def test_duplicate_registration_reports_server_message(app):
    async with asgi_client(app) as client:
        first = SessionContext(client, MemoryTokenStore())
        await first.register("Alice", "alice@example.com", "Secret123!")
        await first.logout()

        result = await first.register("Alice", "alice@example.com", "Secret123!")
        assert result.error.status_code == 400
        assert "already registered" in result.error.message


@pytest.mark.asyncio
async def test_restore_from_file_store(app, tmp_path):
    path = tmp_path / "session" / "token.json"
    async with asgi_client(app) as client:
        first = SessionContext(client, FileTokenStore(path))
        registered = await first.register("Alice", "alice@example.com", "Secret123!")
    assert path.exists()

    # A new process: fresh client, same file
    async with asgi_client(app) as client:
        session = SessionContext(client, FileTokenStore(path))
        states = []
        session.subscribe(lambda s: states.append(s.state))

        result = await session.restore()

        assert result.ok
        assert result.user.id == registered.user.id
        assert session.is_authenticated
        assert states == [SessionState.RESTORING, SessionState.AUTHENTICATED]

        # Restoring again is a no-op
        again = await session.restore()
        assert again.user == result.user
        assert states == [SessionState.RESTORING, SessionState.AUTHENTICATED]


@pytest.mark.asyncio
async def test_restore_without_token(app):
    async with asgi_client(app) as client:
        session = SessionContext(client, MemoryTokenStore())
        result = await session.restore()

        assert result.user is None
        assert result.error is None
        assert session.state is SessionState.UNAUTHENTICATED


@pytest.mark.asyncio
async def test_restore_with_rejected_token_clears_store(app):
    store = MemoryTokenStore("not-a-real-token")
    async with asgi_client(app) as client:
        session = SessionContext(client, store)
        result = await session.restore()

        assert result.error.status_code == 401
        assert session.state is SessionState.UNAUTHENTICATED
        assert session.token is None
        assert store.load() is None


@pytest.mark.asyncio
async def test_restore_when_server_unreachable_clears_token():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    store = MemoryTokenStore("stored-token")
    async with mock_client(handler) as client:
        session = SessionContext(client, store)
        result = await session.restore()

    assert isinstance(result.error, ConnectionFailed)
    assert result.error.status_code is None
    assert session.error is result.error
    assert session.state is SessionState.UNAUTHENTICATED
    assert session.token is None
    assert store.load() is None


def held_handler(release: asyncio.Event, held_path: str):
    """Transport handler that blocks ``held_path`` until ``release`` is set."""

    async def handler(request):
        if request.url.path == held_path:
            await release.wait()
        if request.url.path == "/api/auth/logout":
            return httpx.Response(200, json={"message": "Logged out successfully"})
        if request.url.path == "/api/user/validate":
            return httpx.Response(200, json=USER_PAYLOAD)
        return httpx.Response(200, json={"token": "tok", "user": USER_PAYLOAD})

    return handler


@pytest.mark.asyncio
async def test_logout_during_restore_wins():
    release = asyncio.Event()
    store = MemoryTokenStore("stored-token")
    async with mock_client(held_handler(release, "/api/user/validate")) as client:
        session = SessionContext(client, store)

        restoring = asyncio.create_task(session.restore())
        await asyncio.sleep(0.01)
        assert session.state is SessionState.RESTORING

        await session.logout()
        release.set()
        result = await restoring

    assert result.user is None
    assert session.state is SessionState.UNAUTHENTICATED
    assert session.user is None
    assert session.token is None
    assert store.load() is None


@pytest.mark.asyncio
async def test_logout_during_login_wins():
    release = asyncio.Event()
    store = MemoryTokenStore()
    async with mock_client(held_handler(release, "/api/auth/login")) as client:
        session = SessionContext(client, store)

        logging_in = asyncio.create_task(session.login("alice@example.com", "Secret123!"))
        await asyncio.sleep(0.01)

        await session.logout()
        release.set()
        result = await logging_in

        assert not result.ok
        assert session.state is SessionState.UNAUTHENTICATED
        assert session.token is None
        assert store.load() is None

        # The session is usable again afterwards
        assert (await session.login("alice@example.com", "Secret123!")).ok
        assert store.load() == "tok"


@pytest.mark.asyncio
async def test_login_when_server_unreachable():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with mock_client(handler) as client:
        session = SessionContext(client, MemoryTokenStore())
        result = await session.login("alice@example.com", "Secret123!")

    assert isinstance(result.error, ConnectionFailed)
    assert session.user is None
    assert session.state is SessionState.UNAUTHENTICATED


@pytest.mark.asyncio
async def test_concurrent_logins_share_one_request():
    calls = []

    async def handler(request):
        calls.append(request.url.path)
        await asyncio.sleep(0.05)
        return httpx.Response(200, json={"token": "tok", "user": USER_PAYLOAD})

    store = MemoryTokenStore()
    async with mock_client(handler) as client:
        session = SessionContext(client, store)
        first, second = await asyncio.gather(
            session.login("alice@example.com", "Secret123!"),
            session.login("alice@example.com", "Secret123!"),
        )

        assert calls == ["/api/auth/login"]
        assert first == second
        assert first.user.id == "user-1"
        assert store.load() == "tok"

        # Once settled, a new submission goes out again
        await session.login("alice@example.com", "Secret123!")
        assert len(calls) == 2


@pytest.mark.asyncio
async def test_logout_clears_session_even_if_server_fails():
    async def handler(request):
        if request.url.path == "/api/auth/login":
            return httpx.Response(200, json={"token": "tok", "user": USER_PAYLOAD})
        return httpx.Response(500, json={"message": "Internal server error"})

    store = MemoryTokenStore()
    async with mock_client(handler) as client:
        session = SessionContext(client, store)
        await session.login("alice@example.com", "Secret123!")

        result = await session.logout()

    assert result.error.status_code == 500
    assert session.state is SessionState.UNAUTHENTICATED
    assert store.load() is None


@pytest.mark.asyncio
async def test_resource_calls_use_session_token(app):
    async with asgi_client(app) as client:
        session = SessionContext(client, MemoryTokenStore())
        with pytest.raises(NotAuthenticated):
            session.api

        await session.register("Alice", "alice@example.com", "Secret123!")
        bob = await session.api.people.create({"name": "Bob", "relationship": "brother"})
        gift = await session.api.gifts.create({"name": "Book", "recipientId": bob["id"]})

        assert [p["id"] for p in await session.api.people.list()] == [bob["id"]]
        assert (await session.api.gifts.get(gift["id"]))["recipientId"] == bob["id"]

        updated = await session.api.gifts.update(gift["id"], {"status": "given"})
        assert updated["status"] == "given"

        await session.api.gifts.delete(gift["id"])
        with pytest.raises(ApiError) as missing:
            await session.api.gifts.get(gift["id"])
        assert missing.value.status_code == 404
        assert missing.value.message == "Gift not found"

        await session.logout()
        with pytest.raises(NotAuthenticated):
            session.api


@pytest.mark.asyncio
async def test_profile_calls(app):
    async with asgi_client(app) as client:
        session = SessionContext(client, MemoryTokenStore())
        await session.register("Alice", "alice@example.com", "Secret123!")

        profile = await session.api.update_profile(name="Alice Smith")
        assert profile.name == "Alice Smith"
        assert (await session.api.me()).name == "Alice Smith"

        profile = await session.api.update_preferences(theme="dark")
        assert profile.preferences["theme"] == "dark"


def test_unsubscribe():
    session = SessionContext(mock_client(lambda request: httpx.Response(200)), MemoryTokenStore())
    seen = []
    unsubscribe = session.subscribe(lambda s: seen.append(s.error))

    session.clear_error()
    unsubscribe()
    session.clear_error()

    assert seen == [None]


def test_file_store_ignores_corrupt_file(tmp_path):
    path = tmp_path / "token.json"
    path.write_text("{not json", encoding="utf-8")
    store = FileTokenStore(path)

    assert store.load() is None

    store.save("abc")
    assert store.load() == "abc"
    store.clear()
    assert store.load() is None
    store.clear()
