import pytest

from projecthub.client import (
    AuthenticationRequiredError,
    ProjectRegistry,
    SessionEvent,
    SessionHolder,
)

from tests.unit.client.fake_backend import FakeBackend, error


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.mark.asyncio
async def test_initialize_without_token_has_no_identity(backend):
    holder = SessionHolder(backend.client())
    events = []
    holder.subscribe(lambda event, identity: events.append((event, identity)))

    identity = await holder.initialize()

    assert identity is None
    assert events == [(SessionEvent.INITIAL_SESSION, None)]
    assert backend.calls("GET", "/me") == []


@pytest.mark.asyncio
async def test_initialize_failure_means_no_identity(backend):
    backend.routes[("GET", "/me")] = lambda body: error(401, "INVALID_TOKEN")
    client = backend.client()
    client.set_tokens("stale", "s.secret")
    holder = SessionHolder(client)

    identity = await holder.initialize()

    assert identity is None
    assert holder.identity is None


@pytest.mark.asyncio
async def test_sign_in_sign_out_events(backend):
    # Arrange
    holder = SessionHolder(backend.client())
    events = []
    holder.subscribe(lambda event, identity: events.append((event, identity and identity.email)))

    # Act
    await holder.sign_in("alice", "SecurePass123!")
    await holder.refresh()
    await holder.sign_out()

    # Assert
    assert events == [
        (SessionEvent.SIGNED_IN, "alice@example.com"),
        (SessionEvent.TOKEN_REFRESHED, "alice@example.com"),
        (SessionEvent.SIGNED_OUT, None),
    ]
    assert holder.client.access_token is None
    assert backend.calls("POST", "/auth/logout")[0][2] == {"refresh_token": "s.secret2"}


@pytest.mark.asyncio
async def test_unsubscribe_and_close(backend):
    holder = SessionHolder(backend.client())
    first, second = [], []
    subscription = holder.subscribe(lambda event, identity: first.append(event))
    holder.subscribe(lambda event, identity: second.append(event))

    subscription.unsubscribe()
    await holder.sign_in("alice", "SecurePass123!")
    holder.close()
    await holder.sign_out()

    assert first == []
    assert second == [SessionEvent.SIGNED_IN]
    assert holder.subscriber_count == 0


@pytest.mark.asyncio
async def test_failing_subscriber_does_not_block_others(backend):
    holder = SessionHolder(backend.client())
    received = []

    def broken(event, identity):
        raise RuntimeError("subscriber bug")

    holder.subscribe(broken)
    holder.subscribe(lambda event, identity: received.append(event))

    await holder.sign_in("alice", "SecurePass123!")

    assert received == [SessionEvent.SIGNED_IN]


@pytest.mark.asyncio
async def test_failed_refresh_signs_out(backend):
    backend.routes[("POST", "/auth/refresh")] = lambda body: error(401, "SESSION_REVOKED")
    holder = SessionHolder(backend.client())
    await holder.sign_in("alice", "SecurePass123!")
    events = []
    holder.subscribe(lambda event, identity: events.append(event))

    with pytest.raises(AuthenticationRequiredError) as exc_info:
        await holder.refresh()

    assert exc_info.value.code == "SESSION_REVOKED"
    assert holder.identity is None
    assert events == [SessionEvent.SIGNED_OUT]


@pytest.mark.asyncio
async def test_registry_reloads_on_sign_in_and_clears_on_sign_out(backend):
    # Arrange
    client = backend.client()
    holder = SessionHolder(client)
    registry = ProjectRegistry(client)
    registry.attach(holder)

    # Act / Assert
    await holder.initialize()
    assert registry.projects == ()

    await holder.sign_in("alice", "SecurePass123!")
    assert [p.name for p in registry.projects] == ["Alpha"]

    await holder.refresh()
    assert len(backend.calls("GET", "/projects")) == 1

    await holder.sign_out()
    assert registry.projects == ()

    registry.detach()
    assert holder.subscriber_count == 0
