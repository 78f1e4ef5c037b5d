"""Authenticate User — login flow, startup token policy, and bearer authorization.

Invariants:
    - Unknown email propagates ResourceNotFoundError (not InvalidCredentials)
    - Wrong password raises InvalidCredentialsError (not NotFound)
    - Issued claims are exactly {sub: user id, exp: now + ttl}
    - Misconfigured issuer/TTL raise ConfigurationError
    - Password verification runs in a worker thread, not on the event loop
"""

import asyncio
import threading
import time

import pytest

from storefront.core.errors import (
    AuthenticationRequiredError, ConfigurationError, InvalidCredentialsError,
    ResourceNotFoundError, TokenError,
)
from storefront.core.user import new_user
from storefront.services.authenticate_user import (
    TokenPolicy, authorize, build_token_policy, login, verify_password,
)
from tests.services.fake_repositories import FakeTokenIssuer, InMemoryUserRepository

NOW = 1_700_000_000.0


@pytest.fixture
async def users():
    repo = InMemoryUserRepository()
    await repo.create(new_user("Luis", "luis@luis.com.br", "1234", rounds=4))
    return repo


async def test_login_issues_token_with_subject_and_expiry(users):
    issuer = FakeTokenIssuer()
    user = await users.find_by_email("luis@luis.com.br")

    token = await login(users, "luis@luis.com.br", "1234", issuer, 300, now=NOW)

    assert token == "token-1"
    assert issuer.issued == [{"sub": str(user.id), "exp": int(NOW) + 300}]


async def test_login_wrong_password_is_invalid_credentials(users):
    issuer = FakeTokenIssuer()
    with pytest.raises(InvalidCredentialsError):
        await login(users, "luis@luis.com.br", "wrong", issuer, 300)
    assert issuer.issued == []


async def test_login_unknown_email_is_not_found(users):
    with pytest.raises(ResourceNotFoundError):
        await login(users, "nobody@x.com", "1234", FakeTokenIssuer(), 300)


async def test_login_issuer_failure_is_token_error(users):
    with pytest.raises(TokenError):
        await login(users, "luis@luis.com.br", "1234", FakeTokenIssuer(fail=True), 300)


async def test_login_defaults_to_current_time(users):
    issuer = FakeTokenIssuer()
    before = int(time.time())
    await login(users, "luis@luis.com.br", "1234", issuer, 60)
    after = int(time.time())
    assert before + 60 <= issuer.issued[0]["exp"] <= after + 60


def test_build_token_policy_accepts_positive_ttl():
    issuer = FakeTokenIssuer()
    assert build_token_policy(issuer, 1) == TokenPolicy(issuer=issuer, ttl_seconds=1)


@pytest.mark.parametrize("ttl", [0, -1, -300])
def test_build_token_policy_rejects_non_positive_ttl(ttl):
    with pytest.raises(ConfigurationError) as exc:
        build_token_policy(FakeTokenIssuer(), ttl)
    assert exc.value.setting == "jwt_expires_in"


@pytest.mark.parametrize("ttl", [1.5, "300", True])
def test_build_token_policy_rejects_non_integer_ttl(ttl):
    with pytest.raises(ConfigurationError):
        build_token_policy(FakeTokenIssuer(), ttl)


def test_build_token_policy_requires_issuer():
    with pytest.raises(ConfigurationError) as exc:
        build_token_policy(None, 300)
    assert exc.value.setting == "jwt_secret"


async def test_authorize_returns_subject(users):
    issuer = FakeTokenIssuer()
    user = await users.find_by_email("luis@luis.com.br")
    token = await login(users, "luis@luis.com.br", "1234", issuer, 300)
    assert authorize(issuer, token) == user.id


@pytest.mark.parametrize("token", [None, ""])
def test_authorize_requires_token(token):
    with pytest.raises(AuthenticationRequiredError):
        authorize(FakeTokenIssuer(), token)


async def test_verify_password_runs_off_the_event_loop(users):
    user = await users.find_by_email("luis@luis.com.br")
    loop_thread = threading.get_ident()
    seen = []
    original = user.validate_password

    def recording(candidate):
        seen.append(threading.get_ident())
        return original(candidate)

    user.validate_password = recording

    assert await verify_password(user, "1234")
    assert seen and seen[0] != loop_thread


async def test_login_verifies_through_worker_thread(users, monkeypatch):
    offloaded = []
    real_to_thread = asyncio.to_thread

    async def recording_to_thread(func, /, *args, **kwargs):
        offloaded.append(func.__name__)
        return await real_to_thread(func, *args, **kwargs)

    monkeypatch.setattr(asyncio, "to_thread", recording_to_thread)

    token = await login(users, "luis@luis.com.br", "1234", FakeTokenIssuer(), 300)

    assert token == "token-1"
    assert offloaded == ["validate_password"]


async def test_login_with_unencodable_password_is_invalid_credentials(users):
    with pytest.raises(InvalidCredentialsError):
        await login(users, "luis@luis.com.br", "\ud800", FakeTokenIssuer(), 300)
