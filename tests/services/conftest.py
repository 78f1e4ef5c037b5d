"""Service test fixtures — FastAPI test client over an in-memory SQLite database.

Invariants:
    - get_db dependency overridden to use the test DB session
    - get_token_policy overridden: the lifespan does not run under ASGITransport
    - app.state.db_manager points at the test engine so readiness sees it
"""

import pytest
from httpx import ASGITransport, AsyncClient

from storefront.api.dependencies import get_token_policy
from storefront.infrastructure.database import get_db, DatabaseSessionManager
from storefront.infrastructure.token_issuer import JwtTokenIssuer
from storefront.main import app
from storefront.services.authenticate_user import build_token_policy

TTL_SECONDS = 300


@pytest.fixture
def token_policy():
    return build_token_policy(JwtTokenIssuer("test-secret"), TTL_SECONDS)


@pytest.fixture
async def client(test_engine, test_session_factory, token_policy):
    """FastAPI test client with DB and token dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_token_policy] = lambda: token_policy

    test_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    test_manager.engine = test_engine
    test_manager._session_factory = test_session_factory
    app.state.db_manager = test_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.db_manager = None


@pytest.fixture
def auth_headers(token_policy):
    """Bearer header for an arbitrary, valid subject."""
    token = token_policy.issuer.issue({
        "sub": "0190a3c4-0000-7000-8000-000000000001",
        "exp": 4_102_444_800,  # 2100-01-01
    })
    return {"Authorization": f"Bearer {token}"}
