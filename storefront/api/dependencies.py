"""API Dependencies — FastAPI providers for repositories, token policy and auth.

Invariants:
    - Routes receive protocol implementations, never a raw AsyncSession
    - The token policy comes from app.state (set by the lifespan) and is overridable in tests
    - require_access_token rejects missing/invalid bearer tokens with 401

Design Decisions:
    - HTTPBearer(auto_error=False): a missing header becomes our own
      AuthenticationRequiredError envelope instead of FastAPI's default 403
"""

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.domain_types import UserId
from storefront.core.errors import ConfigurationError
from storefront.core.repository_protocols import ProductRepository, UserRepository
from storefront.infrastructure.database import get_db
from storefront.infrastructure.product_repository import SqlProductRepository
from storefront.infrastructure.user_repository import SqlUserRepository
from storefront.services.authenticate_user import TokenPolicy, authorize

_bearer = HTTPBearer(auto_error=False)


def get_product_repository(
    db: AsyncSession = Depends(get_db),
) -> ProductRepository:
    return SqlProductRepository(db)


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return SqlUserRepository(db)


def get_token_policy(request: Request) -> TokenPolicy:
    policy = getattr(request.app.state, "token_policy", None)
    if policy is None:
        raise ConfigurationError("token policy not initialized", "jwt_secret")
    return policy


def require_access_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    policy: TokenPolicy = Depends(get_token_policy),
) -> UserId:
    """Subject of a valid bearer token."""
    token = credentials.credentials if credentials else None
    return authorize(policy.issuer, token)
