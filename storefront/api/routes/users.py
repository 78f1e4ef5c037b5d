"""User Routes — registration and login.

Invariants:
    - Registration responds with UserResponse only (no credential fields)
    - Login maps: unknown email → 404, wrong password → 401, issuer failure → 400

Design Decisions:
    - Registration and login delegate to services, which keep bcrypt off the event loop
"""

import logging

from fastapi import APIRouter, Depends, status

from storefront.api.dependencies import get_token_policy, get_user_repository
from storefront.config import get_settings
from storefront.core.repository_protocols import UserRepository
from storefront.schemas.user import (
    AccessTokenResponse, LoginRequest, UserCreate, UserResponse,
)
from storefront.services.authenticate_user import TokenPolicy, login
from storefront.services.register_user import register_user

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserCreate,
    users: UserRepository = Depends(get_user_repository),
):
    """Register a user."""
    return await register_user(
        users, body.name, body.email, body.password,
        rounds=get_settings().bcrypt_rounds,
    )


@router.post("/login", response_model=AccessTokenResponse)
async def login_user(
    body: LoginRequest,
    users: UserRepository = Depends(get_user_repository),
    policy: TokenPolicy = Depends(get_token_policy),
):
    """Exchange credentials for an access token."""
    token = await login(
        users, body.email, body.password, policy.issuer, policy.ttl_seconds,
    )
    return AccessTokenResponse(access_token=token)
