"""Authenticate User — login flow and bearer-token authorization.

Invariants:
    - login(): NotFound from the repository propagates unchanged (404, not 401)
    - login(): wrong password is InvalidCredentialsError (401), never NotFound
    - login(): issuer failure surfaces as TokenError; nothing is persisted
    - build_token_policy() is the only place TTL/issuer misconfiguration is detected,
      and it runs once at startup

Design Decisions:
    - Startup validation raises ConfigurationError instead of aborting the process,
      so the lifespan can log it and fail the app cleanly
    - `now` injectable for deterministic expiry assertions in tests
    - bcrypt verification runs via asyncio.to_thread so a login never stalls the loop
"""

import asyncio
import logging
import time
from dataclasses import dataclass

from storefront.core.domain_types import UserId
from storefront.core.errors import (
    AuthenticationRequiredError, ConfigurationError, InvalidCredentialsError,
)
from storefront.core.repository_protocols import TokenIssuer, UserRepository
from storefront.core.token_claims import build_access_claims, subject_from_claims
from storefront.core.user import User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenPolicy:
    """Validated issuer + TTL pair, built once at startup."""
    issuer: TokenIssuer
    ttl_seconds: int


def build_token_policy(issuer: TokenIssuer | None, ttl_seconds: int) -> TokenPolicy:
    """Validate token settings; raise ConfigurationError when unusable."""
    if issuer is None:
        raise ConfigurationError("token issuer is missing", "jwt_secret")
    if isinstance(ttl_seconds, bool) or not isinstance(ttl_seconds, int):
        raise ConfigurationError("must be an integer number of seconds", "jwt_expires_in")
    if ttl_seconds <= 0:
        raise ConfigurationError("must be a positive number of seconds", "jwt_expires_in")
    return TokenPolicy(issuer=issuer, ttl_seconds=ttl_seconds)


async def verify_password(user: User, candidate: str) -> bool:
    """validate_password() in a worker thread."""
    return await asyncio.to_thread(user.validate_password, candidate)


async def login(
    users: UserRepository,
    email: str,
    password: str,
    issuer: TokenIssuer,
    ttl_seconds: int,
    now: float | None = None,
) -> str:
    """Verify credentials and return a signed access token."""
    user = await users.find_by_email(email)
    if not await verify_password(user, password):
        logger.info("Rejected login", extra={"user_id": str(user.id)})
        raise InvalidCredentialsError()
    issued_at = time.time() if now is None else now
    token = issuer.issue(build_access_claims(user.id, ttl_seconds, issued_at))
    logger.info("Issued access token", extra={"user_id": str(user.id)})
    return token


def authorize(issuer: TokenIssuer, token: str | None) -> UserId:
    """Verify a bearer token and return its subject."""
    if not token:
        raise AuthenticationRequiredError()
    return subject_from_claims(issuer.verify(token))
