"""Register User — account creation with password hashing off the event loop.

Invariants:
    - Validation order is new_user()'s: name, email, password
    - The stored user is re-read by email, so the response reflects persisted state
    - bcrypt hashing runs in a worker thread; the event loop keeps serving requests

Design Decisions:
    - asyncio.to_thread around the whole of new_user(): the hash is the only slow
      step, and validation errors raised in the thread propagate unchanged
"""

import asyncio
import logging

from storefront.core.repository_protocols import UserRepository
from storefront.core.user import DEFAULT_BCRYPT_ROUNDS, User, new_user

logger = logging.getLogger(__name__)


async def register_user(
    users: UserRepository,
    name: str,
    email: str,
    password: str,
    rounds: int = DEFAULT_BCRYPT_ROUNDS,
) -> User:
    """Validate, hash and persist a new user; return the stored record."""
    user = await asyncio.to_thread(new_user, name, email, password, rounds)
    await users.create(user)
    logger.info("Registered user", extra={"user_id": str(user.id)})
    return await users.find_by_email(user.email)
