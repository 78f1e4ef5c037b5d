"""SQL User Repository — SQLAlchemy implementation of UserRepository.

Invariants:
    - Duplicate email surfaces as DatabaseError (unique index), not a distinct kind
    - find_by_email() raises ResourceNotFoundError on a miss
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.domain_types import UserId
from storefront.core.errors import ResourceNotFoundError
from storefront.core.user import User
from storefront.infrastructure.database import translate_db_errors
from storefront.models.user import User as UserModel

logger = logging.getLogger(__name__)


class SqlUserRepository:
    """Users stored in the `users` table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def create(self, user: User) -> None:
        async with translate_db_errors(self._db, "insert"):
            self._db.add(UserModel(
                id=user.id, name=user.name, email=user.email,
                password_hash=user.password_hash,
            ))
            await self._db.commit()
        logger.info("User created", extra={"user_id": str(user.id)})

    async def find_by_email(self, email: str) -> User:
        async with translate_db_errors(self._db, "query"):
            result = await self._db.execute(
                select(UserModel).where(UserModel.email == email),
            )
            row = result.scalar_one_or_none()
        if row is None:
            raise ResourceNotFoundError("User", email)
        return User(
            id=UserId(row.id), name=row.name, email=row.email,
            password_hash=row.password_hash,
        )
