"""User Entity — an account identified by email, holding a bcrypt password hash.

Invariants:
    - name, email and password must be non-empty, checked in that order
    - The plaintext password is hashed exactly once (in new_user) and never stored
    - password_hash never equals the plaintext and is excluded from repr()
    - validate_password() returns False for any mismatch; it raises only when the
      stored hash itself is malformed (PasswordHashError, an internal defect)

Design Decisions:
    - bcrypt directly (salted, adaptive cost): checkpw is constant-time
    - Passwords over 72 bytes are rejected up front: bcrypt cannot hash them faithfully
    - Text with no UTF-8 form (lone surrogates) is a validation failure when hashing
      and a plain mismatch when verifying
    - Default cost 10 keeps login latency low; configurable via Settings.bcrypt_rounds
"""

from dataclasses import dataclass, field

import bcrypt

from storefront.core.domain_types import UserId
from storefront.core.errors import (
    ConfigurationError, PasswordHashError, ValidationError, ValidationReason,
)
from storefront.core.identifiers import new_id

BCRYPT_MAX_BYTES = 72
DEFAULT_BCRYPT_ROUNDS = 10
MIN_BCRYPT_ROUNDS = 4
MAX_BCRYPT_ROUNDS = 31


@dataclass
class User:
    """Account. Construct through new_user()."""
    id: UserId
    name: str
    email: str
    password_hash: str = field(repr=False)

    def validate_password(self, candidate: str) -> bool:
        """Constant-time check of candidate against the stored hash."""
        try:
            secret = candidate.encode("utf-8")
        except UnicodeEncodeError:
            return False
        if len(secret) > BCRYPT_MAX_BYTES:
            return False
        try:
            return bcrypt.checkpw(secret, self.password_hash.encode("utf-8"))
        except ValueError as e:
            raise PasswordHashError() from e


def hash_password(password: str, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> str:
    """Salted bcrypt hash of password, as ASCII text."""
    try:
        secret = password.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ValidationError(ValidationReason.INVALID_PASSWORD_ENCODING) from e
    if len(secret) > BCRYPT_MAX_BYTES:
        raise ValidationError(ValidationReason.PASSWORD_TOO_LONG)
    return bcrypt.hashpw(secret, bcrypt.gensalt(rounds=rounds)).decode("ascii")


def new_user(
    name: str, email: str, password: str,
    rounds: int = DEFAULT_BCRYPT_ROUNDS,
) -> User:
    """Build a validated User with a fresh id and hashed password."""
    if not name:
        raise ValidationError(ValidationReason.NAME_REQUIRED)
    if not email:
        raise ValidationError(ValidationReason.EMAIL_REQUIRED)
    if not password:
        raise ValidationError(ValidationReason.PASSWORD_REQUIRED)
    return User(
        id=UserId(new_id()), name=name, email=email,
        password_hash=hash_password(password, rounds),
    )


def check_bcrypt_rounds(rounds: int) -> int:
    """Return rounds if bcrypt accepts it as a cost factor."""
    if isinstance(rounds, bool) or not isinstance(rounds, int):
        raise ConfigurationError("must be an integer", "bcrypt_rounds")
    if not MIN_BCRYPT_ROUNDS <= rounds <= MAX_BCRYPT_ROUNDS:
        raise ConfigurationError(
            f"must be between {MIN_BCRYPT_ROUNDS} and {MAX_BCRYPT_ROUNDS}",
            "bcrypt_rounds",
        )
    return rounds
