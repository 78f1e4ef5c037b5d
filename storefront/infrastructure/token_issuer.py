"""JWT Token Issuer — python-jose implementation of the TokenIssuer protocol.

Invariants:
    - issue() signs exactly the claims it is given; failures become TokenError
    - verify() checks signature and exp; any failure becomes AuthenticationRequiredError
    - Only HMAC algorithms accepted (the key is a shared secret)

Design Decisions:
    - Construction validates secret/algorithm and raises ConfigurationError, so a bad
      deployment fails at startup rather than on the first login
"""

import logging

from jose import JWTError, jwt
from jose.constants import ALGORITHMS
from jose.exceptions import JOSEError

from storefront.core.errors import (
    AuthenticationRequiredError, ConfigurationError, TokenError,
)

logger = logging.getLogger(__name__)


class JwtTokenIssuer:
    """Signs and verifies HS* JSON Web Tokens with a shared secret."""

    def __init__(self, secret: str, algorithm: str = ALGORITHMS.HS256):
        if not secret:
            raise ConfigurationError("secret must not be empty", "jwt_secret")
        if algorithm not in ALGORITHMS.HMAC:
            raise ConfigurationError(
                f"unsupported algorithm {algorithm!r}", "jwt_algorithm",
            )
        self._secret = secret
        self._algorithm = algorithm

    def issue(self, claims: dict) -> str:
        try:
            return jwt.encode(claims, self._secret, algorithm=self._algorithm)
        except (JOSEError, TypeError, ValueError) as e:
            logger.error(f"Token signing failed: {e}")
            raise TokenError(str(e)) from e

    def verify(self, token: str) -> dict:
        try:
            return jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except JWTError as e:
            raise AuthenticationRequiredError(f"invalid token: {e}") from e
