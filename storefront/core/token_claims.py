"""Token Claims — pure construction and reading of access-token claims.

Invariants:
    - sub is the user id as canonical text
    - exp is an integer Unix timestamp = issuance second + ttl_seconds
"""

from uuid import UUID

from storefront.core.domain_types import UserId
from storefront.core.errors import AuthenticationRequiredError


def build_access_claims(user_id: UserId, ttl_seconds: int, now: float) -> dict:
    """Claims for an access token issued at `now` (Unix seconds)."""
    return {"sub": str(user_id), "exp": int(now) + ttl_seconds}


def subject_from_claims(claims: dict) -> UserId:
    """Extract the user id from verified claims."""
    sub = claims.get("sub")
    try:
        return UserId(UUID(sub))
    except (TypeError, ValueError, AttributeError) as e:
        raise AuthenticationRequiredError("token subject is not a user id") from e
