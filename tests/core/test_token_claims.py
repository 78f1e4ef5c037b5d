"""Token Claims — sub/exp construction and subject extraction."""

from uuid import uuid4

import pytest

from storefront.core.errors import AuthenticationRequiredError
from storefront.core.token_claims import build_access_claims, subject_from_claims


def test_claims_embed_subject_and_expiry():
    uid = uuid4()
    claims = build_access_claims(uid, 300, now=1_700_000_000.9)
    assert claims == {"sub": str(uid), "exp": 1_700_000_300}


def test_subject_round_trip():
    uid = uuid4()
    assert subject_from_claims(build_access_claims(uid, 1, 0)) == uid


@pytest.mark.parametrize("claims", [{}, {"sub": None}, {"sub": "nope"}, {"sub": 42}])
def test_bad_subject_requires_authentication(claims):
    with pytest.raises(AuthenticationRequiredError):
        subject_from_claims(claims)
