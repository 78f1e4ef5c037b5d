"""JWT Token Issuer — signing, verification, and configuration checks."""

import time

import pytest
from jose import jwt

from storefront.core.errors import (
    AuthenticationRequiredError, ConfigurationError, TokenError,
)
from storefront.infrastructure.token_issuer import JwtTokenIssuer


@pytest.fixture
def issuer():
    return JwtTokenIssuer("s3cret")


def test_issue_signs_given_claims(issuer):
    claims = {"sub": "abc", "exp": int(time.time()) + 60}
    token = issuer.issue(claims)
    assert jwt.decode(token, "s3cret", algorithms=["HS256"]) == claims


def test_verify_round_trip(issuer):
    claims = {"sub": "abc", "exp": int(time.time()) + 60}
    assert issuer.verify(issuer.issue(claims)) == claims


def test_verify_rejects_expired(issuer):
    token = issuer.issue({"sub": "abc", "exp": int(time.time()) - 10})
    with pytest.raises(AuthenticationRequiredError):
        issuer.verify(token)


def test_verify_rejects_foreign_signature(issuer):
    token = JwtTokenIssuer("other").issue({"sub": "abc", "exp": int(time.time()) + 60})
    with pytest.raises(AuthenticationRequiredError):
        issuer.verify(token)


def test_verify_rejects_garbage(issuer):
    with pytest.raises(AuthenticationRequiredError):
        issuer.verify("not.a.jwt")


def test_issue_unserializable_claims_is_token_error(issuer):
    with pytest.raises(TokenError) as exc:
        issuer.issue({"sub": object()})
    assert exc.value.http_status == 400


def test_empty_secret_is_configuration_error():
    with pytest.raises(ConfigurationError) as exc:
        JwtTokenIssuer("")
    assert exc.value.setting == "jwt_secret"


def test_non_hmac_algorithm_is_configuration_error():
    with pytest.raises(ConfigurationError) as exc:
        JwtTokenIssuer("s3cret", "RS256")
    assert exc.value.setting == "jwt_algorithm"
