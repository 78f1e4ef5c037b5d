"""User Entity — required fields in order, hashing, and password verification.

Tests:
    - First empty field (name → email → password) determines the error
    - The hash is bcrypt, never the plaintext, and hidden from repr()
    - validate_password is true only for the exact plaintext
    - A malformed stored hash is an internal error, not a False
    - Passwords with no UTF-8 form are rejected at registration and never match
    - bcrypt cost outside 4..31 is a configuration error
"""

import pytest

from storefront.core.errors import (
    ConfigurationError, PasswordHashError, ValidationError, ValidationReason,
)
from storefront.core.user import check_bcrypt_rounds, new_user

ROUNDS = 4


@pytest.fixture(scope="module")
def user():
    return new_user("Luis", "luis@luis.com.br", "1234", rounds=ROUNDS)


def test_new_user_sets_fields(user):
    assert user.id
    assert user.name == "Luis"
    assert user.email == "luis@luis.com.br"
    assert user.password_hash
    assert user.password_hash != "1234"
    assert user.password_hash.startswith("$2")


@pytest.mark.parametrize(
    "name, email, password, reason",
    [
        ("", "", "", ValidationReason.NAME_REQUIRED),
        ("", "a@b.c", "pw", ValidationReason.NAME_REQUIRED),
        ("n", "", "", ValidationReason.EMAIL_REQUIRED),
        ("n", "", "pw", ValidationReason.EMAIL_REQUIRED),
        ("n", "a@b.c", "", ValidationReason.PASSWORD_REQUIRED),
    ],
)
def test_first_empty_field_wins(name, email, password, reason):
    with pytest.raises(ValidationError) as exc:
        new_user(name, email, password, rounds=ROUNDS)
    assert exc.value.reason is reason


def test_password_longer_than_bcrypt_limit_rejected():
    with pytest.raises(ValidationError) as exc:
        new_user("n", "a@b.c", "x" * 73, rounds=ROUNDS)
    assert exc.value.reason is ValidationReason.PASSWORD_TOO_LONG


def test_validate_password_accepts_exact_plaintext(user):
    assert user.validate_password("1234")


@pytest.mark.parametrize("candidate", ["", "12345", "123", " 1234", "1234 ", "x" * 100])
def test_validate_password_rejects_other_strings(user, candidate):
    assert not user.validate_password(candidate)


def test_validate_password_rejects_stored_hash(user):
    assert not user.validate_password(user.password_hash)


def test_hash_is_salted():
    a = new_user("n", "a@b.c", "same", rounds=ROUNDS)
    b = new_user("n", "a@b.c", "same", rounds=ROUNDS)
    assert a.password_hash != b.password_hash


def test_repr_hides_hash(user):
    assert user.password_hash not in repr(user)
    assert "password_hash" not in repr(user)


def test_malformed_hash_is_internal_error(user):
    broken = type(user)(
        id=user.id, name=user.name, email=user.email, password_hash="not-a-hash",
    )
    with pytest.raises(PasswordHashError) as exc:
        broken.validate_password("1234")
    assert exc.value.http_status == 500


def test_password_with_lone_surrogate_rejected():
    with pytest.raises(ValidationError) as exc:
        new_user("n", "a@b.c", "pw\ud800", rounds=ROUNDS)
    assert exc.value.reason is ValidationReason.INVALID_PASSWORD_ENCODING
    assert exc.value.http_status == 400


def test_validate_password_with_lone_surrogate_is_mismatch(user):
    assert not user.validate_password("\ud800")


@pytest.mark.parametrize("rounds", [4, 10, 31])
def test_bcrypt_rounds_in_range_accepted(rounds):
    assert check_bcrypt_rounds(rounds) == rounds


@pytest.mark.parametrize("rounds", [0, 3, 32, True, "10"])
def test_bcrypt_rounds_out_of_range_is_configuration_error(rounds):
    with pytest.raises(ConfigurationError) as exc:
        check_bcrypt_rounds(rounds)
    assert exc.value.setting == "bcrypt_rounds"
