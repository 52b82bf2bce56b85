"""User schemas — signup rules, admin creation and partial updates.

Invariants:
    - Signup requires terms_agreed=True and a password with uppercase + digit
    - Signup cannot create admins
    - Update schemas report only the fields actually sent
"""

import pytest
from pydantic import ValidationError

from hackerhire.core.domain_types import UserType
from hackerhire.schemas.user import (
    AdminCreate, PasswordChange, ProfileUpdate, SignupRequest, UserResponse, UserUpdate,
)


def _signup(**overrides) -> dict:
    data = {
        "username": "neo",
        "email": "neo@zion.io",
        "password": "Matrix123",
        "full_name": "Thomas Anderson",
        "user_type": "hacker",
        "terms_agreed": True,
    }
    data.update(overrides)
    return data


def test_valid_signup():
    body = SignupRequest(**_signup(username="  neo  "))
    assert body.username == "neo"
    assert body.user_type == "hacker"


def test_signup_requires_terms():
    with pytest.raises(ValidationError, match="terms and conditions"):
        SignupRequest(**_signup(terms_agreed=False))


def test_signup_rejects_admin_role():
    with pytest.raises(ValidationError):
        SignupRequest(**_signup(user_type="admin"))


@pytest.mark.parametrize("password", ["matrix123", "MatrixNoDigit", "Ma1"])
def test_signup_password_strength(password):
    with pytest.raises(ValidationError):
        SignupRequest(**_signup(password=password))


def test_signup_rejects_invalid_email():
    with pytest.raises(ValidationError):
        SignupRequest(**_signup(email="not-an-email"))


def test_signup_rejects_short_username():
    with pytest.raises(ValidationError):
        SignupRequest(**_signup(username="ab"))


def test_admin_create_defaults_to_admin_role():
    body = AdminCreate(
        username="root", email="root@x.io", password="longenough", full_name="Root",
    )
    assert body.user_type == UserType.ADMIN


def test_user_update_reports_only_sent_fields():
    body = UserUpdate(title="Lead")
    assert body.model_dump(exclude_unset=True) == {"title": "Lead"}


def test_profile_update_has_no_username_or_role():
    body = ProfileUpdate(username="x", user_type="admin", bio="hi")
    assert body.model_dump(exclude_unset=True) == {"bio": "hi"}


def test_password_change_min_length():
    with pytest.raises(ValidationError):
        PasswordChange(current_password="old", new_password="short")


def test_user_response_omits_password_hash():
    assert "password_hash" not in UserResponse.model_fields
