"""Entity helpers — insert preparation, partial cleaning and shallow merge.

Invariants:
    - prepare_insert never carries a caller-supplied id
    - NULLABLE fields: "" becomes None; non-nullable None falls back to default
    - SERVER_FORCED fields win over caller input
    - merge keeps absent fields and never changes the id
"""

from hackerhire.core import entities
from hackerhire.core.domain_types import ProjectStatus, UserType
from hackerhire.core.entities import (
    Application, ContactMessage, Project, User,
    clean_partial, merge, prepare_insert,
)


def _project(**overrides) -> Project:
    data = {
        "id": 1, "client_id": 2, "title": "Pentest", "description": "d",
        "requirements": "r", "budget": "$1k", "timeframe": "2 weeks",
    }
    data.update(overrides)
    return Project(**data)


# --- prepare_insert -----------------------------------------------------------

def test_prepare_insert_drops_id_and_unknown_keys():
    record = prepare_insert(Project, {
        "id": 99, "client_id": 1, "title": "t", "description": "d",
        "requirements": "r", "budget": "b", "timeframe": "tf", "bogus": True,
    })
    assert "id" not in record
    assert "bogus" not in record


def test_prepare_insert_fills_defaults():
    record = prepare_insert(Project, {
        "client_id": 1, "title": "t", "description": "d",
        "requirements": "r", "budget": "b", "timeframe": "tf",
    })
    assert record["status"] == "open"
    assert record["additional_details"] is None
    assert record["created_at"].tzinfo is not None


def test_prepare_insert_empty_string_becomes_none_for_nullable():
    record = prepare_insert(User, {
        "username": "u", "email": "u@x.io", "password_hash": "h",
        "user_type": "client", "full_name": "U", "company": "",
    })
    assert record["company"] is None


def test_prepare_insert_none_falls_back_to_default_for_non_nullable():
    record = prepare_insert(User, {
        "username": "u", "email": "u@x.io", "password_hash": "h",
        "user_type": "client", "full_name": "U", "is_verified": None,
    })
    assert record["is_verified"] is False


def test_prepare_insert_flattens_enums():
    record = prepare_insert(User, {
        "username": "u", "email": "u@x.io", "password_hash": "h",
        "user_type": UserType.HACKER, "full_name": "U",
    })
    assert record["user_type"] == "hacker"
    assert type(record["user_type"]) is str


def test_application_status_forced_pending():
    record = prepare_insert(Application, {
        "project_id": 1, "hacker_id": 2, "proposal": "p",
        "estimated_time": "1w", "price_quote": "$5", "status": "accepted",
    })
    assert record["status"] == "pending"


def test_contact_message_forced_unread():
    record = prepare_insert(ContactMessage, {
        "name": "n", "email": "e@x.io", "subject": "s", "message": "m",
        "inquiry_type": "general", "is_read": True,
    })
    assert record["is_read"] is False


def test_testimonial_defaults_to_not_featured():
    record = prepare_insert(entities.Testimonial, {"review_id": 4})
    assert record == {"review_id": 4, "is_featured": False}


# --- clean_partial / merge ----------------------------------------------------

def test_clean_partial_drops_id_and_unknown_keys():
    assert clean_partial(Project, {"id": 5, "title": "x", "nope": 1}) == {"title": "x"}


def test_merge_keeps_absent_fields():
    original = _project(budget="$2k")
    updated = merge(original, {"title": "Red team"})
    assert updated.title == "Red team"
    assert updated.budget == "$2k"
    assert updated.created_at == original.created_at


def test_merge_never_overwrites_id():
    assert merge(_project(), {"id": 42}).id == 1


def test_merge_flattens_enum_status():
    updated = merge(_project(), {"status": ProjectStatus.IN_PROGRESS})
    assert updated.status == "in-progress"
