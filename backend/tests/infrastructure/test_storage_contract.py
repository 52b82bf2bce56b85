"""Storage contract — behaviour both backends must share.

Invariants:
    - ids unique and strictly increasing, never reused after delete
    - update keeps absent fields and never changes the id
    - delete → get is None; deleting a missing id returns False
    - equality filters keep insertion order
    - project deletes do not cascade
    - create_project_with_skills is all-or-nothing
"""

import pytest

from hackerhire.core.domain_types import UserType
from hackerhire.core.errors import DatabaseError


# --- Ids and CRUD -------------------------------------------------------------

async def test_ids_strictly_increase_and_are_never_reused(storage, user_data):
    first = await storage.users.create(user_data("alice"))
    second = await storage.users.create(user_data("bob"))
    assert await storage.users.delete(second.id)
    third = await storage.users.create(user_data("carol"))
    assert first.id < second.id < third.id


async def test_create_ignores_caller_supplied_id(storage, user_data):
    user = await storage.users.create(user_data("alice", id=500))
    assert user.id == 1


async def test_create_fills_server_defaults(storage, project_data):
    project = await storage.projects.create(project_data(additional_details=""))
    assert project.status == "open"
    assert project.additional_details is None
    assert project.created_at.tzinfo is not None


async def test_get_missing_returns_none(storage):
    assert await storage.projects.get(12345) is None


async def test_update_keeps_absent_fields(storage, project_data):
    project = await storage.projects.create(project_data(budget="$9,000"))
    updated = await storage.projects.update(project.id, {"title": "Red team", "id": 77})
    assert updated.id == project.id
    assert updated.title == "Red team"
    assert updated.budget == "$9,000"
    assert (await storage.projects.get(project.id)).title == "Red team"


async def test_update_missing_returns_none(storage):
    assert await storage.projects.update(999, {"title": "x"}) is None


async def test_delete_then_get_is_none(storage, project_data):
    project = await storage.projects.create(project_data())
    assert await storage.projects.delete(project.id) is True
    assert await storage.projects.get(project.id) is None
    assert await storage.projects.delete(project.id) is False


async def test_delete_many_counts_only_existing(storage, project_data):
    for _ in range(3):
        await storage.projects.create(project_data())
    assert await storage.projects.delete_many([1, 2, 999]) == 2
    assert [p.id for p in await storage.projects.list_all()] == [3]


async def test_delete_many_counts_repeated_ids_once(storage, project_data):
    project = await storage.projects.create(project_data())
    assert await storage.projects.delete_many([project.id, project.id]) == 1
    assert await storage.projects.list_all() == []


# --- Filters and ordering -----------------------------------------------------

async def test_user_type_filter_keeps_insertion_order(storage, user_data):
    await storage.users.create(user_data("h1", "hacker"))
    await storage.users.create(user_data("c1", "client"))
    await storage.users.create(user_data("h2", "hacker"))
    hackers = await storage.users.list_all(user_type=UserType.HACKER)
    assert [u.username for u in hackers] == ["h1", "h2"]
    assert len(await storage.users.list_all()) == 3


async def test_status_filter(storage, project_data):
    await storage.projects.create(project_data())
    second = await storage.projects.create(project_data())
    await storage.projects.update(second.id, {"status": "in-progress"})
    in_progress = await storage.projects.list_all(status="in-progress")
    assert [p.id for p in in_progress] == [second.id]


async def test_lookup_by_username_and_email_is_case_insensitive(storage, user_data):
    user = await storage.users.create(user_data("Alice"))
    assert (await storage.users.get_by_username("aLiCe")).id == user.id
    assert (await storage.users.get_by_email("ALICE@EXAMPLE.COM")).id == user.id
    assert await storage.users.get_by_username("nobody") is None


# --- Server-forced fields -----------------------------------------------------

async def test_application_created_pending(storage):
    application = await storage.applications.create({
        "project_id": 1, "hacker_id": 2, "proposal": "p",
        "estimated_time": "1w", "price_quote": "$1", "status": "accepted",
    })
    assert application.status == "pending"


async def test_contact_message_created_unread(storage):
    message = await storage.contact_messages.create({
        "name": "n", "email": "n@x.io", "subject": "s", "message": "m",
        "inquiry_type": "support", "is_read": True,
    })
    assert message.is_read is False


# --- Projects with skills -----------------------------------------------------

async def test_project_with_skills_round_trip(storage, project_data):
    project, skills = await storage.create_project_with_skills(
        project_data(), ["web", "api", "web"],
    )
    stored = await storage.project_skills.list_all(project_id=project.id)
    assert [s.skill for s in stored] == ["web", "api", "web"]
    assert [s.id for s in stored] == [s.id for s in skills]


async def test_project_delete_does_not_cascade(storage, project_data):
    project, _ = await storage.create_project_with_skills(project_data(), ["web"])
    await storage.applications.create({
        "project_id": project.id, "hacker_id": 2, "proposal": "p",
        "estimated_time": "1w", "price_quote": "$1",
    })
    await storage.reviews.create({
        "project_id": project.id, "client_id": 1, "hacker_id": 2, "rating": 5,
    })

    assert await storage.projects.delete(project.id)

    assert len(await storage.project_skills.list_all(project_id=project.id)) == 1
    assert len(await storage.applications.list_all(project_id=project.id)) == 1
    assert len(await storage.reviews.list_all(project_id=project.id)) == 1


async def test_project_with_skills_is_all_or_nothing(storage, project_data):
    with pytest.raises((TypeError, DatabaseError)):
        await storage.create_project_with_skills(project_data(), ["web", None])
    assert await storage.projects.list_all() == []
    assert await storage.project_skills.list_all() == []


async def test_health_check(storage):
    assert await storage.health_check() is True
