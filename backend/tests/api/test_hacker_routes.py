"""Hacker routes — directory, featured cards, profiles and profile extras.

Invariants:
    - Non-hacker ids answer 404
    - Rating is the rounded mean of the hacker's reviews, 0 without reviews
    - Only the hacker themself or an admin can add skills/certifications
"""


async def _review(client, project, hacker_id, rating, comment="Solid work"):
    res = await client.post("/api/reviews", json={
        "project_id": project["id"], "client_id": project["client_id"],
        "hacker_id": hacker_id, "rating": rating, "comment": comment,
    })
    assert res.status_code == 201, res.text


async def test_list_hackers(client, client_session, hacker_session):
    res = await client.get("/api/hackers")
    assert [h["username"] for h in res.json()] == ["neo"]


async def test_featured_hackers_without_reviews(client, hacker_session):
    [card] = (await client.get("/api/hackers/featured")).json()
    assert card["name"] == "Neo Person"
    assert card["rating"] == 0
    assert card["review_count"] == 0
    assert card["title"] == "Security Specialist"
    assert card["image_placeholder"] == "NP"


async def test_featured_hacker_rating(client, hacker_session, project):
    _, hacker = hacker_session
    for rating in (5, 4, 3):
        await _review(client, project, hacker["id"], rating)
    [card] = (await client.get("/api/hackers/featured")).json()
    assert card["rating"] == 4.0
    assert card["review_count"] == 3


async def test_hacker_profile(client, hacker_session, project):
    ac, hacker = hacker_session
    await ac.post(f"/api/hackers/{hacker['id']}/skills", json={"skill": "Cloud Security"})
    await ac.post(
        f"/api/hackers/{hacker['id']}/certifications",
        json={"name": "OSCP", "issuer": "OffSec", "date_obtained": "2024-05-01"},
    )
    await client.post("/api/applications", json={
        "project_id": project["id"], "hacker_id": hacker["id"],
        "proposal": "I will test everything", "estimated_time": "2 weeks",
        "price_quote": "$4,500",
    })
    await _review(client, project, hacker["id"], 5, comment="Excellent")

    res = await client.get(f"/api/hackers/{hacker['id']}")

    assert res.status_code == 200
    profile = res.json()
    assert profile["skills"] == ["Cloud Security"]
    assert profile["certifications"] == ["OSCP"]
    assert profile["rating"] == 5.0
    assert profile["completed_projects"] == 0
    assert profile["recent_projects"] == []
    assert profile["reviews"][0]["client_name"] == "Acme Person"
    assert profile["reviews"][0]["comment"] == "Excellent"


async def test_profile_counts_accepted_applications(client, client_session, hacker_session, project):
    owner, _ = client_session
    _, hacker = hacker_session
    application = (await client.post("/api/applications", json={
        "project_id": project["id"], "hacker_id": hacker["id"],
        "proposal": "Full scope test", "estimated_time": "1 week", "price_quote": "$3k",
    })).json()
    await owner.patch(f"/api/applications/{application['id']}", json={"status": "accepted"})

    profile = (await client.get(f"/api/hackers/{hacker['id']}")).json()
    assert profile["completed_projects"] == 1
    assert profile["recent_projects"][0]["title"] == project["title"]


async def test_profile_of_non_hacker_is_404(client, client_session):
    _, user = client_session
    res = await client.get(f"/api/hackers/{user['id']}")
    assert res.status_code == 404
    assert res.json()["error"]["context"]["resource_type"] == "Hacker"


async def test_featured_route_not_shadowed_by_id(client):
    assert (await client.get("/api/hackers/featured")).status_code == 200


async def test_add_skill_requires_owner_or_admin(client_session, hacker_session, admin_client):
    _, hacker = hacker_session
    ac, _ = client_session
    url = f"/api/hackers/{hacker['id']}/skills"
    assert (await ac.post(url, json={"skill": "Forensics"})).status_code == 403

    res = await admin_client.post(url, json={"skill": "Forensics", "years_experience": 4})
    assert res.status_code == 201
    assert res.json() == {
        "id": 1, "user_id": hacker["id"], "skill": "Forensics", "years_experience": 4,
    }


async def test_add_certification_to_non_hacker_is_404(admin_client, client_session):
    _, user = client_session
    res = await admin_client.post(
        f"/api/hackers/{user['id']}/certifications", json={"name": "CISSP"},
    )
    assert res.status_code == 404
