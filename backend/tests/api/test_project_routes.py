"""Project routes — browse, post with skills, guarded updates, deletes.

Invariants:
    - Project + skills round trip through POST and GET
    - Status changes follow the transition table
    - Bulk delete counts only ids that existed; deletes never cascade
"""


# --- Reads --------------------------------------------------------------------

async def test_project_round_trip_with_skills(client, project):
    res = await client.get(f"/api/projects/{project['id']}")
    assert res.status_code == 200
    body = res.json()
    assert body["skills"] == ["Web Security", "API"]
    assert body["status"] == "open"
    assert body["title"] == "API pentest"


async def test_list_projects_with_client_name(client, project):
    res = await client.get("/api/projects")
    assert res.status_code == 200
    [listed] = res.json()
    assert listed["client_name"] == "Acme Person"
    assert listed["skills"] == ["Web Security", "API"]


async def test_list_projects_filtered_by_status(client, project, client_session):
    ac, _ = client_session
    await ac.patch(f"/api/projects/{project['id']}", json={"status": "in-progress"})
    assert (await client.get("/api/projects", params={"status": "open"})).json() == []
    listed = (await client.get("/api/projects", params={"status": "in-progress"})).json()
    assert [p["id"] for p in listed] == [project["id"]]


async def test_list_projects_rejects_unknown_status(client):
    assert (await client.get("/api/projects", params={"status": "archived"})).status_code == 400


async def test_get_missing_project(client):
    res = await client.get("/api/projects/999")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_client_projects(client, client_session, project):
    _, user = client_session
    res = await client.get(f"/api/clients/{user['id']}/projects")
    assert [p["id"] for p in res.json()] == [project["id"]]
    assert (await client.get("/api/clients/999/projects")).json() == []


# --- Create -------------------------------------------------------------------

async def test_create_requires_session(client, project_payload):
    assert (await client.post("/api/projects", json=project_payload())).status_code == 401


async def test_create_defaults_client_to_session_user(client_session, project):
    _, user = client_session
    assert project["client_id"] == user["id"]


async def test_create_for_another_client_forbidden(client_session, project_payload):
    ac, _ = client_session
    res = await ac.post("/api/projects", json=project_payload(client_id=1))
    assert res.status_code == 403


async def test_admin_can_post_for_a_client(admin_client, client_session, project_payload):
    _, user = client_session
    res = await admin_client.post(
        "/api/projects", json=project_payload(client_id=user["id"]),
    )
    assert res.status_code == 201
    assert res.json()["client_id"] == user["id"]


async def test_create_validation_error_writes_nothing(client_session, project_payload, storage):
    ac, _ = client_session
    res = await ac.post("/api/projects", json=project_payload(title="  "))
    assert res.status_code == 400
    assert await storage.projects.list_all() == []
    assert await storage.project_skills.list_all() == []


async def test_create_cannot_skip_the_lifecycle(client_session, project_payload, storage):
    ac, _ = client_session
    res = await ac.post("/api/projects", json=project_payload(status="completed"))
    assert res.status_code == 400
    assert res.json()["error"]["details"][0]["field"] == "body.status"
    assert await storage.projects.list_all() == []


# --- Update -------------------------------------------------------------------

async def test_owner_updates_project_keeping_other_fields(client_session, project):
    ac, _ = client_session
    res = await ac.patch(f"/api/projects/{project['id']}", json={"budget": "$7,500"})
    assert res.status_code == 200
    body = res.json()
    assert body["budget"] == "$7,500"
    assert body["title"] == project["title"]
    assert body["skills"] == project["skills"]


async def test_non_owner_cannot_update(hacker_session, project):
    ac, _ = hacker_session
    res = await ac.patch(f"/api/projects/{project['id']}", json={"budget": "$1"})
    assert res.status_code == 403


async def test_status_walks_the_lifecycle(client_session, project):
    ac, _ = client_session
    url = f"/api/projects/{project['id']}"
    assert (await ac.patch(url, json={"status": "in-progress"})).status_code == 200
    assert (await ac.patch(url, json={"status": "in-progress"})).status_code == 200
    assert (await ac.patch(url, json={"status": "completed"})).json()["status"] == "completed"


async def test_invalid_status_transition(admin_client, project):
    url = f"/api/projects/{project['id']}"
    res = await admin_client.patch(url, json={"status": "completed"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_STATUS_TRANSITION"
    await admin_client.patch(url, json={"status": "canceled"})
    assert (await admin_client.patch(url, json={"status": "open"})).status_code == 400


async def test_update_missing_project(admin_client):
    assert (await admin_client.patch("/api/projects/999", json={"budget": "x"})).status_code == 404


# --- Delete -------------------------------------------------------------------

async def test_delete_requires_admin(client_session, project):
    ac, _ = client_session
    assert (await ac.delete(f"/api/projects/{project['id']}")).status_code == 403


async def test_delete_does_not_cascade(admin_client, client, project, storage):
    res = await admin_client.delete(f"/api/projects/{project['id']}")
    assert res.json() == {"message": "Project deleted successfully"}
    assert (await client.get(f"/api/projects/{project['id']}")).status_code == 404
    assert len(await storage.project_skills.list_all(project_id=project["id"])) == 2


async def test_delete_missing_project(admin_client):
    assert (await admin_client.delete("/api/projects/999")).status_code == 404


async def test_bulk_delete_counts_existing(admin_client, client_session, project_payload):
    ac, _ = client_session
    for _ in range(2):
        await ac.post("/api/projects", json=project_payload())

    res = await admin_client.post("/api/projects/bulk-delete", json={"ids": [1, 2, 999]})

    assert res.status_code == 200
    assert res.json() == {"message": "2 projects deleted successfully", "count": 2}


async def test_bulk_delete_empty_ids(admin_client):
    res = await admin_client.post("/api/projects/bulk-delete", json={"ids": []})
    assert res.status_code == 400


async def test_bulk_delete_requires_admin(client_session):
    ac, _ = client_session
    res = await ac.post("/api/projects/bulk-delete", json={"ids": [1]})
    assert res.status_code == 403
