"""Contact routes — public form submission and the admin inbox."""

MESSAGE = {
    "name": "Jane Doe",
    "email": "jane@corp.io",
    "subject": "Pentest quote",
    "message": "We need a quote for an external assessment.",
    "inquiry_type": "project",
}


async def test_submit_contact_message(client, storage):
    res = await client.post("/api/contact", json=MESSAGE)
    assert res.status_code == 201
    assert res.json() == {"success": True, "message": "Your message has been sent"}
    [stored] = await storage.contact_messages.list_all()
    assert stored.is_read is False
    assert stored.inquiry_type == "project"


async def test_invalid_contact_message(client, storage):
    res = await client.post("/api/contact", json={**MESSAGE, "email": "nope"})
    assert res.status_code == 400
    assert any(d["field"] == "body.email" for d in res.json()["error"]["details"])
    assert await storage.contact_messages.list_all() == []


async def test_inbox_requires_admin(client, client_session):
    assert (await client.get("/api/contact-messages")).status_code == 401
    ac, _ = client_session
    assert (await ac.get("/api/contact-messages")).status_code == 403


async def test_admin_reads_and_marks_message(client, admin_client):
    await client.post("/api/contact", json=MESSAGE)

    [message] = (await admin_client.get("/api/contact-messages")).json()
    assert message["subject"] == "Pentest quote"
    assert message["is_read"] is False

    res = await admin_client.patch(f"/api/contact-messages/{message['id']}/read")
    assert res.status_code == 200
    assert res.json()["is_read"] is True


async def test_mark_missing_message(admin_client):
    assert (await admin_client.patch("/api/contact-messages/999/read")).status_code == 404
