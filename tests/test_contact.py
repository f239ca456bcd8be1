from musician_site.models import Message


def test_contact_submission_is_public(client, db):
    response = client.post(
        "/api/contact",
        json={"name": "Awa", "email": "awa@example.com", "subject": "Booking", "message": "Are you free in May?"},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["read"] is False
    assert body["created_at"] is not None

    messages = db.query(Message).all()
    assert len(messages) == 1
    assert messages[0].read is False


def test_contact_ignores_client_read_flag(client, db):
    client.post(
        "/api/contact",
        json={"name": "Awa", "email": "awa@example.com", "message": "Hi", "read": True},
    )
    assert db.query(Message).one().read is False


def test_contact_rejects_bad_email(client, db):
    response = client.post("/api/contact", json={"name": "Awa", "email": "not-an-email", "message": "Hi"})
    assert response.status_code == 400
    assert db.query(Message).count() == 0


def test_admin_lists_and_marks_messages(admin_client):
    created = admin_client.post(
        "/api/contact", json={"name": "Awa", "email": "awa@example.com", "message": "Hi"}
    ).json()

    listing = admin_client.get("/api/contact")
    assert listing.status_code == 200
    assert [m["id"] for m in listing.json()] == [created["id"]]

    response = admin_client.patch(f"/api/contact/{created['id']}/read")
    assert response.status_code == 200
    assert response.json()["read"] is True

    assert admin_client.patch("/api/contact/999/read").status_code == 404
