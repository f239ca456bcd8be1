from musician_site.models import ContentBlock


def test_content_listing_is_public(client):
    response = client.get("/api/content")
    assert response.status_code == 200
    assert response.json() == []


def test_content_upsert_keeps_one_row_per_key(admin_client, db):
    first = admin_client.post(
        "/api/content", json={"key": "bio_en", "content": "Old bio", "section": "about"}
    )
    second = admin_client.post(
        "/api/content", json={"key": "bio_en", "content": "New bio", "section": "home"}
    )
    assert first.status_code == 200
    assert second.status_code == 200
    assert second.json()["id"] == first.json()["id"]

    blocks = db.query(ContentBlock).filter(ContentBlock.key == "bio_en").all()
    assert len(blocks) == 1
    assert blocks[0].content == "New bio"
    # only the content is overwritten on conflict
    assert blocks[0].section == "about"


def test_content_upsert_distinct_keys(admin_client):
    admin_client.post("/api/content", json={"key": "bio_en", "content": "EN", "section": "about"})
    admin_client.post("/api/content", json={"key": "bio_fr", "content": "FR", "section": "about"})

    listing = admin_client.get("/api/content").json()
    assert {b["key"]: b["content"] for b in listing} == {"bio_en": "EN", "bio_fr": "FR"}


def test_content_missing_fields_is_400(admin_client):
    response = admin_client.post("/api/content", json={"key": "bio_en"})
    assert response.status_code == 400
    fields = {e["field"] for e in response.json()["errors"]}
    assert {"content", "section"} <= fields
