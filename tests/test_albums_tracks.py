"""
Discography routes: albums and tracks CRUD, hidden filtering and the
featured track lookup.
"""


def _create(client, path, payload):
    response = client.post(path, json=payload)
    assert response.status_code == 201, response.text
    return response.json()


# ===========================================================================
# Albums
# ===========================================================================


def test_create_album_then_list(admin_client, album_payload):
    album = _create(admin_client, "/api/albums", album_payload)
    assert isinstance(album["id"], int)
    assert album["hidden"] is False

    listing = admin_client.get("/api/albums").json()
    assert [a["id"] for a in listing] == [album["id"]]
    assert listing[0]["title"] == "Sissan"


def test_albums_listed_newest_first(admin_client, album_payload):
    for date in ("2019-05-01T00:00:00", "2024-03-01T00:00:00", "2021-07-15T00:00:00"):
        _create(admin_client, "/api/albums", dict(album_payload, release_date=date))

    dates = [a["release_date"] for a in admin_client.get("/api/albums").json()]
    assert dates == sorted(dates, reverse=True)


def test_album_update_replaces_whole_record(admin_client, album_payload):
    album = _create(admin_client, "/api/albums", album_payload)

    response = admin_client.patch(
        f"/api/albums/{album['id']}",
        json={"title": "Sissan (Deluxe)", "cover_image": "/uploads/cover-2"},
    )
    assert response.status_code == 200
    updated = response.json()
    assert updated["title"] == "Sissan (Deluxe)"
    assert updated["cover_image"] == "/uploads/cover-2"
    # omitted fields are not carried over
    assert updated["description"] is None
    assert updated["spotify_url"] is None
    assert updated["release_date"] is None


def test_album_update_unknown_id_is_404(admin_client, album_payload):
    response = admin_client.patch("/api/albums/999", json=album_payload)
    assert response.status_code == 404


def test_album_delete_is_idempotent(admin_client, album_payload):
    album = _create(admin_client, "/api/albums", album_payload)

    assert admin_client.delete(f"/api/albums/{album['id']}").status_code == 204
    assert admin_client.get("/api/albums").json() == []
    assert admin_client.delete(f"/api/albums/{album['id']}").status_code == 204
    assert admin_client.delete("/api/albums/12345").status_code == 204


def test_album_missing_title_is_400(admin_client):
    response = admin_client.post("/api/albums", json={"cover_image": "/uploads/x"})
    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Invalid input"
    assert any(e["field"] == "title" for e in body["errors"])


def test_hidden_albums_only_listed_for_admin_on_request(admin_client, album_payload):
    _create(admin_client, "/api/albums", album_payload)
    _create(admin_client, "/api/albums", dict(album_payload, title="Secret", hidden=True))

    assert len(admin_client.get("/api/albums").json()) == 1
    assert len(admin_client.get("/api/albums", params={"includeHidden": "true"}).json()) == 2

    admin_client.post("/api/logout")
    # anonymous visitors cannot ask for hidden rows
    assert len(admin_client.get("/api/albums", params={"includeHidden": "true"}).json()) == 1


# ===========================================================================
# Tracks
# ===========================================================================


def test_track_belongs_to_album(admin_client, album_payload):
    album = _create(admin_client, "/api/albums", album_payload)
    track = _create(
        admin_client,
        "/api/tracks",
        {"album_id": album["id"], "title": "Tounganata", "audio_url": "/uploads/a1", "duration": "4:12"},
    )
    assert track["album_id"] == album["id"]
    assert track["duration"] == "4:12"
    assert track["is_single"] is False


def test_track_without_album(admin_client):
    track = _create(admin_client, "/api/tracks", {"title": "Loose single", "audio_url": "/uploads/a2", "is_single": True})
    assert track["album_id"] is None
    assert track["is_single"] is True


def test_track_update_and_delete(admin_client):
    track = _create(admin_client, "/api/tracks", {"title": "Demo", "audio_url": "/uploads/a3"})

    response = admin_client.patch(
        f"/api/tracks/{track['id']}",
        json={"title": "Final", "audio_url": "/uploads/a4", "photo_url": "/uploads/p1"},
    )
    assert response.status_code == 200
    assert response.json()["title"] == "Final"
    assert response.json()["photo_url"] == "/uploads/p1"

    admin_client.delete(f"/api/tracks/{track['id']}")
    assert admin_client.get("/api/tracks").json() == []


def test_featured_track(admin_client):
    assert admin_client.get("/api/tracks/featured").status_code == 404

    _create(admin_client, "/api/tracks", {"title": "Hidden star", "audio_url": "/u/1", "is_featured": True, "hidden": True})
    assert admin_client.get("/api/tracks/featured").status_code == 404

    star = _create(admin_client, "/api/tracks", {"title": "Star", "audio_url": "/u/2", "is_featured": True})
    response = admin_client.get("/api/tracks/featured")
    assert response.status_code == 200
    assert response.json()["id"] == star["id"]
