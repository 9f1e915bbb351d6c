import pytest


@pytest.fixture()
def accounts(register):
    client, client_h = register("client", name="Cleo Client")
    artist, artist_h = register("artist", name="Ari Artist")
    other, other_h = register("client", name="Bo Bystander")
    return {
        "client": (client, client_h),
        "artist": (artist, artist_h),
        "other": (other, other_h),
    }


def _create(client, accounts, **overrides):
    artist, _ = accounts["artist"]
    _, client_h = accounts["client"]
    body = {
        "artistId": artist["artistProfile"]["artistId"],
        "description": "Full-body character sheet",
        "price": 100,
        **overrides,
    }
    return client.post("/commissions", json=body, headers=client_h)


def test_requires_authentication(client):
    resp = client.get("/commissions/client")
    assert resp.status_code == 401
    assert resp.get_json() == {"error": "Authentication required"}


def test_bad_token_is_unauthenticated(client):
    resp = client.get("/commissions/client", headers={"Authorization": "Bearer nope"})
    assert resp.status_code == 401


def test_create_returns_pending_commission_with_parties(client, accounts):
    resp = _create(client, accounts)

    assert resp.status_code == 201
    data = resp.get_json()
    assert data["status"] == "pending"
    assert data["price"] == 100.0
    assert data["artist"]["userId"] == accounts["artist"][0]["userId"]
    assert data["client"]["userId"] == accounts["client"][0]["userId"]
    assert data["artistId"] == accounts["artist"][0]["userId"]
    assert data["progressUpdates"] == []


def test_artist_cannot_create(client, accounts):
    artist, artist_h = accounts["artist"]
    resp = client.post(
        "/commissions",
        json={"artistId": artist["userId"], "description": "Self", "price": 5},
        headers=artist_h,
    )
    assert resp.status_code == 403
    assert "error" in resp.get_json()


def test_unknown_artist_is_404(client, accounts):
    resp = _create(client, accounts, artistId=9999)
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Artist not found"}


@pytest.mark.parametrize("body", [
    {"description": "No artist", "price": 10},
    {"artistId": 1, "price": 10},
    {"artistId": 1, "description": "No price"},
    {"artistId": 1, "description": "Bad price", "price": "lots"},
])
def test_missing_fields_are_400(client, accounts, body):
    _, client_h = accounts["client"]
    resp = client.post("/commissions", json=body, headers=client_h)
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_non_object_body_is_400(client, accounts):
    _, client_h = accounts["client"]
    resp = client.post("/commissions", json=[1, 2], headers=client_h)
    assert resp.status_code == 400


def test_status_flow_over_http(client, accounts):
    cid = _create(client, accounts).get_json()["id"]
    _, client_h = accounts["client"]
    _, artist_h = accounts["artist"]
    _, other_h = accounts["other"]

    resp = client.patch(f"/commissions/{cid}/status", json={"status": "accepted"}, headers=client_h)
    assert resp.status_code == 403

    resp = client.patch(f"/commissions/{cid}/status", json={"status": "accepted"}, headers=artist_h)
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "accepted"
    assert resp.get_json()["client"]["name"] == "Cleo Client"

    resp = client.patch(f"/commissions/{cid}/status", json={"status": "completed"}, headers=other_h)
    assert resp.status_code == 403

    resp = client.patch(f"/commissions/{cid}/status", json={"status": "completed"}, headers=client_h)
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "completed"


def test_status_validation_and_missing(client, accounts):
    cid = _create(client, accounts).get_json()["id"]
    _, artist_h = accounts["artist"]

    assert client.patch(f"/commissions/{cid}/status", json={}, headers=artist_h).status_code == 400
    assert client.patch(f"/commissions/{cid}/status", json={"status": "lost"}, headers=artist_h).status_code == 400
    assert client.patch("/commissions/999/status", json={"status": "accepted"}, headers=artist_h).status_code == 404


def test_progress_updates(client, accounts):
    cid = _create(client, accounts).get_json()["id"]
    _, client_h = accounts["client"]
    _, artist_h = accounts["artist"]

    resp = client.post(f"/commissions/{cid}/progress", json={"message": "Sketch"}, headers=client_h)
    assert resp.status_code == 403

    resp = client.post(
        f"/commissions/{cid}/progress",
        json={"message": "Sketch", "imageUrl": "https://cdn.example/sketch.png"},
        headers=artist_h,
    )
    assert resp.status_code == 201
    first = resp.get_json()
    assert first["position"] == 1
    assert first["imageUrl"] == "https://cdn.example/sketch.png"

    resp = client.post(f"/commissions/{cid}/progress", json={"message": "Colour"}, headers=artist_h)
    assert resp.get_json()["position"] == 2
    assert resp.get_json()["imageUrl"] is None

    assert client.post(f"/commissions/{cid}/progress", json={}, headers=artist_h).status_code == 400
    assert client.post("/commissions/999/progress", json={"message": "x"}, headers=artist_h).status_code == 404

    detail = client.get(f"/commissions/{cid}", headers=client_h).get_json()
    assert [u["message"] for u in detail["progressUpdates"]] == ["Sketch", "Colour"]


def test_detail_access(client, accounts):
    cid = _create(client, accounts).get_json()["id"]
    _, client_h = accounts["client"]
    _, artist_h = accounts["artist"]
    _, other_h = accounts["other"]

    assert client.get(f"/commissions/{cid}", headers=client_h).status_code == 200
    assert client.get(f"/commissions/{cid}", headers=artist_h).status_code == 200
    resp = client.get(f"/commissions/{cid}", headers=other_h)
    assert resp.status_code == 403
    assert resp.get_json() == {"error": "Access denied"}
    assert client.get("/commissions/999", headers=client_h).status_code == 404


def test_listings(client, accounts):
    first = _create(client, accounts).get_json()["id"]
    second = _create(client, accounts, description="Second piece").get_json()["id"]
    artist, artist_h = accounts["artist"]
    _, client_h = accounts["client"]
    _, other_h = accounts["other"]

    mine = client.get("/commissions/client", headers=client_h).get_json()
    assert [c["id"] for c in mine] == [second, first]
    assert "artist" in mine[0] and "client" not in mine[0]

    assert client.get("/commissions/client", headers=other_h).get_json() == []

    own = client.get("/commissions/artist/", headers=artist_h).get_json()
    assert [c["id"] for c in own] == [second, first]
    assert "client" in own[0] and "artist" not in own[0]

    by_profile = client.get(f"/commissions/artist/{artist['artistProfile']['artistId']}", headers=other_h)
    assert [c["id"] for c in by_profile.get_json()] == [second, first]

    assert client.get("/commissions/artist/9999", headers=other_h).status_code == 404

    everything = client.get("/commissions", headers=other_h)
    assert everything.status_code == 200
    assert [c["id"] for c in everything.get_json()] == [second, first]


def test_list_all_admin_guard_is_opt_in(app, client, accounts):
    _create(client, accounts)
    _, other_h = accounts["other"]
    app.config["COMMISSIONS_LIST_REQUIRES_ADMIN"] = True

    assert client.get("/commissions", headers=other_h).status_code == 403
