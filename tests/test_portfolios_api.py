import pytest


@pytest.fixture()
def artist(register):
    user, headers = register("artist", name="Mira Okafor")
    return user["artistProfile"]["artistId"], headers


def _create(client, headers, freelancer_id, **overrides):
    body = {
        "freelancerId": freelancer_id,
        "title": "Forest spirits",
        "description": "Watercolour series",
        "imageUrl": "https://cdn.example/forest.png",
        "tags": "watercolour, fantasy",
        **overrides,
    }
    return client.post("/portfolios", json=body, headers=headers)


def test_create_and_fetch(client, artist):
    fid, headers = artist

    resp = _create(client, headers, fid)
    assert resp.status_code == 201
    data = resp.get_json()
    assert data["tags"] == ["watercolour", "fantasy"]
    assert data["freelancer"]["name"] == "Mira Okafor"

    fetched = client.get(f"/portfolios/{data['id']}")
    assert fetched.status_code == 200
    assert fetched.get_json()["title"] == "Forest spirits"


def test_create_requires_auth_and_known_freelancer(client, artist):
    fid, headers = artist

    assert client.post("/portfolios", json={"freelancerId": fid, "title": "x"}).status_code == 401
    assert _create(client, headers, 999).status_code == 404
    assert _create(client, headers, fid, title="").status_code == 400


def test_tags_accept_a_list(client, artist):
    fid, headers = artist
    data = _create(client, headers, fid, tags=["ink", "ink", " noir "]).get_json()
    assert data["tags"] == ["ink", "noir"]


def test_update_and_delete(client, artist):
    fid, headers = artist
    pid = _create(client, headers, fid).get_json()["id"]

    resp = client.put(f"/portfolios/{pid}", json={"title": "Renamed", "tags": ["fantasy", "ink"]}, headers=headers)
    assert resp.status_code == 200
    assert resp.get_json()["title"] == "Renamed"
    assert resp.get_json()["tags"] == ["fantasy", "ink"]
    assert resp.get_json()["description"] == "Watercolour series"

    assert client.put("/portfolios/999", json={"title": "x"}, headers=headers).status_code == 404

    assert client.delete(f"/portfolios/{pid}", headers=headers).status_code == 204
    assert client.get(f"/portfolios/{pid}").status_code == 404
    assert client.delete(f"/portfolios/{pid}", headers=headers).status_code == 404


def test_filters(client, artist, register):
    fid, headers = artist
    other_user, _ = register("artist", name="Jon Brush")
    other_fid = other_user["artistProfile"]["artistId"]

    _create(client, headers, fid, tags="fantasy")
    _create(client, headers, other_fid, title="Portraits", tags="portrait")

    assert len(client.get("/portfolios").get_json()) == 2

    by_freelancer = client.get(f"/portfolios/freelancer/{fid}").get_json()
    assert [p["freelancerId"] for p in by_freelancer] == [fid]

    by_tag = client.get("/portfolios/tag/portrait").get_json()
    assert [p["title"] for p in by_tag] == ["Portraits"]

    by_name = client.get("/portfolios/name/mira").get_json()
    assert [p["freelancerId"] for p in by_name] == [fid]


@pytest.mark.parametrize("path", [
    "/portfolios/freelancer/999",
    "/portfolios/tag/nothing",
    "/portfolios/name/nobody",
])
def test_empty_filters_are_404(client, path):
    resp = client.get(path)
    assert resp.status_code == 404
    assert "error" in resp.get_json()


@pytest.mark.parametrize("body", [
    {"title": 123},
    {"description": False},
    {"imageUrl": ["a.png"]},
    {"freelancerId": "abc"},
])
def test_update_rejects_wrongly_typed_fields(client, artist, body):
    fid, headers = artist
    pid = _create(client, headers, fid).get_json()["id"]

    resp = client.put(f"/portfolios/{pid}", json=body, headers=headers)

    assert resp.status_code == 400
    assert "error" in resp.get_json()
    assert client.get(f"/portfolios/{pid}").get_json()["title"] == "Forest spirits"
