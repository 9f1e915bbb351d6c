from artlink.extensions import db
from artlink.models.user import User
from artlink.security import issue_token, verify_token


def test_register_client_creates_client_profile(client):
    resp = client.post("/auth/register", json={
        "name": "Cleo", "email": "Cleo@Example.com", "password": "secret123",
        "role": "client", "company": "Acme",
    })

    assert resp.status_code == 201
    data = resp.get_json()
    assert data["token"]
    assert data["user"]["email"] == "cleo@example.com"
    assert data["user"]["role"] == "client"
    assert data["user"]["clientProfile"]["company"] == "Acme"
    assert data["user"]["artistProfile"] is None


def test_register_artist_creates_artist_profile(client):
    resp = client.post("/auth/register", json={
        "name": "Ari", "email": "ari@example.com", "password": "secret123",
        "role": "artist", "title": "Concept artist",
    })

    assert resp.status_code == 201
    user = resp.get_json()["user"]
    assert user["artistProfile"]["title"] == "Concept artist"
    assert user["artistProfile"]["userId"] == user["userId"]
    assert user["clientProfile"] is None


def test_register_rejects_bad_input(client):
    base = {"name": "X", "email": "x@example.com", "password": "secret123", "role": "client"}

    assert client.post("/auth/register", json={**base, "email": "not-an-email"}).status_code == 400
    assert client.post("/auth/register", json={**base, "password": "short"}).status_code == 400
    assert client.post("/auth/register", json={**base, "role": "admin"}).status_code == 400
    assert client.post("/auth/register", json={k: v for k, v in base.items() if k != "name"}).status_code == 400


def test_duplicate_email_conflicts(client, register):
    register("client", email="dup@example.com")

    resp = client.post("/auth/register", json={
        "name": "Again", "email": "DUP@example.com", "password": "secret123", "role": "artist",
    })
    assert resp.status_code == 409


def test_login_and_me(client, register):
    register("artist", email="ari@example.com", password="secret123")

    resp = client.post("/auth/login", json={"email": "ari@example.com", "password": "secret123"})
    assert resp.status_code == 200
    token = resp.get_json()["token"]

    me = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.get_json()["user"]["email"] == "ari@example.com"


def _suspend(app, user_id):
    with app.app_context():
        u = db.session.get(User, user_id)
        u.status = "suspended"
        db.session.commit()


def test_login_failures(client, register, app):
    user, _ = register("client", email="cleo@example.com", password="secret123")

    resp = client.post("/auth/login", json={"email": "cleo@example.com", "password": "wrong123"})
    assert resp.status_code == 401
    assert resp.get_json() == {"error": "Invalid email or password."}

    _suspend(app, user["userId"])
    resp = client.post("/auth/login", json={"email": "cleo@example.com", "password": "secret123"})
    assert resp.status_code == 403


def test_suspended_user_token_is_rejected(app, client, register):
    user, headers = register("client")
    _suspend(app, user["userId"])

    assert client.get("/auth/me", headers=headers).status_code == 401


def test_each_request_loads_its_own_caller(client, register):
    a, a_headers = register("client")
    b, b_headers = register("artist")

    assert client.get("/auth/me", headers=a_headers).get_json()["user"]["userId"] == a["userId"]
    assert client.get("/auth/me", headers=b_headers).get_json()["user"]["userId"] == b["userId"]
    assert client.get("/auth/me").status_code == 401


def test_token_round_trip_and_expiry(app_ctx):
    token = issue_token(7)

    assert verify_token(token) == 7
    assert verify_token(token, max_age=-1) is None
    assert verify_token(token + "x") is None


def test_unknown_route_is_json_404(client):
    resp = client.get("/nowhere")
    assert resp.status_code == 404
    assert "error" in resp.get_json()


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "ok"
