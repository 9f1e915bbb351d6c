import itertools

import pytest

from artlink import create_app
from artlink.config import TestConfig
from artlink.extensions import db as _db
from artlink.models.user import User, ClientProfile, ArtistProfile

_seq = itertools.count(1)


@pytest.fixture()
def app():
    """A fresh app with an in-memory database for each test.

    No context is left pushed: every test-client request gets its own,
    so the caller is loaded from that request's token.
    """
    app = create_app(TestConfig)
    with app.app_context():
        _db.create_all()

    yield app

    with app.app_context():
        _db.session.remove()
        _db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def app_ctx(app):
    """For tests that call services or the session directly."""
    with app.app_context():
        yield app


@pytest.fixture()
def db(app_ctx):
    return _db


@pytest.fixture()
def make_user(db):
    """Create a user directly, with the profile matching its role."""
    def _make(role="client", name=None, email=None):
        n = next(_seq)
        user = User(
            name=name or f"{role.title()} {n}",
            email=email or f"{role}{n}@example.com",
            role=role,
        )
        user.set_password("secret123")
        db.session.add(user)
        db.session.flush()
        if role == "client":
            db.session.add(ClientProfile(user_id=user.id))
        elif role == "artist":
            db.session.add(ArtistProfile(user_id=user.id, title="Illustrator"))
        db.session.commit()
        return user
    return _make


@pytest.fixture()
def register(client):
    """Register through the API; returns (user payload, auth headers)."""
    def _register(role="client", name=None, email=None, password="secret123", **extra):
        n = next(_seq)
        body = {
            "name": name or f"{role.title()} {n}",
            "email": email or f"{role}{n}@example.com",
            "password": password,
            "role": role,
            **extra,
        }
        resp = client.post("/auth/register", json=body)
        assert resp.status_code == 201, resp.get_json()
        data = resp.get_json()
        return data["user"], {"Authorization": f"Bearer {data['token']}"}
    return _register
