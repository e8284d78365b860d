"""
Tests for the session middleware gating page paths.
"""
import re
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from weddingsite.api.middleware import SessionMiddleware, is_protected_path
from weddingsite.core.security import create_session_token

PREFIXES = ["/profile", "/events", "/create-event"]
PUBLIC = [re.compile(r"^/events/[^/]+/?$")]


@pytest.mark.parametrize("path, protected", [
    ("/", False),
    ("/login", False),
    ("/api/events", False),
    ("/events", True),
    ("/events/", True),
    ("/events/42", False),
    ("/events/42/edit", True),
    ("/profile/7", True),
    ("/create-event", True),
])
def test_is_protected_path(path, protected):
    assert is_protected_path(path, PREFIXES, PUBLIC) is protected


@pytest.fixture
def gated_client():
    app = FastAPI()
    app.add_middleware(SessionMiddleware, protected_prefixes=PREFIXES, public_patterns=[p.pattern for p in PUBLIC])

    @app.get("/events")
    async def events():
        return {"page": "events"}

    @app.get("/events/{event_id}")
    async def event_detail(event_id: int):
        return {"page": "event", "id": event_id}

    @app.get("/about")
    async def about():
        return {"page": "about"}

    with TestClient(app) as client:
        yield client


def test_unprotected_path_passes(gated_client):
    response = gated_client.get("/about")
    assert response.status_code == 200


def test_protected_path_without_cookie_redirects(gated_client):
    response = gated_client.get("/events", follow_redirects=False)
    assert response.status_code == 307
    assert response.headers["location"] == "http://testserver/login"


def test_protected_path_with_invalid_cookie_redirects(gated_client):
    gated_client.cookies.set("token", "garbage")
    response = gated_client.get("/events", follow_redirects=False)
    assert response.status_code == 307


def test_protected_path_with_valid_cookie_passes(gated_client):
    gated_client.cookies.set("token", create_session_token(1, "a@x.com"))
    response = gated_client.get("/events")
    assert response.status_code == 200
    assert response.json() == {"page": "events"}


def test_event_detail_is_public(gated_client):
    response = gated_client.get("/events/42", follow_redirects=False)
    assert response.status_code == 200
    assert response.json() == {"page": "event", "id": 42}


def test_api_routes_are_not_gated(client):
    """The app gates page paths only; API routes do their own auth."""
    response = client.get("/api/events", follow_redirects=False)
    assert response.status_code == 200


def test_app_gates_page_paths(client):
    response = client.get("/create-event", follow_redirects=False)
    assert response.status_code == 307
    assert response.headers["location"].endswith("/login")
