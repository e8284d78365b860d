"""
Tests for event endpoints and the creator-only guard.
"""
from weddingsite.models.event import Event
from weddingsite.tests.utils import EVENT_PAYLOAD, create_event, signup


def test_create_event_requires_session(client):
    response = client.post("/api/events", json=EVENT_PAYLOAD)
    assert response.status_code == 401


def test_create_event(client):
    """Creator comes from the session; the body cannot choose it."""
    user = signup(client)
    event = create_event(client, creator_id=9999, invitation_code="MINE")

    assert event["creator_id"] == user["id"]
    assert event["invitation_code"] != "MINE"
    assert len(event["invitation_code"]) == 12
    assert event["customization"] == {
        "layout": "classic",
        "primary_color": "#000000",
        "secondary_color": "#ffffff",
        "font_family": "Inter",
        "hero_image": "",
    }
    assert [item["activity"] for item in event["schedule"]] == ["Ceremony", "Reception"]


def test_invitation_codes_are_unique(client):
    signup(client)
    first = create_event(client)
    second = create_event(client)
    assert first["invitation_code"] != second["invitation_code"]


def test_create_event_validation(client):
    signup(client)
    payload = {
        **EVENT_PAYLOAD,
        "venue": {"name": " ", "address": "", "maps_link": "not a url"},
        "schedule": [{"time": "", "activity": "Ceremony"}],
    }
    response = client.post("/api/events", json=payload)
    assert response.status_code == 400
    details = response.json()["details"]
    assert set(details) == {"venue.name", "venue.address", "venue.maps_link", "schedule.0.time"}


def test_event_detail_hides_invitation_code(client_factory):
    """Neither the creator nor anonymous guests see the invitation code."""
    creator = client_factory()
    signup(creator)
    event = create_event(creator)

    for caller in (creator, client_factory()):
        response = caller.get(f"/api/events/{event['id']}")
        assert response.status_code == 200
        assert "invitation_code" not in response.json()
        assert response.json()["title"] == EVENT_PAYLOAD["title"]


def test_event_detail_not_found(client):
    response = client.get("/api/events/12345")
    assert response.status_code == 404
    assert response.json()["error"] == "Event not found"


def test_list_events(client):
    signup(client)
    for index in range(3):
        create_event(client, title=f"Event {index}")

    response = client.get("/api/events?page=1")
    assert response.status_code == 200
    body = response.json()
    assert [e["title"] for e in body["events"]] == ["Event 2", "Event 1", "Event 0"]
    assert body["has_more"] is False
    assert all("invitation_code" not in e for e in body["events"])


def test_list_events_rejects_page_zero(client):
    assert client.get("/api/events?page=0").status_code == 400


def test_update_event_by_creator(client):
    signup(client)
    event = create_event(client)

    response = client.put(
        f"/api/events/{event['id']}",
        json={"title": "New title", "venue": {"name": "Hall", "address": "2 Main St"}}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "New title"
    assert body["venue"]["name"] == "Hall"
    assert body["description"] == EVENT_PAYLOAD["description"]
    assert "invitation_code" not in body


def test_update_cannot_change_protected_fields(client, db):
    """Creator and invitation code survive an update that tries to change them."""
    user = signup(client)
    event = create_event(client)

    response = client.put(
        f"/api/events/{event['id']}",
        json={
            "title": "Renamed",
            "id": 777,
            "creator": 9999,
            "creator_id": 9999,
            "invitation_code": "HIJACKED",
        }
    )
    assert response.status_code == 200
    assert response.json()["id"] == event["id"]

    stored = db.query(Event).filter(Event.id == event["id"]).one()
    assert stored.title == "Renamed"
    assert stored.creator_id == user["id"]
    assert stored.invitation_code == event["invitation_code"]


def test_partial_block_update_stores_complete_blocks(client, db):
    """Keys omitted from an updated venue or contact block are stored with their defaults."""
    signup(client)
    event = create_event(client)

    response = client.put(
        f"/api/events/{event['id']}",
        json={
            "venue": {"name": "Hall", "address": "2 Main St"},
            "contact_info": {"bride_contact": "555-0199"},
        }
    )
    assert response.status_code == 200

    stored = db.query(Event).filter(Event.id == event["id"]).one()
    assert stored.venue == {"name": "Hall", "address": "2 Main St", "maps_link": ""}
    assert stored.contact_info == {"bride_contact": "555-0199", "groom_contact": "", "rsvp_contact": ""}


def test_update_event_by_other_user_is_forbidden(client_factory, db):
    """User B cannot update user A's event and the stored event is unchanged."""
    creator = client_factory()
    signup(creator, email="a@x.com")
    event = create_event(creator)

    other = client_factory()
    signup(other, name="Bob", email="b@x.com")
    response = other.put(f"/api/events/{event['id']}", json={"title": "Hacked"})
    assert response.status_code == 403

    stored = db.query(Event).filter(Event.id == event["id"]).one()
    assert stored.title == EVENT_PAYLOAD["title"]


def test_update_event_without_session(client_factory):
    creator = client_factory()
    signup(creator)
    event = create_event(creator)

    response = client_factory().put(f"/api/events/{event['id']}", json={"title": "Hacked"})
    assert response.status_code == 401


def test_update_missing_event(client):
    signup(client)
    response = client.put("/api/events/12345", json={"title": "Nope"})
    assert response.status_code == 404


def test_customize_event(client):
    signup(client)
    event = create_event(client)

    customization = {
        "layout": "modern",
        "primary_color": "#112233",
        "secondary_color": "#fff",
        "font_family": "Playfair Display",
        "hero_image": "https://images.example.com/hero.jpg",
    }
    response = client.put(f"/api/events/{event['id']}/customize", json=customization)
    assert response.status_code == 200
    assert response.json()["customization"] == customization


def test_customize_event_rejects_invalid_values(client):
    signup(client)
    event = create_event(client)

    response = client.put(f"/api/events/{event['id']}/customize", json={"layout": "baroque"})
    assert response.status_code == 400

    response = client.put(f"/api/events/{event['id']}/customize", json={"primary_color": "red"})
    assert response.status_code == 400
    assert "primary_color" in response.json()["details"]


def test_customize_event_by_other_user_is_forbidden(client_factory):
    creator = client_factory()
    signup(creator, email="a@x.com")
    event = create_event(creator)

    other = client_factory()
    signup(other, name="Bob", email="b@x.com")
    response = other.put(f"/api/events/{event['id']}/customize", json={"layout": "rustic"})
    assert response.status_code == 403
