"""
Request helpers shared by API tests.
"""

EVENT_PAYLOAD = {
    "title": "Anna & Ben",
    "date": "2030-06-15",
    "time": "15:00",
    "description": "Join us for our wedding",
    "venue": {
        "name": "Rose Garden",
        "address": "1 Garden Lane",
        "maps_link": "https://maps.example.com/rose-garden",
    },
    "contact_info": {
        "bride_contact": "555-0100",
        "groom_contact": "555-0101",
        "rsvp_contact": "555-0102",
    },
    "schedule": [
        {"time": "15:00", "activity": "Ceremony"},
        {"time": "17:00", "activity": "Reception"},
    ],
    "gift_info": {"bank_account": "DE00 1234", "message": "Your presence is enough"},
}


def signup(client, name="Anna", email="anna@example.com", password="secret123"):
    """Register through the API; the client's cookie jar then holds the session."""
    response = client.post(
        "/api/auth/signup",
        json={"name": name, "email": email, "password": password}
    )
    assert response.status_code == 201, response.text
    return response.json()["user"]


def create_event(client, **overrides):
    payload = {**EVENT_PAYLOAD, **overrides}
    response = client.post("/api/events", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def post_status(client, content="Hello", **extra):
    response = client.post("/api/statuses", json={"content": content, **extra})
    assert response.status_code == 201, response.text
    return response.json()
