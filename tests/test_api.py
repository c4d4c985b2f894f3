from fastapi.testclient import TestClient

from wego_planner.main import app
from wego_planner.schemas import INTERESTS, Offer


def _sample_payload() -> dict:
    return {
        "destination": "Goa",
        "tripType": "Domestic",
        "nights": "4",
        "budget": "50000",
        "travelers": "2",
        "startDate": "2025-06-01",
        "endDate": "2025-06-08",
        "interests": ["Beaches", "Food"],
        "rotationSeed": 1,
    }


def test_offers_endpoint_rotates_by_seed():
    client = TestClient(app)

    first = client.get("/api/offers")
    second = client.get("/api/offers", params={"seed": 2})

    assert first.status_code == 200
    assert first.json()["seed"] == 1
    assert [o["id"] for o in first.json()["offers"]] == ["q1", "q4", "q5"]
    assert first.json()["offers"][0]["price_display"] == "₹27,999"
    assert [o["id"] for o in second.json()["offers"]] == ["q3", "q5", "q4"]


def test_plan_endpoint_returns_plan():
    client = TestClient(app)

    response = client.post("/api/plan", json=_sample_payload())

    assert response.status_code == 200
    body = response.json()
    assert body["summary"] == "Plan ready for Goa • 4 night(s) • Domestic"
    assert len(body["tips"]) == 3
    assert [o["id"] for o in body["recommended_offers"]] == ["q1", "q2"]


def test_plan_endpoint_reports_field_errors():
    client = TestClient(app)
    payload = {**_sample_payload(), "destination": "", "startDate": "2025-06-10", "endDate": "2025-06-01"}

    response = client.post("/api/plan", json=payload)

    assert response.status_code == 422
    errors = response.json()["detail"]["errors"]
    assert set(errors) == {"destination", "dates"}


def test_plan_endpoint_rejects_bad_rotation_seed():
    client = TestClient(app)

    response = client.post("/api/plan", json={**_sample_payload(), "rotationSeed": "soon"})

    assert response.status_code == 422


def test_plan_endpoint_uses_configured_catalog(monkeypatch):
    offer = Offer(id="solo", destination="Goa, India", price=20000, nights=4, rating=4.5, tags=("Beaches",))
    monkeypatch.setattr("wego_planner.main.CATALOG", (offer,))
    client = TestClient(app)

    response = client.post("/api/plan", json={**_sample_payload(), "budget": 20000, "interests": ["Beaches"]})

    assert response.status_code == 200
    assert [o["id"] for o in response.json()["recommended_offers"]] == ["solo"]


def test_reference_endpoints():
    client = TestClient(app)

    assert client.get("/api/interests").json() == list(INTERESTS)
    defaults = client.get("/api/planner/defaults").json()
    assert defaults["nights"] == 4
    assert defaults["budget"] == 50000


def test_contact_endpoint():
    client = TestClient(app)

    rejected = client.post("/api/contact", json={"name": "Kabir", "email": "kabir@", "message": "hi"})
    assert rejected.status_code == 422
    assert set(rejected.json()["detail"]["errors"]) == {"email", "message"}

    accepted = client.post(
        "/api/contact",
        json={"name": "Kabir", "email": "kabir@example.com", "message": "Loved the Dubai itinerary."},
    )
    assert accepted.status_code == 202
    assert accepted.json() == {"status": "received"}
