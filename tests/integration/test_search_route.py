from app.main import app
from app.routers.doctor_search import get_doctor_search_service
from app.services.search_service import DoctorSearchService, FALLBACK_MESSAGE, NO_RESULTS_MESSAGE

POPULAR = {"Cardiology", "Dermatology", "Pediatrics", "Orthopedic Surgery", "Ophthalmology"}


class FailingProviderService:
    def search_providers(self, filters, limit):
        raise RuntimeError("connection refused")

    def get_fallback_providers(self, specialties):
        raise RuntimeError("connection refused")


def _use_failing_provider_service():
    app.dependency_overrides[get_doctor_search_service] = lambda: DoctorSearchService(FailingProviderService())


def test_root_liveness(client):
    res = client.get("/")
    assert res.status_code == 200
    assert res.json() == {"status": "Backend is running"}


def test_missing_query_is_rejected(client):
    res = client.post("/api/search", json={})
    assert res.status_code == 400
    assert res.json() == {"error": "Query is required"}


def test_missing_body_is_rejected(client):
    res = client.post("/api/search")
    assert res.status_code == 400
    assert res.json() == {"error": "Query is required"}


def test_blank_query_is_rejected(client):
    for query in ("", "   "):
        res = client.post("/api/search", json={"query": query})
        assert res.status_code == 400
        assert res.json()["error"] == "Query is required"


def test_full_query_is_parsed_and_filtered(client):
    res = client.post(
        "/api/search",
        json={"query": "cardiologist in Chicago Illinois who does ultrasounds"},
    )

    assert res.status_code == 200
    body = res.json()
    assert body["parsed"]["specialty"] == "Cardiology"
    assert body["parsed"]["location"]["city"] == "Chicago"
    assert body["parsed"]["location"]["state"] == "IL"
    assert "ultrasound" in body["parsed"]["procedures"]
    assert {r["npi"] for r in body["results"]} == {"1000000001", "1000000002"}
    assert "message" not in body
    assert "isFallback" not in body


def test_result_shape(client):
    res = client.post("/api/search", json={"query": "pediatrician in Boston"})

    assert res.json()["results"] == [
        {
            "npi": "1000000005",
            "first_name": "Omar",
            "last_name": "Ali",
            "specialty": "Pediatrics",
            "city": "Boston",
            "state": "MA",
            "zip": "02108",
        }
    ]


def test_gibberish_gets_fallback(client):
    res = client.post("/api/search", json={"query": "asdfghjkl"})

    assert res.status_code == 200
    body = res.json()
    assert body["isFallback"] is True
    assert body["message"] == FALLBACK_MESSAGE
    assert 0 < len(body["results"]) <= 6
    assert {r["specialty"] for r in body["results"]} <= POPULAR
    assert body["parsed"] == {
        "specialty": None,
        "location": {"city": None, "state": None, "keyword": None},
        "procedures": [],
    }


def test_no_matches_returns_guidance(client):
    res = client.post("/api/search", json={"query": "neurologist in Boston"})

    assert res.status_code == 200
    body = res.json()
    assert body["results"] == []
    assert body["message"] == NO_RESULTS_MESSAGE
    assert body["isFallback"] is False


def test_limit_is_capped_at_public_maximum(client):
    res = client.post("/api/search", json={"query": "cardiologist", "limit": 150})

    assert res.status_code == 200
    assert len(res.json()["results"]) <= 100


def test_limit_is_respected(client):
    res = client.post("/api/search", json={"query": "cardiologist", "limit": 2})
    assert len(res.json()["results"]) == 2


def test_invalid_limits_fall_back_to_defaults(client):
    for limit in ("invalid", None, 0):
        res = client.post("/api/search", json={"query": "cardiologist", "limit": limit})
        assert res.status_code == 200
        assert len(res.json()["results"]) == 3


def test_negative_limit_is_raised_to_one(client):
    res = client.post("/api/search", json={"query": "cardiologist", "limit": -1})
    assert res.status_code == 200
    assert len(res.json()["results"]) == 1


def test_data_store_failure_surfaces_as_500(client):
    _use_failing_provider_service()

    res = client.post("/api/search", json={"query": "cardiologist"})

    assert res.status_code == 500
    assert res.json() == {"error": "connection refused"}


def test_fallback_failure_never_fails_the_request(client):
    _use_failing_provider_service()

    res = client.post("/api/search", json={"query": "asdfghjkl"})

    assert res.status_code == 200
    assert res.json()["results"] == []
    assert res.json()["isFallback"] is True
