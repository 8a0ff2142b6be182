import pytest
from fastapi.testclient import TestClient

from lead_engine.api import endpoints
from lead_engine.api.endpoints import app


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["version"] == "1.0.0"
    assert "timestamp" in body


def test_root_lists_endpoints(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "Analyze Lead" in response.json()["endpoints"]


def test_analyze_lead(client, sample_leads):
    lead = sample_leads[0]
    response = client.post("/api/analyze-lead", json={"job": lead["job"], "company": lead["company"]})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    data = body["data"]
    assert data["totalScore"] == 100
    assert data["priority"] == "high"
    assert data["jobAnalysis"] == {"score": 100, "level": "c_level", "department": "unknown"}
    assert data["companyAnalysis"] == {
        "tier": "enterprise",
        "weight": 100,
        "employees": 1500,
        "industry": "Technology",
        "location": "San Francisco, CA",
    }
    assert len(data["insights"]) == 3
    assert "timestamp" in data


@pytest.mark.parametrize(
    "payload",
    [
        {"job": {"title": "CEO"}},
        {"company": {"employees": 10}},
        {},
        {"job": None, "company": None},
    ],
)
def test_analyze_lead_missing_fields(client, payload):
    response = client.post("/api/analyze-lead", json=payload)
    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields: job and company data"}


def test_analyze_lead_invalid_payload(client):
    response = client.post(
        "/api/analyze-lead",
        json={"job": {"title": "CEO"}, "company": {"employees": "lots"}},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request payload"


def test_analyze_lead_accepts_fractional_count_and_object_company(client):
    response = client.post(
        "/api/analyze-lead",
        json={
            "job": {"title": "SVP of Sales", "company": {"name": "StartupXYZ"}},
            "company": {"employees": 9.5},
        },
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["jobAnalysis"] == {"score": 90, "level": "c_level", "department": "sales"}
    assert data["companyAnalysis"]["tier"] == "startup"
    assert data["companyAnalysis"]["employees"] == 9.5


def test_batch_analyze(client, sample_leads):
    leads = sample_leads + [{"id": "broken", "company": {"employees": 10}}]
    response = client.post("/api/batch-analyze", json={"leads": leads})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["processed"] == 5
    results = body["results"]
    assert [r["success"] for r in results] == [True, True, True, True, False]
    assert results[1]["id"] == "test-2"
    assert results[1]["analysis"]["totalScore"] == 65
    assert results[1]["analysis"]["insights"] == [
        "Sales professional - likely understands value of sales tools"
    ]
    assert "error" not in results[0]
    assert results[4] == {
        "id": "broken",
        "success": False,
        "error": "Missing required fields: job and company data",
    }


@pytest.mark.parametrize("payload", [{"leads": "nope"}, {"leads": {"a": 1}}, {}])
def test_batch_analyze_requires_array(client, payload):
    response = client.post("/api/batch-analyze", json=payload)
    assert response.status_code == 400
    assert response.json() == {"error": "Leads must be an array"}


def test_analysis_criteria(client):
    response = client.get("/api/analysis-criteria")
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["companyTiers"]["startup"] == {"weight": 40, "employee_range": [1, 9]}


def test_unknown_route(client):
    response = client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"error": "Endpoint not found"}


def _explode(job, company):
    raise RuntimeError("database password leaked")


def test_internal_error_hides_details(monkeypatch):
    monkeypatch.setattr(endpoints.engine, "analyze_lead", _explode)
    monkeypatch.setitem(endpoints.API_CONFIG, "environment", "production")
    client = TestClient(app, raise_server_exceptions=False)

    response = client.post("/api/analyze-lead", json={"job": {}, "company": {}})
    assert response.status_code == 500
    assert response.json() == {"error": "Something went wrong!", "message": "Internal server error"}


def test_internal_error_details_in_development(monkeypatch):
    monkeypatch.setattr(endpoints.engine, "analyze_lead", _explode)
    monkeypatch.setitem(endpoints.API_CONFIG, "environment", "development")
    client = TestClient(app, raise_server_exceptions=False)

    response = client.post("/api/analyze-lead", json={"job": {}, "company": {}})
    assert response.status_code == 500
    assert response.json()["message"] == "database password leaked"
