from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from api.main import app, get_repository
from tests.fixtures import sample_repository

client = TestClient(app)


@pytest.fixture(autouse=True)
def _sample_repository(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("POLICYBRIEF_API_KEY", raising=False)
    monkeypatch.delenv("POLICYBRIEF_STRICT_CITY", raising=False)
    repo = sample_repository()
    app.dependency_overrides[get_repository] = lambda: repo
    yield
    app.dependency_overrides.clear()


def test_healthz() -> None:
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_lists_countries_and_cities() -> None:
    r = client.get("/v1/jurisdictions")
    assert r.status_code == 200
    assert [c["code"] for c in r.json()["countries"]] == ["US", "AE", "ZZ"]

    r = client.get("/v1/jurisdictions/us/cities")
    assert r.status_code == 200
    assert r.json() == {"country_code": "US", "cities": ["Los Angeles", "New York City"]}

    r = client.get("/v1/jurisdictions/XX/cities")
    assert r.status_code == 404


def test_create_brief_snake_case() -> None:
    body = {"country_code": "US", "has_drones": True, "has_minors": True, "has_foreign_crew": True}
    r = client.post("/v1/briefs", json=body, headers={"x-request-id": "req-1"})
    assert r.status_code == 200
    j = r.json()
    assert j["request_id"] == "req-1"
    assert r.headers["x-request-id"] == "req-1"
    assert len(j["document_checklist"]) == 13
    assert j["risk_assessment"]["overall_risk"] == "MEDIUM"


def test_create_brief_camel_case_with_city() -> None:
    body = {"countryCode": "AE", "cityName": "Dubai", "hasDrones": True, "shootDate": "2025-09-01"}
    r = client.post("/v1/briefs", json=body)
    assert r.status_code == 200
    j = r.json()
    assert j["location"] == {"country": "United Arab Emirates", "country_code": "AE", "city": "Dubai"}
    assert j["document_checklist"][-1]["document"] == "Dubai Film & TV Commission permit mandatory"
    assert j["risk_assessment"]["overall_risk"] == "MEDIUM"


def test_errors_map_to_status_codes() -> None:
    r = client.post("/v1/briefs", json={"country_code": ""})
    assert r.status_code == 400
    assert r.json()["detail"] == "country_code_missing"

    r = client.post("/v1/briefs", json={"country_code": "XX"})
    assert r.status_code == 404
    assert r.json()["detail"] == "country_not_found:XX"


def test_unparseable_fields_map_to_client_errors() -> None:
    r = client.post("/v1/briefs", json={"country_code": "US", "shoot_date": "next tuesday"})
    assert r.status_code == 400
    assert r.json()["detail"] == "shoot_date_invalid:next tuesday"

    r = client.post("/v1/briefs", json={"countryCode": "US", "shootDate": "2025-06-01garbage"})
    assert r.status_code == 400

    r = client.post("/v1/briefs", json={"country_code": 123})
    assert r.status_code == 404
    assert r.json()["detail"] == "country_not_found:123"

    r = client.post("/v1/briefs", json={"country_code": "US", "shoot_date": "2025-06-01"})
    assert r.status_code == 200


def test_strict_city_from_body_or_env(monkeypatch: pytest.MonkeyPatch) -> None:
    body = {"country_code": "US", "city_name": "Dubai"}
    assert client.post("/v1/briefs", json=body).status_code == 200
    assert client.post("/v1/briefs", json=dict(body, strict_city=True)).status_code == 400

    monkeypatch.setenv("POLICYBRIEF_STRICT_CITY", "true")
    r = client.post("/v1/briefs", json=body)
    assert r.status_code == 400
    assert r.json()["detail"] == "city_country_mismatch:Dubai"


def test_api_key_required_when_configured(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POLICYBRIEF_API_KEY", "s3cret")
    assert client.post("/v1/briefs", json={"country_code": "US"}).status_code == 401
    r = client.post("/v1/briefs", json={"country_code": "US"}, headers={"x-api-key": "s3cret"})
    assert r.status_code == 200
