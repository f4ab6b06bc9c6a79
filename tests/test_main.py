"""애플리케이션 진입점 및 일정 API 테스트."""

from __future__ import annotations

import importlib
import logging

from fastapi.testclient import TestClient

from tests.mocks.mock_catalog import MockAttractionCatalog, make_attraction
from wayfarer.api.dependencies import get_attraction_catalog
from wayfarer.core.config import get_settings

SECRET_HEADERS = {"x-service-secret": "test-service-secret"}


def _set_required_env(monkeypatch, **overrides: str) -> None:
    monkeypatch.setenv("SERVICE_SECRET", "test-service-secret")
    monkeypatch.setenv("DOCS_MODE", "disabled")
    for key, value in overrides.items():
        monkeypatch.setenv(key, value)
    get_settings.cache_clear()
    get_attraction_catalog.cache_clear()


def _load_main_module():
    import wayfarer.main as main_module

    return importlib.reload(main_module)


def _client(monkeypatch, **overrides: str) -> TestClient:
    _set_required_env(monkeypatch, **overrides)
    return TestClient(_load_main_module().app)


def _attraction_payload(attraction_id: str, latitude: float, longitude: float, duration: int = 60) -> dict:
    return make_attraction(attraction_id, latitude, longitude, duration=duration).model_dump(mode="json")


def test_health_check_endpoint(monkeypatch) -> None:
    client = _client(monkeypatch)

    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "message": "Wayfarer itinerary planner is running"}


def test_security_headers_are_attached(monkeypatch) -> None:
    client = _client(monkeypatch)

    response = client.get("/")

    assert response.headers["x-content-type-options"] == "nosniff"
    assert response.headers["x-frame-options"] == "DENY"
    assert response.headers["referrer-policy"] == "no-referrer"


def test_docs_disabled_by_default(monkeypatch) -> None:
    client = _client(monkeypatch)

    assert client.get("/docs").status_code == 404
    assert client.get("/openapi.json").status_code == 404


def test_docs_secret_mode_requires_service_secret(monkeypatch) -> None:
    client = _client(monkeypatch, DOCS_MODE="secret")

    assert client.get("/docs").status_code == 401
    assert client.get("/docs", headers=SECRET_HEADERS).status_code == 200


def test_cors_allowlist_from_env(monkeypatch) -> None:
    client = _client(monkeypatch, CORS_ALLOW_ORIGINS="https://example.com")

    response = client.get("/", headers={"Origin": "https://example.com"})

    assert response.headers["access-control-allow-origin"] == "https://example.com"


class _RecordingHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.messages: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())


def test_module_loggers_keep_emitting_after_logging_setup(monkeypatch) -> None:
    from wayfarer.services import itinerary_service

    _set_required_env(monkeypatch)
    _load_main_module()
    service_logger = itinerary_service.logger
    recorder = _RecordingHandler()
    root = logging.getLogger()
    root.addHandler(recorder)
    try:
        service_logger.info("itinerary request accepted")
    finally:
        root.removeHandler(recorder)

    assert service_logger.handlers
    assert service_logger.isEnabledFor(logging.INFO)
    assert "itinerary request accepted" in recorder.messages


def test_security_headers_can_be_disabled(monkeypatch) -> None:
    client = _client(monkeypatch, SECURITY_HEADERS_ENABLED="false")

    response = client.get("/")

    assert "x-frame-options" not in response.headers
    assert "cache-control" not in response.headers


def test_trusted_hosts_reject_unknown_host(monkeypatch) -> None:
    client = _client(monkeypatch, TRUSTED_HOSTS="planner.example.com")

    assert client.get("/").status_code == 400
    assert client.get("/", headers={"host": "planner.example.com"}).status_code == 200


def test_itinerary_requires_service_secret(monkeypatch) -> None:
    client = _client(monkeypatch)
    body = {"request": {"destination": "new york", "start_date": "2024-05-01", "end_date": "2024-05-02"}}

    assert client.post("/api/v1/itineraries", json=body).status_code == 401
    assert client.post("/api/v1/itineraries", json=body, headers={"x-service-secret": "wrong"}).status_code == 401


def test_create_itinerary_from_catalog(monkeypatch) -> None:
    client = _client(monkeypatch)
    body = {
        "request": {
            "destination": "San Francisco",
            "start_date": "2024-05-01",
            "end_date": "2024-05-02",
            "preferences": ["Parks & Nature"],
        }
    }

    response = client.post("/api/v1/itineraries", json=body, headers=SECRET_HEADERS)

    assert response.status_code == 200
    data = response.json()
    assert data["trip_days"] == 2
    assert [day["date"] for day in data["itinerary"]] == ["2024-05-01", "2024-05-02"]
    assert data["stats"]["total_attractions"] == 8
    for day in data["itinerary"]:
        visit_time = sum(a["estimated_duration"] for a in day["attractions"])
        assert day["total_duration"] == visit_time + day["estimated_travel_time"]


def test_create_itinerary_uses_overridden_catalog(monkeypatch) -> None:
    client = _client(monkeypatch)
    catalog = MockAttractionCatalog([make_attraction(f"m{i}", 48.85 + i * 0.01, 2.35) for i in range(4)])
    client.app.dependency_overrides[get_attraction_catalog] = lambda: catalog
    body = {"request": {"destination": "Paris", "start_date": "2024-05-01", "end_date": "2024-05-01"}}

    response = client.post("/api/v1/itineraries", json=body, headers=SECRET_HEADERS)

    client.app.dependency_overrides.clear()
    assert response.status_code == 200
    assert response.json()["stats"]["total_attractions"] == 4
    assert catalog.calls == [("Paris", [], 20)]


def test_create_itinerary_with_supplied_candidates(monkeypatch) -> None:
    client = _client(monkeypatch)
    body = {
        "request": {"destination": "Anywhere", "start_date": "2024-05-01", "end_date": "2024-05-03"},
        "candidates": [_attraction_payload(f"c{i}", 10.0 + i * 0.01, 20.0) for i in range(5)],
    }

    response = client.post("/api/v1/itineraries", json=body, headers=SECRET_HEADERS)

    assert response.status_code == 200
    assert len(response.json()["itinerary"]) == 3


def test_create_itinerary_unknown_destination_is_unprocessable(monkeypatch) -> None:
    client = _client(monkeypatch)
    body = {"request": {"destination": "Atlantis", "start_date": "2024-05-01", "end_date": "2024-05-02"}}

    response = client.post("/api/v1/itineraries", json=body, headers=SECRET_HEADERS)

    assert response.status_code == 422
    assert "Atlantis" in response.json()["detail"]


def test_create_itinerary_rejects_inverted_dates(monkeypatch) -> None:
    client = _client(monkeypatch)
    body = {"request": {"destination": "new york", "start_date": "2024-05-03", "end_date": "2024-05-01"}}

    response = client.post("/api/v1/itineraries", json=body, headers=SECRET_HEADERS)

    assert response.status_code == 422


def test_recalculate_day(monkeypatch) -> None:
    client = _client(monkeypatch)
    body = {
        "date": "2024-05-01",
        "attractions": [_attraction_payload("a", 0.0, 0.0, 30), _attraction_payload("b", 0.0, 1.0, 45)],
    }

    response = client.post("/api/v1/itineraries/days/recalculate", json=body, headers=SECRET_HEADERS)

    assert response.status_code == 200
    assert response.json()["estimated_travel_time"] == 334
    assert response.json()["total_duration"] == 30 + 45 + 334


def test_move_day_attraction(monkeypatch) -> None:
    client = _client(monkeypatch)
    day = client.post(
        "/api/v1/itineraries/days/recalculate",
        json={
            "date": "2024-05-01",
            "attractions": [_attraction_payload(x, 0.0, i * 0.1) for i, x in enumerate("abc")],
        },
        headers=SECRET_HEADERS,
    ).json()

    moved = client.post(
        "/api/v1/itineraries/days/move",
        json={"day": day, "source_index": 0, "dest_index": 2},
        headers=SECRET_HEADERS,
    )
    invalid = client.post(
        "/api/v1/itineraries/days/move",
        json={"day": day, "source_index": 5, "dest_index": 0},
        headers=SECRET_HEADERS,
    )

    assert moved.status_code == 200
    assert [a["id"] for a in moved.json()["attractions"]] == ["b", "c", "a"]
    assert invalid.status_code == 422


def test_optimize_route(monkeypatch) -> None:
    client = _client(monkeypatch)
    body = {"attractions": [_attraction_payload(x, 0.0, lng) for x, lng in (("a", 0.0), ("c", 2.0), ("b", 1.0))]}

    response = client.post("/api/v1/routes/optimize", json=body, headers=SECRET_HEADERS)

    assert response.status_code == 200
    data = response.json()
    assert [a["id"] for a in data["attractions"]] == ["a", "b", "c"]
    assert data["time_saved_minutes"] == 334
    assert data["distance_saved_km"] > 0
