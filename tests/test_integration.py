import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from refund_eval.config import settings
from refund_eval.main import create_app


@pytest.fixture
def api_client(customer_file: Path) -> TestClient:
    return TestClient(create_app())


def test_health(api_client: TestClient):
    response = api_client.get(f"{settings.api_prefix}/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_list_evaluations(api_client: TestClient):
    response = api_client.get(f"{settings.api_prefix}/evaluations")

    assert response.status_code == 200
    body = response.json()
    assert [item["name"] for item in body["items"]] == ["Emma Smith", "Liam Johnson", "Sophie Muller"]
    assert [item["status"] for item in body["items"]] == ["Valid", "Invalid", "Valid"]
    assert [item["refund_window_hours"] for item in body["items"]] == [4, 4, 16]
    assert body["items"][2]["signup_at"] == "15/03/2021 - 00:00"
    assert body["items"][2]["tos"] == "New"
    assert body["failures"] == [
        {
            "name": "Noah Davis",
            "field": "Source",
            "error_type": "InvalidSourceError",
            "message": "Invalid source 'mail'",
        }
    ]
    assert body["totals"] == {"total": 4, "valid": 2, "invalid": 1, "failed": 1}


def test_export_evaluations_csv(api_client: TestClient):
    response = api_client.get(f"{settings.api_prefix}/evaluations/export")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    lines = response.text.strip().splitlines()
    assert lines[0].startswith("Name,Location,Signup Date")
    assert len(lines) == 4


def test_missing_customer_file_returns_404(api_client: TestClient, tmp_path: Path, monkeypatch):
    monkeypatch.setattr(settings, "customer_file", tmp_path / "missing.json")

    response = api_client.get(f"{settings.api_prefix}/evaluations")

    assert response.status_code == 404


def test_customer_file_that_is_not_an_array_returns_422(api_client: TestClient, tmp_path: Path, monkeypatch):
    path = tmp_path / "object.json"
    path.write_text('{"Name": "Emma Smith"}', encoding="utf-8")
    monkeypatch.setattr(settings, "customer_file", path)

    response = api_client.get(f"{settings.api_prefix}/evaluations")

    assert response.status_code == 422
    assert "JSON array" in response.json()["detail"]


def test_unreadable_row_is_reported_alongside_good_rows(api_client: TestClient, tmp_path: Path, monkeypatch):
    rows = json.loads((tmp_path / "customers.json").read_text(encoding="utf-8"))
    rows[1]["RefundTime"] = 1500
    path = tmp_path / "with_bad_row.json"
    path.write_text(json.dumps(rows), encoding="utf-8")
    monkeypatch.setattr(settings, "customer_file", path)

    response = api_client.get(f"{settings.api_prefix}/evaluations")

    assert response.status_code == 200
    body = response.json()
    assert [item["name"] for item in body["items"]] == ["Emma Smith", "Sophie Muller"]
    assert [(failure["name"], failure["field"]) for failure in body["failures"]] == [
        ("Liam Johnson", "RefundTime"),
        ("Noah Davis", "Source"),
    ]
    assert body["totals"] == {"total": 4, "valid": 2, "invalid": 0, "failed": 2}
