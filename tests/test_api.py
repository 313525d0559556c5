"""
FastAPI endpoint tests for the Number Speller API.

Uses httpx + FastAPI TestClient — no real server needed.
"""

from __future__ import annotations

import api
import pytest
from api import app
from fastapi.testclient import TestClient

from number_speller.config import Settings
from number_speller.pipeline import SpellPipeline
from number_speller.validators import number_constraints

client = TestClient(app)


@pytest.fixture(scope="module", autouse=True)
def _warm_pipeline() -> None:
    """Initialise the pipeline once for all API tests (bypasses lifespan)."""
    api._pipeline = SpellPipeline()
    yield  # type: ignore[misc]
    api._pipeline = None


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["max_digits"] == 101

    def test_uninitialised_pipeline_returns_503(self, monkeypatch) -> None:
        monkeypatch.setattr(api, "_pipeline", None)
        assert client.get("/health").status_code == 503
        assert client.post("/spell", json={"number": "1"}).status_code == 503


class TestSpellEndpoint:
    def test_spells_number(self) -> None:
        resp = client.post("/spell", json={"number": "1,001"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["number_in_digits"] == "1001"
        assert data["number_in_words"] == "one thousand one "
        assert data["number_in_words_and_digits"] == "1 thousand 1 "
        assert data["number_length"] == 4
        assert data["verified"] is True

    def test_group_breakdown(self) -> None:
        data = client.post("/spell", json={"number": "100020"}).json()
        groups = data["groups"]
        assert [g["digits"] for g in groups] == ["100", "020"]
        assert [g["scale_name"] for g in groups] == ["thousand", ""]
        assert groups[1]["words"] == "twenty"

    def test_path_variant(self) -> None:
        resp = client.get("/spell/1000000")
        assert resp.status_code == 200
        data = resp.json()
        assert data["number_in_words"] == "one million "
        assert data["number_in_words_and_digits"] == "1 million "

    def test_largest_number(self) -> None:
        data = client.post("/spell", json={"number": "9" * 101}).json()
        assert data["number_length"] == 101
        assert data["number_in_words"].startswith("ninety nine duotrigintillion ")


class TestInvalidNumbers:
    def test_non_digit_returns_422(self) -> None:
        resp = client.post("/spell", json={"number": "12a"})
        assert resp.status_code == 422
        detail = resp.json()["detail"]
        assert detail["code"] == "INVALID_NUMBER"
        assert "non-zero positive integer" in detail["message"]
        assert detail["details"]["reason"] == "non_digit"

    def test_zero_returns_422(self) -> None:
        resp = client.get("/spell/0")
        assert resp.status_code == 422
        assert resp.json()["detail"]["details"]["reason"] == "empty"

    def test_too_long_returns_422(self) -> None:
        resp = client.post("/spell", json={"number": "1" * 102})
        assert resp.status_code == 422
        assert resp.json()["detail"]["details"]["reason"] == "too_long"

    def test_empty_body_returns_422(self) -> None:
        resp = client.post("/spell", json={})
        assert resp.status_code == 422

    def test_empty_number_returns_422(self) -> None:
        resp = client.post("/spell", json={"number": ""})
        assert resp.status_code == 422
        detail = resp.json()["detail"]
        assert detail["code"] == "INVALID_NUMBER"
        assert detail["message"] == number_constraints()
        assert detail["details"]["reason"] == "empty"

    def test_commas_only_returns_invalid_number(self) -> None:
        detail = client.post("/spell", json={"number": ",,,"}).json()["detail"]
        assert detail["code"] == "INVALID_NUMBER"
        assert detail["details"]["reason"] == "empty"


class TestConstraintsEndpoint:
    def test_default_constraints(self) -> None:
        data = client.get("/constraints").json()
        assert data["max_digits"] == 101
        assert "should not exceed 101 digits" in data["constraints"]

    def test_follows_configured_limit(self, monkeypatch) -> None:
        monkeypatch.setattr(api, "_pipeline", SpellPipeline(Settings(max_digits=9)))
        data = client.get("/constraints").json()
        assert data["max_digits"] == 9
        assert client.post("/spell", json={"number": "1234567890"}).status_code == 422
