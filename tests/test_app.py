"""API tests using FastAPI's TestClient."""

import pytest
from fastapi.testclient import TestClient

from app import app
from config.settings import settings
from utils.validators import InputValidator
from tests.conftest import SERVICE_AGREEMENT


API = settings.API_PREFIX


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


class TestHealth:

    def test_health(self, client):
        response = client.get(f"{API}/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["ai_model_loaded"] is False

    def test_status(self, client):
        response = client.get(f"{API}/status")

        assert response.status_code == 200
        assert response.json()["ai_model_loaded"] is False


class TestClauseTypes:

    def test_lists_taxonomy(self, client):
        body = client.get(f"{API}/clauses/types").json()

        assert body["count"] == 15
        assert body["clause_types"][0] == "payment_terms"
        assert body["keyword_counts"]["payment_terms"] == 6


class TestExtract:

    def test_service_agreement(self, client):
        response = client.post(f"{API}/clauses/extract", json = {"text": SERVICE_AGREEMENT})

        assert response.status_code == 200
        body = response.json()
        assert body["summary"]["totalClauses"] == 5
        assert body["summary"]["method"] == "rule_based"
        assert len(body["grouped"]) == 15

    def test_empty_text(self, client):
        body = client.post(f"{API}/clauses/extract", json = {"text": ""}).json()

        assert body["summary"]["totalClauses"] == 0
        assert body["clauses"] == []

    def test_without_grouping(self, client):
        body = client.post(f"{API}/clauses/extract", json = {"text": SERVICE_AGREEMENT, "group_clauses": False}).json()

        assert body["grouped"] == {}

    def test_non_string_text_rejected(self, client):
        response = client.post(f"{API}/clauses/extract", json = {"text": 123})

        assert response.status_code == 422

    def test_too_long(self, client, monkeypatch):
        monkeypatch.setattr(InputValidator, "MAX_CONTRACT_LENGTH", 10)

        response = client.post(f"{API}/clauses/extract", json = {"text": SERVICE_AGREEMENT})

        assert response.status_code == 413


class TestClassify:

    def test_force_majeure(self, client):
        response = client.post(f"{API}/clauses/classify", json = {"text": "force majeure"})

        assert response.status_code == 200
        body = response.json()
        assert body["category"] == "force_majeure"
        assert 0.6 <= body["confidence"] <= 0.7
        assert body["scores"]["force_majeure"] == 2

    def test_unknown(self, client):
        body = client.post(f"{API}/clauses/classify", json = {"text": "Lorem ipsum"}).json()

        assert body["category"] == "unknown"
        assert body["confidence"] == 0.3
