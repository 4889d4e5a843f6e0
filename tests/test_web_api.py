"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from nginx_editor import __version__
from nginx_editor.web.app import create_app


@pytest.fixture
def client():
    return TestClient(create_app())


class TestEditorRoutes:
    """POST /api/format and /api/tokenize."""

    def test_format(self, client, messy_nginx_conf, sample_nginx_conf):
        response = client.post("/api/format", json={"content": messy_nginx_conf})

        assert response.status_code == 200
        assert response.json() == {"content": sample_nginx_conf, "changed": True}

    def test_format_unchanged(self, client, sample_nginx_conf):
        response = client.post("/api/format", json={"content": sample_nginx_conf})

        assert response.json()["changed"] is False

    def test_format_requires_content(self, client):
        response = client.post("/api/format", json={})

        assert response.status_code == 422

    def test_tokenize(self, client):
        response = client.post("/api/tokenize", json={"content": "http {"})

        assert response.status_code == 200
        assert response.json()["tokens"] == [
            {"kind": "keyword", "text": "http", "start": 0, "end": 4},
            {"kind": "brace", "text": "{", "start": 5, "end": 6},
        ]

    def test_tokenize_with_whitespace(self, client, sample_nginx_conf):
        response = client.post(
            "/api/tokenize",
            json={"content": sample_nginx_conf, "include_whitespace": True},
        )

        tokens = response.json()["tokens"]
        assert "".join(t["text"] for t in tokens) == sample_nginx_conf


class TestThemeRoutes:
    """GET /api/themes."""

    def test_list(self, client):
        response = client.get("/api/themes")

        assert response.status_code == 200
        themes = response.json()
        assert themes[0]["id"] == "nord"
        assert len(themes) == 7
        assert set(themes[0]["dark"]) == {
            "keyword", "directive", "string", "comment", "variable", "number", "operator",
        }

    def test_get_one(self, client):
        response = client.get("/api/themes/one-dark")

        assert response.status_code == 200
        assert response.json()["name"] == "One Dark"

    def test_unknown_theme_is_404(self, client):
        response = client.get("/api/themes/neon")

        assert response.status_code == 404
        assert "neon" in response.json()["detail"]


def test_health(client):
    response = client.get("/api/health")

    assert response.json() == {"status": "ok", "version": __version__}
