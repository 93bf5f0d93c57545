"""Tests for the FastAPI formatting API (server/app.py).

WHY: Validates every endpoint's happy path and its error handling:
invalid formatter settings must come back as 422, never as 500.

HOW: Uses the FastAPI TestClient for synchronous in-process requests.
Each request builds its own formatter, so tests need no shared state
reset. Width and indent are always sent explicitly so the results do not
depend on TEXT_REFLOW_* environment defaults.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from text_reflow import __version__
from text_reflow.server.app import app

FOX = "The quick brown fox jumps over the lazy dog."
NARROW = {"columns": 20, "first_indent": 0, "body_indent": 0}


@pytest.fixture
def client():
    return TestClient(app)


# ---------------------------------------------------------------------------
# POST /format
# ---------------------------------------------------------------------------


class TestFormatEndpoint:
    """Tests for POST /format."""

    def test_left(self, client):
        resp = client.post("/format", json={"text": FOX, "config": NARROW})
        assert resp.status_code == 200
        data = resp.json()
        assert data["text"] == "The quick brown fox\njumps over the lazy\ndog.\n"
        assert data["split_words"] == []

    def test_justify(self, client):
        config = dict(NARROW, format_style="justify")
        resp = client.post("/format", json={"text": FOX, "config": config})
        assert resp.json()["text"].splitlines()[0] == "The quick brown  fox"

    def test_split_words_reported(self, client):
        config = {"columns": 5, "first_indent": 0, "hard_margins": True, "split_rules": 2}
        resp = client.post("/format", json={"text": "abcdefghij", "config": config})
        data = resp.json()
        assert data["text"] == "abcd\\\nefgh\\\nij\n"
        assert data["split_words"] == [
            {"word": "abcdefghij", "first": "abcd\\", "rest": "efghij"},
            {"word": "efghij", "first": "efgh\\", "rest": "ij"},
        ]

    def test_tag(self, client):
        config = {"columns": 20, "first_indent": 4}
        resp = client.post("/format", json={"text": "alpha", "config": config, "tag": "1."})
        assert resp.json()["text"] == "1.  alpha\n"

    def test_nobreak_pairs_as_strings(self, client):
        config = {
            "columns": 16,
            "first_indent": 0,
            "nobreak": True,
            "nobreak_pairs": [["Mrs?\\.?", "\\S+"]],
        }
        resp = client.post("/format", json={"text": "I met with Mr. Jones today", "config": config})
        assert resp.json()["text"] == "I met with\nMr. Jones today\n"

    def test_empty_text(self, client):
        resp = client.post("/format", json={"text": "", "config": NARROW})
        assert resp.status_code == 200
        assert resp.json()["text"] == ""

    @pytest.mark.parametrize("config", [
        {"split_rules": 9},
        {"format_style": "sideways"},
        {"nobreak_pairs": [["(", "x"]]},
        {"columns": "wide"},
    ])
    def test_invalid_config_returns_422(self, client, config):
        resp = client.post("/format", json={"text": FOX, "config": config})
        assert resp.status_code == 422
        assert resp.json()["detail"]

    def test_missing_text_returns_422(self, client):
        resp = client.post("/format", json={"config": NARROW})
        assert resp.status_code == 422


# ---------------------------------------------------------------------------
# POST /paragraphs
# ---------------------------------------------------------------------------


class TestParagraphsEndpoint:
    """Tests for POST /paragraphs."""

    def test_paragraphs(self, client):
        resp = client.post("/paragraphs", json={"text": "a\n\nb", "config": NARROW})
        assert resp.status_code == 200
        assert resp.json()["text"] == "a\n\nb\n"

    def test_numbered(self, client):
        config = {"columns": 20, "first_indent": 5, "body_indent": 0}
        resp = client.post(
            "/paragraphs",
            json={"text": "alpha\n\nbeta", "config": config, "tag_style": "roman"},
        )
        assert resp.json()["text"] == "i.   alpha\n\nii.  beta\n"

    def test_tag_template(self, client):
        config = {"columns": 20, "first_indent": 5, "body_indent": 0}
        resp = client.post(
            "/paragraphs",
            json={"text": "alpha", "config": config, "tag_style": "alpha", "tag_template": "({})"},
        )
        assert resp.json()["text"] == "(a)  alpha\n"

    def test_unknown_tag_style_returns_422(self, client):
        resp = client.post("/paragraphs", json={"text": "alpha", "tag_style": "greek"})
        assert resp.status_code == 422
        assert "Unknown tag style" in resp.json()["detail"]

    def test_invalid_config_returns_422(self, client):
        resp = client.post("/paragraphs", json={"text": "alpha", "config": {"split_rules": 0}})
        assert resp.status_code == 422


# ---------------------------------------------------------------------------
# POST /center and GET /health
# ---------------------------------------------------------------------------


class TestCenterEndpoint:
    """Tests for POST /center."""

    def test_center(self, client):
        resp = client.post("/center", json={"text": "abc\n\nde", "config": {"columns": 20}})
        assert resp.status_code == 200
        assert resp.json()["text"] == " " * 9 + "abc\n\n" + " " * 9 + "de\n"


class TestHealth:
    """Tests for GET /health."""

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "version": __version__}

    def test_openapi_lists_endpoints(self, client):
        paths = client.get("/openapi.json").json()["paths"]
        assert {"/format", "/paragraphs", "/center", "/health"} <= set(paths)
