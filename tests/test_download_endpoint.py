"""Tests for the /api/download export endpoints."""
from __future__ import annotations

import json
import re
from urllib.parse import quote

from fastapi.testclient import TestClient

from mangamotion.server import app

client = TestClient(app)

FRAMES = [
    {"sourceImageReference": "data:image/png;base64,AAAA", "progress": 0.0, "transform": {"scale": 1.0}},
    {"sourceImageReference": "data:image/png;base64,AAAA", "progress": 1.0, "transform": {"scale": 1.5}},
]


def _assert_attachment(resp, frames):
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/json")
    disposition = resp.headers["content-disposition"]
    assert re.fullmatch(r'attachment; filename="manga-animation-\d+\.json"', disposition)
    data = json.loads(resp.text)
    assert data["frames"] == frames
    assert data["frameCount"] == len(frames)
    assert data["type"] == "animation"
    assert data["format"] == "json"
    assert data["timestamp"].endswith("Z")
    assert resp.text.startswith("{\n  ")


def test_download_round_trips_frames():
    resp = client.get(f"/api/download?frames={quote(json.dumps(FRAMES))}")
    _assert_attachment(resp, FRAMES)


def test_download_passes_through_unvalidated_frames():
    frames = ["data:image/png;base64,AAAA#frame=0&transform=%7B%7D", {"odd": True}]
    resp = client.get("/api/download", params={"frames": json.dumps(frames)})
    _assert_attachment(resp, frames)


def test_download_missing_frames_returns_400():
    resp = client.get("/api/download")
    assert resp.status_code == 400
    assert resp.json() == {"error": "No frames provided"}
    assert client.get("/api/download?frames=").status_code == 400


def test_download_malformed_frames_returns_500():
    resp = client.get("/api/download", params={"frames": "{not json"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to create download"}


def test_download_non_array_returns_500():
    resp = client.get("/api/download", params={"frames": json.dumps({"a": 1})})
    assert resp.status_code == 500
    assert "error" in resp.json()


def test_download_post_body():
    resp = client.post("/api/download", json={"frames": FRAMES})
    _assert_attachment(resp, FRAMES)


def test_download_post_missing_frames():
    resp = client.post("/api/download", json={})
    assert resp.status_code == 400
    assert resp.json() == {"error": "No frames provided"}


def test_generate_then_download():
    generated = client.post(
        "/api/generate-anime",
        json={"image": "data:image/png;base64,AAAA", "settings": {"frameCount": 5, "effect": "parallax"}},
    ).json()["frames"]
    resp = client.get("/api/download", params={"frames": json.dumps(generated)})
    _assert_attachment(resp, generated)
