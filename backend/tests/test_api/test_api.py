"""Tests for API endpoints."""

from __future__ import annotations

import io

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from collage.config import Settings
from collage.dependencies import get_settings
from collage.main import app
from tests.conftest import BLUE, GREEN, RED, png_base64, solid_image


client = TestClient(app)


@pytest.fixture
def encoded_images() -> list[str]:
    return [
        png_base64(solid_image(300, 200, RED)),
        png_base64(solid_image(200, 200, GREEN)),
        png_base64(solid_image(400, 200, BLUE)),
    ]


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == "0.1.0"


def test_layout_default_config():
    response = client.post("/api/layout", json={"aspect_ratios": [1.5, 1.0, 2.0]})
    assert response.status_code == 200
    data = response.json()
    assert data["container_height"] == pytest.approx(854.0)
    assert data["widow_count"] == 1
    assert len(data["boxes"]) == 3
    first = data["boxes"][0]
    assert first["left"] == pytest.approx(10.0)
    assert first["width"] == pytest.approx(618.0)
    assert first["height"] == pytest.approx(412.0)
    assert first["forced_aspect_ratio"] is False


def test_layout_custom_config():
    response = client.post(
        "/api/layout",
        json={
            "aspect_ratios": [1.5, 1.0, 2.0],
            "config": {"widow_layout_style": "center", "show_widows": True},
        },
    )
    assert response.status_code == 200
    assert response.json()["boxes"][2]["left"] == pytest.approx(118.0)


def test_layout_hidden_widows():
    response = client.post(
        "/api/layout",
        json={"aspect_ratios": [1.5, 1.0, 2.0], "config": {"show_widows": False}},
    )
    data = response.json()
    assert data["widow_count"] == 0
    assert len(data["boxes"]) == 2


def test_layout_invalid_aspect_ratio():
    response = client.post(
        "/api/layout",
        content='{"aspect_ratios": [1.5, NaN, 2.0]}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 422
    assert "Item 1" in response.json()["detail"]


def test_layout_rejects_zero_aspect_ratio():
    response = client.post("/api/layout", json={"aspect_ratios": [0.0]})
    assert response.status_code == 422
    assert "Item 0" in response.text


def test_layout_rejects_negative_aspect_ratio():
    response = client.post("/api/layout", json={"aspect_ratios": [1.0, -1.0, 7.0]})
    assert response.status_code == 422
    assert "Item 1" in response.text


def test_layout_rejects_bad_config():
    response = client.post(
        "/api/layout",
        json={"aspect_ratios": [1.0], "config": {"target_row_height": []}},
    )
    assert response.status_code == 422


def test_composite_returns_jpeg(encoded_images):
    response = client.post(
        "/api/composite",
        json={"images": encoded_images, "config": {}, "quality": 70},
    )
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/jpeg"
    assert response.headers["x-widow-count"] == "1"
    assert response.headers["x-container-height"] == "854.0"

    img = Image.open(io.BytesIO(response.content))
    assert img.size == (1060, 854)


def test_composite_uses_preset(encoded_images):
    response = client.post("/api/composite", json={"images": encoded_images})
    assert response.status_code == 200
    img = Image.open(io.BytesIO(response.content))
    assert img.width == 1300


def test_composite_bad_image():
    response = client.post("/api/composite", json={"images": ["bm90IGFuIGltYWdl"]})
    assert response.status_code == 400


def test_composite_too_many_images(encoded_images):
    app.dependency_overrides[get_settings] = lambda: Settings(composite_max_images=2)
    try:
        response = client.post("/api/composite", json={"images": encoded_images})
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 413
