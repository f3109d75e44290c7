"""
HTTP Service Tests
==================
"""

import pytest
from fastapi.testclient import TestClient

from enimda.main import app


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


class TestEndpoints:
    """Service endpoints."""
    
    def test_root(self, client):
        response = client.get("/")
        
        assert response.status_code == 200
        assert response.json()["service"] == "enimda"
        assert "detection" in response.json()
    
    def test_health(self, client):
        response = client.get("/health")
        
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestBordersEndpoint:
    """POST /borders."""
    
    def test_detects_borders(self, client, top_margin_image, encode_png):
        response = client.post("/borders", content=encode_png(top_margin_image))
        
        assert response.status_code == 200
        body = response.json()
        assert set(body) == {"top", "right", "bottom", "left"}
        assert 19 <= body["top"] <= 22
    
    def test_query_overrides(self, client, solid_gray, encode_png):
        response = client.post(
            "/borders",
            content=encode_png(solid_gray),
            params={"size": 50, "deep": "false", "depth": 0.5},
        )
        
        assert response.status_code == 200
        assert response.json() == {"top": 0, "right": 0, "bottom": 0, "left": 0}
    
    def test_empty_body(self, client):
        assert client.post("/borders", content=b"").status_code == 400
    
    def test_undecodable_body(self, client):
        response = client.post("/borders", content=b"not an image")
        
        assert response.status_code == 400
        assert "error" in response.json()
    
    def test_invalid_parameter(self, client, solid_gray, encode_png):
        response = client.post(
            "/borders",
            content=encode_png(solid_gray),
            params={"depth": 1.5},
        )
        
        assert response.status_code == 422
