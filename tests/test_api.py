"""
Testy dla API (FastAPI TestClient).
"""

import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from fastapi.testclient import TestClient

from api.main import app


@pytest.fixture
def client():
    return TestClient(app)


# ═══════════════════════════════════════════════════════════════════════════
# TEST: HEALTH / SCENARIOS
# ═══════════════════════════════════════════════════════════════════════════

def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_list_scenarios(client):
    response = client.get("/api/scenarios")
    assert response.status_code == 200
    by_id = {s["id"]: s for s in response.json()}
    assert by_id["room"]["origin"] == [5, 3]
    assert by_id["open_field"]["width"] == 17


def test_scenario_fov(client):
    """open_field: cały promień 6 mieści się na mapie."""
    response = client.get("/api/scenarios/open_field/fov")
    assert response.status_code == 200
    data = response.json()
    assert data["origin"] == [8, 8]
    assert data["visible"][0] == [8, 8]
    assert data["count"] == 1 + 3 * 6 * 7


def test_unknown_scenario_404(client):
    response = client.get("/api/scenarios/nope/fov")
    assert response.status_code == 404


# ═══════════════════════════════════════════════════════════════════════════
# TEST: POST /fov
# ═══════════════════════════════════════════════════════════════════════════

def test_fov_open_field(client):
    response = client.post("/api/fov", json={"range": 2})
    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 19
    assert data["visible"][0] == [0, 0]


def test_fov_with_origin_and_walls(client):
    response = client.post("/api/fov", json={
        "origin": [3, 3],
        "range": 4,
        "walls": [[4, 3]],
    })
    visible = response.json()["visible"]
    assert visible[0] == [3, 3]
    assert [4, 3] in visible
    assert [5, 3] not in visible


def test_fov_bounded_map(client):
    """Pola poza prostokątem blokują widok, ale same są widoczne."""
    response = client.post("/api/fov", json={
        "origin": [0, 0],
        "range": 3,
        "width": 1,
        "height": 1,
    })
    data = response.json()
    assert data["visible"][0] == [0, 0]
    assert data["count"] == 7


def test_fov_corner_extension(client):
    body = {"range": 3, "walls": [[0, -1], [1, 0], [1, -1]]}
    plain = client.post("/api/fov", json=body).json()["visible"]
    body["corner_extension"] = True
    extended = client.post("/api/fov", json=body).json()["visible"]
    assert [1, -1] not in plain
    assert [1, -1] in extended


def test_fov_rejects_negative_range(client):
    response = client.post("/api/fov", json={"range": -1})
    assert response.status_code == 422


def test_fov_rejects_bad_wall(client):
    response = client.post("/api/fov", json={"range": 1, "walls": [[1, 2, 3]]})
    assert response.status_code == 422
