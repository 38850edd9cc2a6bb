import pytest
from fastapi.testclient import TestClient

import api.main as main
from crunchem.catalog import CATEGORIES, all_calculators
from crunchem.preferences import PreferenceStore


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setattr(main, "_preferences", PreferenceStore(tmp_path / "prefs.json"))
    return TestClient(main.app)


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200 and r.json() == {"ok": True}


def test_categories_list_all_first(client):
    items = client.get("/categories").json()["items"]
    assert items[0] == {"name": "All", "count": len(all_calculators)}
    assert [i["name"] for i in items[1:]] == list(CATEGORIES)


def test_list_everything(client):
    data = client.get("/calculators").json()
    assert data["count"] == len(all_calculators)
    assert data["items"][0]["id"] == all_calculators[0].id


def test_list_by_category_and_query(client):
    data = client.get("/calculators", params={"category": "Sports", "q": "pace"}).json()
    ids = [i["id"] for i in data["items"]]
    assert "running-pace-calculator" in ids
    assert all(i["category"] == "Sports" for i in data["items"])
    assert "scores" not in data


def test_list_with_explain(client):
    data = client.get("/calculators", params={"q": "tip", "explain": "true"}).json()
    assert data["scores"][0]["calculator_id"] == data["items"][0]["id"]
    assert data["scores"][0]["title_hit"] is True


def test_detail_and_unknown(client):
    detail = client.get("/calculators/basic-calculator").json()
    assert detail["formula"]
    assert [f["id"] for f in detail["inputs"]] == ["num1", "operation", "num2"]
    assert detail["favorite"] is False
    assert client.get("/calculators/nope").status_code == 404


def test_calculate_ok(client):
    r = client.post("/calculators/tip-calculator/calculate", json={"inputs": {"bill_amount": 100}})
    body = r.json()
    assert r.status_code == 200 and body["ok"] is True
    assert body["results"][0] == {"value": 18.0, "label": "Tip Amount", "unit": "$", "format": "currency"}


def test_calculate_user_error_is_200(client):
    r = client.post("/calculators/basic-calculator/calculate",
                    json={"inputs": {"num1": 1, "operation": "divide", "num2": 0}})
    body = r.json()
    assert r.status_code == 200
    assert body["ok"] is False and body["error_kind"] == "user_input"
    assert body["error"] == "Division by zero is undefined"


def test_calculate_overflow_is_200(client):
    r = client.post("/calculators/basic-calculator/calculate",
                    json={"inputs": {"num1": "1e308", "operation": "multiply", "num2": "10"}})
    body = r.json()
    assert r.status_code == 200
    assert body["ok"] is False and body["error_kind"] == "user_input"
    assert body["error"] == "Result is too large to compute"


def test_calculate_unknown_is_404(client):
    assert client.post("/calculators/nope/calculate", json={"inputs": {}}).status_code == 404


def test_favorite_toggle_round_trip(client):
    first = client.post("/preferences/favorites/tip-calculator").json()
    assert first["favorite"] is True and first["favorites"] == ["tip-calculator"]
    assert client.get("/calculators/tip-calculator").json()["favorite"] is True
    second = client.post("/preferences/favorites/tip-calculator").json()
    assert second["favorite"] is False and second["favorites"] == []
    assert client.post("/preferences/favorites/nope").status_code == 404


def test_patch_preferences(client):
    assert client.get("/preferences").json() == {"favorites": [], "dark_mode": False, "sidebar_collapsed": False}
    body = client.patch("/preferences", json={"dark_mode": True}).json()
    assert body["dark_mode"] is True and body["sidebar_collapsed"] is False
    body = client.patch("/preferences", json={"sidebar_collapsed": True}).json()
    assert body["dark_mode"] is True and body["sidebar_collapsed"] is True
