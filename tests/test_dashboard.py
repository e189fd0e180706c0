"""
Tests for the Flask simulation service.
"""
import importlib.util
from pathlib import Path

import pytest

APP_PATH = Path(__file__).resolve().parent.parent / "dashboard" / "app.py"


@pytest.fixture(scope="module")
def client():
    spec = importlib.util.spec_from_file_location("fxagent_dashboard_app", APP_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    module.app.config["TESTING"] = True
    return module.app.test_client()


def test_defaults(client):
    resp = client.get("/defaults")
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["config"]["risk_level"] == 42
    assert data["config"]["pairs"] == ["EUR/USD", "USD/JPY", "GBP/USD"]
    assert "EUR/JPY" in data["available_pairs"]
    assert data["horizons"] == ["intraday", "swing", "position"]


def test_simulate_is_reproducible_with_seed(client):
    body = {"config": {"riskLevel": 55, "strategyFocus": "carry"}, "seed": 8}
    first = client.post("/simulate", json=body).get_json()
    second = client.post("/simulate", json=body).get_json()
    assert first["ok"] is True
    assert first == second
    assert len(first["result"]["equityCurve"]) == 220


def test_simulate_without_curve(client):
    resp = client.post("/simulate", json={"seed": 1, "include_curve": False})
    assert resp.status_code == 200
    assert "equityCurve" not in resp.get_json()["result"]


def test_simulate_rejects_invalid_config(client):
    resp = client.post("/simulate", json={"config": {"riskLevel": 0}})
    assert resp.status_code == 400
    data = resp.get_json()
    assert data["ok"] is False
    assert data["field"] == "risk_level"


def test_simulate_rejects_bad_seed(client):
    resp = client.post("/simulate", json={"seed": "abc"})
    assert resp.status_code == 400
    assert resp.get_json()["field"] == "seed"


def test_monte_carlo(client):
    resp = client.post("/monte_carlo", json={"num_runs": 4, "seed": 2})
    assert resp.status_code == 200
    summary = resp.get_json()["summary"]
    assert summary["num_runs"] == 4
    assert 0.0 <= summary["drawdown_breach_rate"] <= 1.0


def test_monte_carlo_limits_runs(client):
    resp = client.post("/monte_carlo", json={"num_runs": 10_000})
    assert resp.status_code == 400
    assert resp.get_json()["field"] == "num_runs"


@pytest.mark.parametrize("route", ["/simulate", "/monte_carlo"])
@pytest.mark.parametrize("body", [{"config": "abc"}, {"config": [1, 2]}, [1], "text"])
def test_non_object_bodies_are_rejected(client, route, body):
    resp = client.post(route, json=body)
    assert resp.status_code == 400
    data = resp.get_json()
    assert data["ok"] is False
    assert data["field"] == "config"


def test_list_valued_enum_is_rejected(client):
    resp = client.post("/simulate", json={"config": {"horizon": ["swing"]}})
    assert resp.status_code == 400
    assert resp.get_json()["field"] == "horizon"


@pytest.mark.parametrize("value", ["false", 0, None])
def test_include_curve_must_be_boolean(client, value):
    resp = client.post("/simulate", json={"seed": 1, "include_curve": value})
    assert resp.status_code == 400
    assert resp.get_json()["field"] == "include_curve"
