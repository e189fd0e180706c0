import os
import random
import sys
from dataclasses import asdict
from pathlib import Path

from flask import Flask, jsonify, request

ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from fxagent_sim.config import (
    AVAILABLE_PAIRS,
    DEFAULT_AGENT_CONFIG,
    STRATEGY_FOCUSES,
    TRADING_HORIZONS,
    InvalidConfig,
    agent_config_from_dict,
)
from fxagent_sim.logger import get_logger
from fxagent_sim.report import result_to_dict, summarize_batch
from fxagent_sim.sim import run_randomized_simulations, simulate_agent_performance

MAX_MONTE_CARLO_RUNS = 500

app = Flask(__name__)
logger = get_logger()


def _invalid(exc: InvalidConfig):
    logger.warning(f"Rejected config: {exc}")
    return jsonify({"ok": False, "error": exc.message, "field": exc.field}), 400


def _request_body() -> dict:
    data = request.get_json(force=True, silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidConfig("config", "expected an object")
    return data


def _request_config(data: dict):
    raw = data.get("config")
    return agent_config_from_dict({} if raw is None else raw)


def _request_rng(data: dict) -> random.Random:
    seed = data.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise InvalidConfig("seed", "must be an integer")
    # one generator per request
    return random.Random(seed)


@app.route("/defaults")
def defaults():
    config = asdict(DEFAULT_AGENT_CONFIG)
    config["pairs"] = list(DEFAULT_AGENT_CONFIG.pairs)
    return jsonify({
        "config": config,
        "available_pairs": list(AVAILABLE_PAIRS),
        "horizons": list(TRADING_HORIZONS),
        "strategies": list(STRATEGY_FOCUSES),
    })


@app.route("/simulate", methods=["POST"])
def simulate():
    try:
        data = _request_body()
        config = _request_config(data)
        rng = _request_rng(data)
        include_curve = data.get("include_curve", True)
        if not isinstance(include_curve, bool):
            raise InvalidConfig("include_curve", "must be true or false")
    except InvalidConfig as exc:
        return _invalid(exc)

    result = simulate_agent_performance(config, rng=rng)
    return jsonify({"ok": True, "result": result_to_dict(result, include_curve=include_curve)})


@app.route("/monte_carlo", methods=["POST"])
def monte_carlo():
    try:
        data = _request_body()
        config = _request_config(data)
        rng = _request_rng(data)
        num_runs = data.get("num_runs", 100)
        if isinstance(num_runs, int) and num_runs > MAX_MONTE_CARLO_RUNS:
            raise InvalidConfig("num_runs", f"must not exceed {MAX_MONTE_CARLO_RUNS}")
        batch = run_randomized_simulations(config, num_runs=num_runs, rng=rng)
    except InvalidConfig as exc:
        return _invalid(exc)

    return jsonify({"ok": True, "summary": summarize_batch(batch)})


if __name__ == "__main__":
    port = int(os.getenv("FXAGENT_DASH_PORT") or "5000")
    app.run(host="0.0.0.0", port=port, debug=False)
