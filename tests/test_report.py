"""
Tests for result summaries and formatting.
"""
import json

import pytest

from fxagent_sim.config import SIMULATION_PERIODS
from fxagent_sim.report import (
    equity_curve_frame,
    format_currency,
    format_percent,
    format_ratio,
    format_summary_lines,
    result_to_dict,
    summarize_simulation,
)
from fxagent_sim.sim import simulate_agent_performance


@pytest.fixture
def result(default_config):
    return simulate_agent_performance(default_config, seed=99)


def test_formatting():
    assert format_percent(0.1234) == "12.3%"
    assert format_percent(-0.05, 2) == "-5.00%"
    assert format_ratio(1.5) == "1.50"
    assert format_currency(1234.5) == "$1,235"
    assert format_currency(2_500_000.4) == "$2,500,000"


def test_equity_curve_frame(result):
    frame = equity_curve_frame(result)
    assert list(frame.columns) == ["index", "equity", "drawdown"]
    assert len(frame) == SIMULATION_PERIODS
    assert frame.index.name == "period"
    assert frame["equity"].iloc[-1] == result.equity_curve[-1].equity
    assert frame["drawdown"].max() == result.max_drawdown


def test_result_to_dict_is_json_safe(result):
    payload = result_to_dict(result)
    decoded = json.loads(json.dumps(payload))
    assert decoded["maxDrawdown"] == result.max_drawdown
    assert len(decoded["equityCurve"]) == SIMULATION_PERIODS
    assert decoded["optimization"]["tunedRiskLevel"] == result.optimization.tuned_risk_level

    assert "equityCurve" not in result_to_dict(result, include_curve=False)


def test_summarize_simulation(default_config, result):
    summary = summarize_simulation(default_config, result)
    assert summary["periods"] == SIMULATION_PERIODS
    assert summary["pairs"] == list(default_config.pairs)
    assert summary["final_equity"] == result.equity_curve[-1].equity
    assert summary["narrative"] == result.optimization.narrative

    lines = format_summary_lines(summary)
    assert lines[0].startswith("Expected return:")
    assert any(line.startswith("Tuned leverage:") and line.endswith("x") for line in lines)
