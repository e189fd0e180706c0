"""
Tests for profile lookup and parameter scaling.
"""
from dataclasses import replace

import pytest

from fxagent_sim.config import AVAILABLE_PAIRS, DEFAULT_AGENT_CONFIG, InvalidConfig
from fxagent_sim.scaling import (
    clamp,
    currency_diversification_bonus,
    resolve_horizon_modifier,
    resolve_strategy_profile,
    scale_parameters,
)


@pytest.mark.parametrize(
    "strategy, drift, vol",
    [
        ("trend", 0.00075, 0.0095),
        ("meanReversion", 0.00055, 0.0075),
        ("carry", 0.00065, 0.006),
        ("volatilityCapture", 0.00045, 0.0055),
    ],
)
def test_strategy_profiles(strategy, drift, vol):
    profile = resolve_strategy_profile(strategy)
    assert profile.base_drift == drift
    assert profile.base_volatility == vol


@pytest.mark.parametrize(
    "horizon, drift_mult, vol_mult",
    [("intraday", 0.65, 1.4), ("swing", 1.0, 1.0), ("position", 1.2, 0.75)],
)
def test_horizon_modifiers(horizon, drift_mult, vol_mult):
    modifier = resolve_horizon_modifier(horizon)
    assert modifier.drift_multiplier == drift_mult
    assert modifier.volatility_multiplier == vol_mult


def test_unknown_enums_raise_invalid_config():
    with pytest.raises(InvalidConfig) as excinfo:
        resolve_strategy_profile("scalping")
    assert excinfo.value.field == "strategy_focus"
    with pytest.raises(InvalidConfig) as excinfo:
        resolve_horizon_modifier("monthly")
    assert excinfo.value.field == "horizon"


def test_diversification_bonus_empty():
    assert currency_diversification_bonus([]) == 1.0


def test_diversification_bonus_counts_unique_bases_and_quotes():
    bonus = currency_diversification_bonus(["EUR/USD", "GBP/USD", "USD/JPY"])
    assert bonus == pytest.approx(1.075)


def test_diversification_bonus_skips_malformed_entries():
    assert currency_diversification_bonus(["EURUSD", "/USD", "EUR/", ""]) == 1.0
    assert currency_diversification_bonus(["EUR/USD", "junk"]) == pytest.approx(1.03)


def test_diversification_bonus_is_capped():
    # 5 bases + 4 quotes
    assert currency_diversification_bonus(AVAILABLE_PAIRS) == pytest.approx(1.135)
    many = [f"C{i}/Q{i}" for i in range(20)]
    assert currency_diversification_bonus(many) == 1.15


def test_scale_parameters_default_config():
    params = scale_parameters(DEFAULT_AGENT_CONFIG)
    assert params.diversification_bonus == pytest.approx(1.075)
    assert params.risk_scalar == pytest.approx(1.188)
    assert params.leverage_scalar == pytest.approx(1.1)
    assert params.normalized_leverage == pytest.approx(1.1)
    assert params.drawdown_discipline == pytest.approx(0.92)
    assert params.adjusted_drift == pytest.approx(0.00075 * 1.075 * (0.85 + 0.35 * 0.92))
    assert params.adjusted_volatility == pytest.approx(0.0095 * 1.075 * 1.188 * 0.93)


@pytest.mark.parametrize("leverage, expected", [(1, 0.8), (10, 1.6), (20, 2.2)])
def test_leverage_is_clamped(leverage, expected):
    params = scale_parameters(replace(DEFAULT_AGENT_CONFIG, leverage=leverage))
    assert params.normalized_leverage == pytest.approx(expected)


@pytest.mark.parametrize("target, expected", [(2, 0.95), (30, 0.7), (80, 0.35)])
def test_drawdown_discipline_is_clamped(target, expected):
    params = scale_parameters(replace(DEFAULT_AGENT_CONFIG, drawdown_target=target))
    assert params.drawdown_discipline == pytest.approx(expected)


def test_clamp():
    assert clamp(5, 0, 1) == 1
    assert clamp(-5, 0, 1) == 0
    assert clamp(0.5, 0, 1) == 0.5
