from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .config import (
    HORIZON_MODIFIERS,
    STRATEGY_PROFILES,
    AgentConfig,
    HorizonModifier,
    InvalidConfig,
    StrategyProfile,
)


def clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)


@dataclass(frozen=True)
class ScaledParameters:
    diversification_bonus: float
    risk_scalar: float
    leverage_scalar: float  # before clamping
    normalized_leverage: float  # leverage_scalar clamped to [0.8, 2.2]
    drawdown_discipline: float
    adjusted_drift: float
    adjusted_volatility: float


def resolve_strategy_profile(strategy_focus: str) -> StrategyProfile:
    try:
        return STRATEGY_PROFILES[strategy_focus]
    except KeyError:
        raise InvalidConfig("strategy_focus", f"unknown strategy {strategy_focus!r}") from None


def resolve_horizon_modifier(horizon: str) -> HorizonModifier:
    try:
        return HORIZON_MODIFIERS[horizon]
    except KeyError:
        raise InvalidConfig("horizon", f"unknown horizon {horizon!r}") from None


def currency_diversification_bonus(pairs: Iterable[str]) -> float:
    """
    Uplift from the number of distinct base and quote currencies, capped at 1.15.
    Entries without a "/" or with an empty side are skipped.
    """
    bases = set()
    quotes = set()
    for pair in pairs:
        parts = pair.split("/")
        if len(parts) < 2 or not parts[0] or not parts[1]:
            continue
        bases.add(parts[0])
        quotes.add(parts[1])

    return min(1.15, 1 + (len(bases) + len(quotes)) * 0.015)


def scale_parameters(config: AgentConfig) -> ScaledParameters:
    """
    Turn raw config values into the dimensionless factors used by the path
    generator. Expects a validated config.
    """
    profile = resolve_strategy_profile(config.strategy_focus)
    modifier = resolve_horizon_modifier(config.horizon)
    bonus = currency_diversification_bonus(config.pairs)

    risk_scalar = 0.6 + (config.risk_level / 100) * 1.4
    leverage_scalar = 0.6 + config.leverage / 10
    drawdown_discipline = clamp(1 - config.drawdown_target / 100, 0.35, 0.95)

    adjusted_drift = (
        profile.base_drift
        * modifier.drift_multiplier
        * bonus
        * (0.85 + (config.risk_level / 120) * drawdown_discipline)
    )
    adjusted_volatility = (
        profile.base_volatility
        * modifier.volatility_multiplier
        * bonus
        * risk_scalar
        * (0.85 + (1 - drawdown_discipline))
    )

    return ScaledParameters(
        diversification_bonus=bonus,
        risk_scalar=risk_scalar,
        leverage_scalar=leverage_scalar,
        normalized_leverage=clamp(leverage_scalar, 0.8, 2.2),
        drawdown_discipline=drawdown_discipline,
        adjusted_drift=adjusted_drift,
        adjusted_volatility=adjusted_volatility,
    )
