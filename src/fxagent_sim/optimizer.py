from __future__ import annotations

from dataclasses import dataclass
import math

from .config import AgentConfig, InvalidConfig
from .scaling import clamp


TIGHTEN_NARRATIVE = (
    "Risk controls tightened to respect the drawdown objective while preserving the core edge."
)
HEADROOM_NARRATIVE = (
    "Headroom available. Gradually increase risk until the drawdown budget is utilized."
)


@dataclass(frozen=True)
class OptimizationInsight:
    tuned_risk_level: int
    tuned_leverage: float  # one decimal
    projected_return: float
    projected_drawdown: float  # clamped to [0.02, 0.25]
    narrative: str


def round_half_up(value: float, decimals: int = 0) -> float:
    scale = 10**decimals
    return math.floor(value * scale + 0.5) / scale


def optimize_parameters(
    config: AgentConfig,
    expected_annual_return: float,
    max_drawdown: float,
) -> OptimizationInsight:
    """
    Suggest a risk level and leverage that bring the realized drawdown closer
    to the configured target. A path without drawdown passes the config through.
    """
    if config.risk_level < 1:
        raise InvalidConfig("risk_level", "must be at least 1")

    target_drawdown = config.drawdown_target / 100

    if max_drawdown == 0:
        tuned_risk = float(config.risk_level)
        tuned_leverage = float(config.leverage)
    else:
        ratio = target_drawdown / max_drawdown
        tuned_risk = clamp(config.risk_level * clamp(ratio, 0.45, 1.25) * 0.96, 8, 92)
        tuned_leverage = clamp(config.leverage * clamp(ratio, 0.5, 1.15) * 0.94, 1, 15)

    risk_ratio = tuned_risk / config.risk_level
    projected_drawdown = max_drawdown * clamp(risk_ratio, 0.5, 1.2)
    projected_return = expected_annual_return * clamp(risk_ratio, 0.6, 1.1) * 0.95

    if max_drawdown > target_drawdown:
        narrative = TIGHTEN_NARRATIVE
    else:
        narrative = HEADROOM_NARRATIVE

    return OptimizationInsight(
        tuned_risk_level=int(round_half_up(tuned_risk)),
        tuned_leverage=round_half_up(tuned_leverage, 1),
        projected_return=projected_return,
        projected_drawdown=clamp(projected_drawdown, 0.02, 0.25),
        narrative=narrative,
    )
