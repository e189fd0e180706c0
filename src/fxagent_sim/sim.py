from __future__ import annotations

from dataclasses import dataclass
import math
import random
import sys
from typing import List, Optional, Protocol

import numpy as np

from .config import SIMULATION_PERIODS, AgentConfig, InvalidConfig, validate_agent_config
from .logger import get_logger
from .optimizer import OptimizationInsight, optimize_parameters
from .scaling import ScaledParameters, scale_parameters
from .stats import compute_performance_stats


class RandomSource(Protocol):
    def random(self) -> float:
        """Uniform draw in [0, 1)."""


@dataclass(frozen=True)
class EquityPoint:
    index: int
    equity: float  # cumulative growth factor, starts from 1.0
    drawdown: float  # fraction below running peak


@dataclass
class PathResult:
    equity_curve: List[EquityPoint]
    period_returns: List[float]
    final_equity: float
    max_drawdown: float
    wins: int
    positive_sum: float
    negative_sum: float


@dataclass
class SimulationResult:
    expected_annual_return: float
    volatility: float
    sharpe: float
    max_drawdown: float
    win_rate: float
    profit_factor: float
    capital_efficiency: float
    equity_curve: List[EquityPoint]
    optimization: OptimizationInsight


@dataclass
class SimulationBatchResult:
    results: List[SimulationResult]
    num_runs: int
    average_return: float
    median_return: float
    average_max_drawdown: float
    p90_max_drawdown: float
    average_sharpe: float
    drawdown_breach_rate: float  # share of runs with max DD above the target


def gaussian(rng: RandomSource, mean: float, std_dev: float) -> float:
    """
    Single-variate Box-Muller draw. Consumes two uniforms and discards the
    paired sine variate; a draw of exactly 0.0 is replaced by machine epsilon.
    """
    u1 = rng.random() or sys.float_info.epsilon
    u2 = rng.random() or sys.float_info.epsilon
    z0 = math.sqrt(-2.0 * math.log(u1)) * math.cos(2 * math.pi * u2)
    return z0 * std_dev + mean


def tail_buffer(drawdown_target: float) -> float:
    return 0.02 + (drawdown_target / 100) * 0.25


def max_loss_per_period(risk_level: float) -> float:
    return -0.04 - (risk_level / 100) * 0.08


def apply_tail_risk_controls(raw_return: float, risk_level: float, drawdown_target: float) -> float:
    """
    Compress the raw return with tanh scaled by the tail buffer, then floor it
    at the per-period hard stop.
    """
    buffer = tail_buffer(drawdown_target)
    softened = math.tanh(raw_return / buffer) * buffer
    return max(softened, max_loss_per_period(risk_level))


def generate_equity_path(
    config: AgentConfig,
    params: ScaledParameters,
    rng: RandomSource,
    periods: int = SIMULATION_PERIODS,
) -> PathResult:
    """
    Run the per-period process. Each period draws, in order: the drift jitter,
    two Box-Muller uniforms for the volatility shock, and the fat-tail uniform.
    """
    leverage = params.normalized_leverage
    vol = params.adjusted_volatility

    equity = 1.0
    running_peak = 1.0
    max_drawdown = 0.0
    wins = 0
    positive_sum = 0.0
    negative_sum = 0.0
    period_returns: List[float] = []
    equity_curve: List[EquityPoint] = []

    for i in range(periods):
        drift = params.adjusted_drift * leverage * (0.95 + rng.random() * 0.1)
        vol_shock = gaussian(rng, 0, vol * leverage)
        fat_tail = (rng.random() - 0.5) * vol * 1.5 * (params.risk_scalar - 0.3)
        raw_return = drift + vol_shock + fat_tail
        controlled = apply_tail_risk_controls(
            raw_return, config.risk_level, config.drawdown_target
        )

        period_returns.append(controlled)
        equity *= 1 + controlled
        running_peak = max(running_peak, equity)
        drawdown = 0.0 if running_peak == 0 else (running_peak - equity) / running_peak
        max_drawdown = max(max_drawdown, drawdown)

        if controlled >= 0:
            wins += 1
            positive_sum += controlled
        else:
            negative_sum += abs(controlled)

        equity_curve.append(EquityPoint(index=i, equity=equity, drawdown=drawdown))

    return PathResult(
        equity_curve=equity_curve,
        period_returns=period_returns,
        final_equity=equity,
        max_drawdown=max_drawdown,
        wins=wins,
        positive_sum=positive_sum,
        negative_sum=negative_sum,
    )


def simulate_agent_performance(
    config: AgentConfig,
    rng: Optional[RandomSource] = None,
    seed: Optional[int] = None,
) -> SimulationResult:
    """
    Validate the config, generate one equity path and derive its statistics
    and the tuned parameter suggestion.

    Pass `rng` (anything with a random() method) or `seed` for reproducible
    output; otherwise a fresh generator is created for this call only.
    """
    validate_agent_config(config)
    if rng is None:
        rng = random.Random(seed)

    result = _run_simulation(config, rng)
    get_logger().info(
        f"Simulated {config.strategy_focus}/{config.horizon}: "
        f"return={result.expected_annual_return:.2%} max_dd={result.max_drawdown:.2%} "
        f"sharpe={result.sharpe:.2f}"
    )
    return result


def _run_simulation(config: AgentConfig, rng: RandomSource) -> SimulationResult:
    # expects a validated config
    params = scale_parameters(config)
    get_logger().debug(
        "Scaled params: drift=%.6f vol=%.6f leverage=%.3f bonus=%.3f",
        params.adjusted_drift,
        params.adjusted_volatility,
        params.normalized_leverage,
        params.diversification_bonus,
    )

    path = generate_equity_path(config, params, rng)
    stats = compute_performance_stats(
        period_returns=path.period_returns,
        final_equity=path.final_equity,
        max_drawdown=path.max_drawdown,
        wins=path.wins,
        positive_sum=path.positive_sum,
        negative_sum=path.negative_sum,
        capital=config.capital,
    )
    optimization = optimize_parameters(
        config,
        expected_annual_return=stats.expected_annual_return,
        max_drawdown=stats.max_drawdown,
    )

    return SimulationResult(
        expected_annual_return=stats.expected_annual_return,
        volatility=stats.volatility,
        sharpe=stats.sharpe,
        max_drawdown=stats.max_drawdown,
        win_rate=stats.win_rate,
        profit_factor=stats.profit_factor,
        capital_efficiency=stats.capital_efficiency,
        equity_curve=path.equity_curve,
        optimization=optimization,
    )


def run_randomized_simulations(
    config: AgentConfig,
    num_runs: int = 100,
    seed: Optional[int] = None,
    rng: Optional[RandomSource] = None,
) -> SimulationBatchResult:
    """
    Run repeated simulations from one request-scoped generator and aggregate
    the return and drawdown distribution. Logs one summary line per batch.
    """
    if isinstance(num_runs, bool) or not isinstance(num_runs, int) or num_runs < 1:
        raise InvalidConfig("num_runs", "must be a positive integer")
    validate_agent_config(config)
    if rng is None:
        rng = random.Random(seed)

    results: List[SimulationResult] = []
    for _ in range(num_runs):
        results.append(_run_simulation(config, rng))

    returns = np.array([r.expected_annual_return for r in results], dtype=float)
    drawdowns = np.array([r.max_drawdown for r in results], dtype=float)
    sharpes = np.array([r.sharpe for r in results], dtype=float)
    target = config.drawdown_target / 100

    batch = SimulationBatchResult(
        results=results,
        num_runs=len(results),
        average_return=float(np.mean(returns)),
        median_return=float(np.percentile(returns, 50)),
        average_max_drawdown=float(np.mean(drawdowns)),
        p90_max_drawdown=float(np.percentile(drawdowns, 90)),
        average_sharpe=float(np.mean(sharpes)),
        drawdown_breach_rate=float(np.mean(drawdowns > target)),
    )
    get_logger().info(
        f"Simulated {batch.num_runs} runs of {config.strategy_focus}/{config.horizon}: "
        f"avg_return={batch.average_return:.2%} avg_max_dd={batch.average_max_drawdown:.2%} "
        f"breach_rate={batch.drawdown_breach_rate:.2%}"
    )
    return batch
