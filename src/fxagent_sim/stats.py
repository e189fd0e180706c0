from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Sequence

from .config import TRADING_DAYS_PER_YEAR
from .scaling import clamp


@dataclass(frozen=True)
class PerformanceStats:
    average_return: float  # mean per-period return
    period_std_dev: float  # population std dev of per-period returns
    expected_annual_return: float
    volatility: float  # annualized
    sharpe: float
    win_rate: float
    profit_factor: float
    max_drawdown: float
    capital_efficiency: float


def compute_performance_stats(
    period_returns: Sequence[float],
    final_equity: float,
    max_drawdown: float,
    wins: int,
    positive_sum: float,
    negative_sum: float,
    capital: float,
) -> PerformanceStats:
    """
    Summarize a generated path.

    - Variance uses the population divisor (number of periods).
    - Annual return compounds the final growth factor by 252 / periods.
    - Sharpe is 0 when annual volatility is exactly 0.
    - Profit factor defaults to 1 when either side has no contribution,
      otherwise it is clamped to [0.4, 3.5].
    - Capital efficiency equals capital when there was no drawdown.
    """
    periods = len(period_returns)
    if periods == 0:
        return PerformanceStats(
            average_return=0.0,
            period_std_dev=0.0,
            expected_annual_return=final_equity - 1.0,
            volatility=0.0,
            sharpe=0.0,
            win_rate=0.0,
            profit_factor=1.0,
            max_drawdown=max_drawdown,
            capital_efficiency=capital,
        )

    # plain left-to-right accumulation; builtin sum() compensates float error
    total = 0.0
    for r in period_returns:
        total += r
    avg_return = total / periods

    squared = 0.0
    for r in period_returns:
        squared += (r - avg_return) ** 2
    variance = squared / periods
    std_dev = math.sqrt(variance)

    annualization_factor = TRADING_DAYS_PER_YEAR / periods
    expected_annual_return = final_equity**annualization_factor - 1
    annual_volatility = std_dev * math.sqrt(TRADING_DAYS_PER_YEAR)
    sharpe = 0.0 if annual_volatility == 0 else expected_annual_return / annual_volatility

    win_rate = wins / periods
    if positive_sum == 0 or negative_sum == 0:
        profit_factor = 1.0
    else:
        profit_factor = clamp(positive_sum / negative_sum, 0.4, 3.5)

    if max_drawdown == 0:
        capital_efficiency = capital
    else:
        capital_efficiency = capital * (expected_annual_return + 1) / max_drawdown

    return PerformanceStats(
        average_return=avg_return,
        period_std_dev=std_dev,
        expected_annual_return=expected_annual_return,
        volatility=annual_volatility,
        sharpe=sharpe,
        win_rate=win_rate,
        profit_factor=profit_factor,
        max_drawdown=max_drawdown,
        capital_efficiency=capital_efficiency,
    )
