from __future__ import annotations

from dataclasses import asdict
from typing import Dict

import pandas as pd

from .config import AgentConfig
from .optimizer import round_half_up
from .sim import SimulationBatchResult, SimulationResult


def format_percent(value: float, decimals: int = 1) -> str:
    return f"{value * 100:,.{decimals}f}%"


def format_ratio(value: float, decimals: int = 2) -> str:
    return f"{value:,.{decimals}f}"


def format_currency(value: float) -> str:
    return f"${int(round_half_up(value)):,}"


def equity_curve_frame(result: SimulationResult) -> pd.DataFrame:
    """
    Equity curve as a DataFrame with columns index, equity, drawdown,
    indexed by period number.
    """
    frame = pd.DataFrame(
        [asdict(point) for point in result.equity_curve],
        columns=["index", "equity", "drawdown"],
    )
    return frame.set_index("index", drop=False).rename_axis("period")


def result_to_dict(result: SimulationResult, include_curve: bool = True) -> Dict:
    """
    Nested JSON-safe representation using the camelCase keys of the
    simulator's public contract.
    """
    opt = result.optimization
    payload = {
        "expectedAnnualReturn": result.expected_annual_return,
        "volatility": result.volatility,
        "sharpe": result.sharpe,
        "maxDrawdown": result.max_drawdown,
        "winRate": result.win_rate,
        "profitFactor": result.profit_factor,
        "capitalEfficiency": result.capital_efficiency,
        "optimization": {
            "tunedRiskLevel": opt.tuned_risk_level,
            "tunedLeverage": opt.tuned_leverage,
            "projectedReturn": opt.projected_return,
            "projectedDrawdown": opt.projected_drawdown,
            "narrative": opt.narrative,
        },
    }
    if include_curve:
        payload["equityCurve"] = [
            {"index": p.index, "equity": p.equity, "drawdown": p.drawdown}
            for p in result.equity_curve
        ]
    return payload


def summarize_simulation(config: AgentConfig, result: SimulationResult) -> Dict:
    """
    Flat summary of one simulation alongside the config that produced it.
    """
    opt = result.optimization
    return {
        "capital": config.capital,
        "risk_level": config.risk_level,
        "drawdown_target": config.drawdown_target,
        "leverage": config.leverage,
        "horizon": config.horizon,
        "strategy_focus": config.strategy_focus,
        "pairs": list(config.pairs),
        "periods": len(result.equity_curve),
        "final_equity": result.equity_curve[-1].equity if result.equity_curve else 1.0,
        "expected_annual_return": result.expected_annual_return,
        "volatility": result.volatility,
        "sharpe": result.sharpe,
        "max_drawdown": result.max_drawdown,
        "win_rate": result.win_rate,
        "profit_factor": result.profit_factor,
        "capital_efficiency": result.capital_efficiency,
        "tuned_risk_level": opt.tuned_risk_level,
        "tuned_leverage": opt.tuned_leverage,
        "projected_return": opt.projected_return,
        "projected_drawdown": opt.projected_drawdown,
        "narrative": opt.narrative,
    }


def summarize_batch(batch: SimulationBatchResult) -> Dict:
    return {
        "num_runs": batch.num_runs,
        "average_return": batch.average_return,
        "median_return": batch.median_return,
        "average_max_drawdown": batch.average_max_drawdown,
        "p90_max_drawdown": batch.p90_max_drawdown,
        "average_sharpe": batch.average_sharpe,
        "drawdown_breach_rate": batch.drawdown_breach_rate,
    }


def format_summary_lines(summary: Dict) -> list[str]:
    """Human-readable metric lines for console output."""
    return [
        f"Expected return:    {format_percent(summary['expected_annual_return'])}",
        f"Max drawdown:       {format_percent(summary['max_drawdown'])}",
        f"Sharpe:             {format_ratio(summary['sharpe'])}",
        f"Win rate:           {format_percent(summary['win_rate'])}",
        f"Profit factor:      {format_ratio(summary['profit_factor'])}",
        f"Capital efficiency: {format_currency(summary['capital_efficiency'])}",
        f"Tuned risk level:   {summary['tuned_risk_level']}",
        f"Tuned leverage:     {summary['tuned_leverage']}x",
        f"Projected return:   {format_percent(summary['projected_return'])}",
        f"Projected drawdown: {format_percent(summary['projected_drawdown'])}",
    ]
