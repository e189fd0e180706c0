"""FX agent performance simulator."""

from .config import (
    AVAILABLE_PAIRS,
    DEFAULT_AGENT_CONFIG,
    HORIZON_MODIFIERS,
    SIMULATION_PERIODS,
    STRATEGY_FOCUSES,
    STRATEGY_PROFILES,
    TRADING_DAYS_PER_YEAR,
    TRADING_HORIZONS,
    AgentConfig,
    HorizonModifier,
    InvalidConfig,
    StrategyProfile,
    agent_config_from_dict,
    validate_agent_config,
)
from .scaling import (
    ScaledParameters,
    currency_diversification_bonus,
    resolve_horizon_modifier,
    resolve_strategy_profile,
    scale_parameters,
)
from .stats import PerformanceStats, compute_performance_stats
from .optimizer import OptimizationInsight, optimize_parameters
from .sim import (
    EquityPoint,
    PathResult,
    RandomSource,
    SimulationBatchResult,
    SimulationResult,
    apply_tail_risk_controls,
    gaussian,
    generate_equity_path,
    run_randomized_simulations,
    simulate_agent_performance,
)
from .report import (
    equity_curve_frame,
    result_to_dict,
    summarize_batch,
    summarize_simulation,
)

__all__ = [
    "AgentConfig",
    "StrategyProfile",
    "HorizonModifier",
    "InvalidConfig",
    "STRATEGY_PROFILES",
    "HORIZON_MODIFIERS",
    "STRATEGY_FOCUSES",
    "TRADING_HORIZONS",
    "SIMULATION_PERIODS",
    "TRADING_DAYS_PER_YEAR",
    "DEFAULT_AGENT_CONFIG",
    "AVAILABLE_PAIRS",
    "agent_config_from_dict",
    "validate_agent_config",
    "ScaledParameters",
    "currency_diversification_bonus",
    "resolve_horizon_modifier",
    "resolve_strategy_profile",
    "scale_parameters",
    "PerformanceStats",
    "compute_performance_stats",
    "OptimizationInsight",
    "optimize_parameters",
    "RandomSource",
    "EquityPoint",
    "PathResult",
    "SimulationResult",
    "SimulationBatchResult",
    "gaussian",
    "apply_tail_risk_controls",
    "generate_equity_path",
    "simulate_agent_performance",
    "run_randomized_simulations",
    "equity_curve_frame",
    "result_to_dict",
    "summarize_simulation",
    "summarize_batch",
]
