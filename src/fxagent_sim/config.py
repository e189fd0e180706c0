from dataclasses import dataclass
import math
from numbers import Integral, Real
from typing import Any, Dict, Mapping, Tuple


SIMULATION_PERIODS = 220
TRADING_DAYS_PER_YEAR = 252

TRADING_HORIZONS = ("intraday", "swing", "position")
STRATEGY_FOCUSES = ("trend", "meanReversion", "carry", "volatilityCapture")


class InvalidConfig(ValueError):
    """Raised when an agent config field is malformed or out of range."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


@dataclass(frozen=True)
class StrategyProfile:
    base_drift: float  # expected per-period return before scaling
    base_volatility: float  # per-period std dev before scaling


STRATEGY_PROFILES: Dict[str, StrategyProfile] = {
    "trend": StrategyProfile(base_drift=0.00075, base_volatility=0.0095),
    "meanReversion": StrategyProfile(base_drift=0.00055, base_volatility=0.0075),
    "carry": StrategyProfile(base_drift=0.00065, base_volatility=0.006),
    "volatilityCapture": StrategyProfile(base_drift=0.00045, base_volatility=0.0055),
}


@dataclass(frozen=True)
class HorizonModifier:
    drift_multiplier: float
    volatility_multiplier: float


HORIZON_MODIFIERS: Dict[str, HorizonModifier] = {
    "intraday": HorizonModifier(drift_multiplier=0.65, volatility_multiplier=1.4),
    "swing": HorizonModifier(drift_multiplier=1.0, volatility_multiplier=1.0),
    "position": HorizonModifier(drift_multiplier=1.2, volatility_multiplier=0.75),
}


@dataclass(frozen=True)
class AgentConfig:
    capital: float  # account currency
    risk_level: int  # 1 - 100
    drawdown_target: float  # percent, e.g. 8 for 8%
    leverage: int  # >= 1
    horizon: str  # "intraday" | "swing" | "position"
    strategy_focus: str  # "trend" | "meanReversion" | "carry" | "volatilityCapture"
    pairs: Tuple[str, ...] = ()  # "BASE/QUOTE" symbols


DEFAULT_AGENT_CONFIG = AgentConfig(
    capital=250_000.0,
    risk_level=42,
    drawdown_target=8.0,
    leverage=5,
    horizon="swing",
    strategy_focus="trend",
    pairs=("EUR/USD", "USD/JPY", "GBP/USD"),
)

AVAILABLE_PAIRS: Tuple[str, ...] = (
    "EUR/USD",
    "GBP/USD",
    "USD/JPY",
    "AUD/USD",
    "USD/CAD",
    "NZD/USD",
    "USD/CHF",
    "EUR/JPY",
)

# JSON contract keys -> dataclass fields
_FIELD_ALIASES = {
    "riskLevel": "risk_level",
    "drawdownTarget": "drawdown_target",
    "strategyFocus": "strategy_focus",
}


def _require_number(field: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidConfig(field, f"expected a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise InvalidConfig(field, "must be finite")
    return float(value)


def _require_integral(field: str, value: Any) -> float:
    number = _require_number(field, value)
    if not isinstance(value, Integral) and not number.is_integer():
        raise InvalidConfig(field, f"expected an integer, got {value!r}")
    return number


def validate_agent_config(config: AgentConfig) -> AgentConfig:
    """
    Check every field of `config` and raise InvalidConfig naming the first
    offending one. Returns the config unchanged so callers can chain it.
    """
    capital = _require_number("capital", config.capital)
    if capital <= 0:
        raise InvalidConfig("capital", "must be positive")

    risk_level = _require_integral("risk_level", config.risk_level)
    if not 1 <= risk_level <= 100:
        raise InvalidConfig("risk_level", "must be between 1 and 100")

    drawdown_target = _require_number("drawdown_target", config.drawdown_target)
    if drawdown_target <= 0:
        raise InvalidConfig("drawdown_target", "must be positive")

    leverage = _require_integral("leverage", config.leverage)
    if leverage < 1:
        raise InvalidConfig("leverage", "must be at least 1")

    if not isinstance(config.horizon, str) or config.horizon not in HORIZON_MODIFIERS:
        raise InvalidConfig(
            "horizon", f"unknown horizon {config.horizon!r}; expected one of {TRADING_HORIZONS}"
        )
    if (
        not isinstance(config.strategy_focus, str)
        or config.strategy_focus not in STRATEGY_PROFILES
    ):
        raise InvalidConfig(
            "strategy_focus",
            f"unknown strategy {config.strategy_focus!r}; expected one of {STRATEGY_FOCUSES}",
        )

    if isinstance(config.pairs, (str, bytes)):
        raise InvalidConfig("pairs", "expected a collection of symbols, not a single string")
    try:
        pairs = list(config.pairs)
    except TypeError:
        raise InvalidConfig("pairs", "expected a collection of symbols") from None
    for pair in pairs:
        if not isinstance(pair, str):
            raise InvalidConfig("pairs", f"symbols must be strings, got {pair!r}")

    return config


def agent_config_from_dict(
    data: Mapping[str, Any], base: AgentConfig = DEFAULT_AGENT_CONFIG
) -> AgentConfig:
    """
    Build a validated AgentConfig from a mapping (snake_case or camelCase keys).
    Missing keys fall back to `base`; unknown keys are ignored.
    """
    if not isinstance(data, Mapping):
        raise InvalidConfig("config", "expected an object")
    values = {
        "capital": base.capital,
        "risk_level": base.risk_level,
        "drawdown_target": base.drawdown_target,
        "leverage": base.leverage,
        "horizon": base.horizon,
        "strategy_focus": base.strategy_focus,
        "pairs": base.pairs,
    }
    for key, value in data.items():
        name = _FIELD_ALIASES.get(key, key)
        if name in values:
            values[name] = value

    pairs = values["pairs"]
    if isinstance(pairs, (list, set, frozenset)):
        values["pairs"] = tuple(pairs)

    return validate_agent_config(AgentConfig(**values))
