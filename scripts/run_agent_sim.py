import argparse
from dataclasses import replace
import json
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from fxagent_sim.config import (
    DEFAULT_AGENT_CONFIG,
    STRATEGY_FOCUSES,
    TRADING_HORIZONS,
    InvalidConfig,
    validate_agent_config,
)
from fxagent_sim.report import equity_curve_frame, format_summary_lines, summarize_simulation
from fxagent_sim.sim import simulate_agent_performance


def _parse_pairs(raw: str) -> tuple:
    return tuple(p.strip().upper() for p in raw.split(",") if p.strip())


def main() -> int:
    cfg = DEFAULT_AGENT_CONFIG
    parser = argparse.ArgumentParser(description="Simulate one equity path for an FX agent config.")
    parser.add_argument("--capital", type=float, default=cfg.capital, help="Account capital")
    parser.add_argument("--risk-level", type=int, default=cfg.risk_level, help="Risk throttle 1-100")
    parser.add_argument("--drawdown-target", type=float, default=cfg.drawdown_target, help="Drawdown target in percent")
    parser.add_argument("--leverage", type=int, default=cfg.leverage, help="Leverage multiple")
    parser.add_argument("--horizon", choices=TRADING_HORIZONS, default=cfg.horizon)
    parser.add_argument("--strategy", choices=STRATEGY_FOCUSES, default=cfg.strategy_focus)
    parser.add_argument("--pairs", default=",".join(cfg.pairs), help="Comma separated BASE/QUOTE symbols")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--out-csv", default=None, help="Write the equity curve to this CSV path")
    parser.add_argument("--out-json", default=None, help="Write the summary to this JSON path")
    args = parser.parse_args()

    config = replace(
        cfg,
        capital=args.capital,
        risk_level=args.risk_level,
        drawdown_target=args.drawdown_target,
        leverage=args.leverage,
        horizon=args.horizon,
        strategy_focus=args.strategy,
        pairs=_parse_pairs(args.pairs),
    )
    try:
        validate_agent_config(config)
    except InvalidConfig as exc:
        raise SystemExit(f"Invalid config: {exc}")

    result = simulate_agent_performance(config, seed=args.seed)
    summary = summarize_simulation(config, result)

    print(f"Config: {config}")
    print("\n--- Simulation summary ---")
    for line in format_summary_lines(summary):
        print(line)
    print(f"\n{summary['narrative']}")

    if args.out_csv:
        out_csv = Path(args.out_csv)
        out_csv.parent.mkdir(parents=True, exist_ok=True)
        equity_curve_frame(result).to_csv(out_csv, index=False)
        print(f"Equity curve written to {out_csv}")
    if args.out_json:
        out_json = Path(args.out_json)
        out_json.parent.mkdir(parents=True, exist_ok=True)
        out_json.write_text(json.dumps(summary, indent=2))
        print(f"Summary written to {out_json}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
