from dataclasses import replace
from pathlib import Path
import random
import sys

import pandas as pd

ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from fxagent_sim.config import DEFAULT_AGENT_CONFIG
from fxagent_sim.sim import run_randomized_simulations


def main() -> None:
    base = DEFAULT_AGENT_CONFIG
    print(f"Base config: {base}")

    risk_values = [15, 30, 42, 60, 80]
    leverage_values = [2, 5, 10]
    num_runs = 50
    rng = random.Random(7)

    rows = []
    for risk_level in risk_values:
        for leverage in leverage_values:
            cfg = replace(base, risk_level=risk_level, leverage=leverage)
            batch = run_randomized_simulations(cfg, num_runs=num_runs, rng=rng)
            rows.append(
                {
                    "risk_level": risk_level,
                    "leverage": leverage,
                    "avg_return": batch.average_return,
                    "avg_max_dd": batch.average_max_drawdown,
                    "p90_max_dd": batch.p90_max_drawdown,
                    "avg_sharpe": batch.average_sharpe,
                    "dd_breach_rate": batch.drawdown_breach_rate,
                }
            )

    df = pd.DataFrame(rows).sort_values("avg_sharpe", ascending=False)
    print(f"\n--- Risk/leverage sweep ({num_runs} runs each, target DD {base.drawdown_target:.1f}%) ---")
    print(df.to_string(index=False, float_format=lambda v: f"{v:.4f}"))


if __name__ == "__main__":
    main()
