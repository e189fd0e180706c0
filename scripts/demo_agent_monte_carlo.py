from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from fxagent_sim.config import DEFAULT_AGENT_CONFIG
from fxagent_sim.sim import run_randomized_simulations


def main() -> None:
    config = DEFAULT_AGENT_CONFIG
    num_runs = 200

    batch = run_randomized_simulations(config, num_runs=num_runs, seed=42)

    print("\n--- Monte Carlo summary ---")
    print(f"Runs:                 {batch.num_runs}")
    print(f"Avg annual return:    {batch.average_return:.2%}")
    print(f"Median annual return: {batch.median_return:.2%}")
    print(f"Avg max drawdown:     {batch.average_max_drawdown:.2%}")
    print(f"P90 max drawdown:     {batch.p90_max_drawdown:.2%}")
    print(f"Avg Sharpe:           {batch.average_sharpe:.2f}")
    print(
        f"Runs breaching {config.drawdown_target:.1f}% drawdown target: {batch.drawdown_breach_rate:.2%}"
    )
    print("\nConfig:")
    print(f"  Capital:   {config.capital:,.0f}")
    print(f"  Risk:      {config.risk_level}")
    print(f"  Leverage:  {config.leverage}x")
    print(f"  Horizon:   {config.horizon}")
    print(f"  Strategy:  {config.strategy_focus}")
    print(f"  Pairs:     {', '.join(config.pairs)}")


if __name__ == "__main__":
    main()
