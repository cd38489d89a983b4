from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from ..core.model import SpringNetworkError
from ..core.scenarios import load_builtin_scenarios, scenario_registry
from .runner import run_scenario

_LOG = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spring-network",
        description="Run mass-spring network scenarios and dump trajectories.",
    )
    parser.add_argument("scenarios", nargs="*", help="scenario ids to run (default: all)")
    parser.add_argument("--list", action="store_true", help="list registered scenarios and exit")
    parser.add_argument("--output-dir", default=".", help="directory for trajectory files")
    parser.add_argument("--steps", type=int, default=None, help="override the step count of every scenario")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s:%(name)s:%(message)s",
    )
    load_builtin_scenarios()

    if args.list:
        for scenario in scenario_registry.all():
            print(f"{scenario.scenario_id}\t{scenario.name}")
        return 0

    try:
        scenarios = [scenario_registry.get(scenario_id) for scenario_id in args.scenarios] or scenario_registry.all()
    except KeyError as exc:
        _LOG.error("%s", exc.args[0])
        return 2

    for scenario in scenarios:
        sys.stdout.write(f"{scenario.name}...")
        sys.stdout.flush()
        try:
            run_scenario(scenario, args.output_dir, steps=args.steps)
        except (SpringNetworkError, ValueError) as exc:
            print("failed")
            _LOG.error("Scenario %s failed: %s", scenario.scenario_id, exc)
            return 1
        print("done")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
