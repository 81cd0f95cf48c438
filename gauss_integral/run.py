"""
Config-driven computation of Gauss-Legendre rules.

Provides rule_from_config() and run_rules() - config in, rules out.
Helper functions translate config to primitives.

Usage:
    python -m gauss_integral config.toml [output_dir]
"""

import logging
import pathlib
import sys
from typing import Any

import numpy as np

from gauss_integral.config import Config, load_config, expand_sweeps, count_sweep_combinations
from gauss_integral.numeric.legendre import QuadratureRule, compute_rule, default_max_iterations, machine_epsilon
from gauss_integral.runtime.logging import reset_logging, switch_log_file


logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Helpers: config -> primitives
# -----------------------------------------------------------------------------

def build_solver_args(config: Config) -> dict[str, Any]:
    """
    Build Newton-Raphson arguments from configuration.

    Missing entries fall back to 100 iterations and the machine epsilon.
    """
    solver = config.solver
    return {
        "max_iterations": solver.get("max_iterations", default_max_iterations),
        "tolerance": solver.get("tolerance", machine_epsilon),
    }


def rule_from_config(config: Config) -> QuadratureRule:
    """Compute the rule described by the [rule] and [solver] sections."""
    rule_cfg = config.rule
    if "order" not in rule_cfg:
        raise ValueError("The [rule] section needs an 'order'")
    interval = rule_cfg.get("interval", [-1.0, 1.0])
    if not isinstance(interval, (list, tuple)) or len(interval) != 2:
        raise ValueError(f"Interval should be [a, b], got {interval}")
    [a, b] = interval
    return compute_rule(rule_cfg["order"], a, b, **build_solver_args(config))


def save_rule(rule: QuadratureRule, path: str | pathlib.Path):
    np.savez(path, nodes=rule.nodes, weights=rule.weights, interval=np.asarray(rule.interval))


def load_rule(path: str | pathlib.Path) -> QuadratureRule:
    with np.load(path, allow_pickle=False) as data:
        [a, b] = data["interval"]
        return QuadratureRule(data["nodes"], data["weights"], (a, b))


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def run_rules(config: Config, output_dir: str | pathlib.Path | None = None) -> list[QuadratureRule]:
    """
    Compute one rule per sweep combination.

    If `output_dir` is given, each rule is saved there as `rule_order<N>.npz`
    holding the arrays `nodes`, `weights` and `interval`.
    """
    if output_dir is not None:
        output_dir = pathlib.Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

    nb_runs = count_sweep_combinations(config)
    logger.info(f"Computing {nb_runs} Gauss-Legendre rule(s)")

    rules = []
    for [index, each_config] in enumerate(expand_sweeps(config)):
        rule = rule_from_config(each_config)
        [a, b] = rule.interval
        logger.info(f"[{index + 1}/{nb_runs}] order {rule.order:>3d} on [{a:g}, {b:g}], "
                    f"sum of weights {rule.weights.sum():.16g}")
        if output_dir is not None:
            save_rule(rule, output_dir / f"rule_order{rule.order}.npz")
        rules.append(rule)
    return rules


def main(argv: list[str] | None = None) -> int:
    reset_logging()
    if argv is None:
        argv = sys.argv[1:]

    if len(argv) not in (1, 2):
        print("Usage: python -m gauss_integral config.toml [output_dir]")
        return 1

    config = load_config(argv[0])
    output_dir = None
    if len(argv) == 2:
        output_dir = pathlib.Path(argv[1])
        output_dir.mkdir(parents=True, exist_ok=True)
        switch_log_file(output_dir / "log.txt")

    run_rules(config, output_dir)
    return 0
