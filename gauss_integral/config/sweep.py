"""
Parameter sweep expansion.

Expands a config with sweep specifications into multiple configs,
one for each parameter combination, e.g. a range of quadrature orders.
"""

import copy
import itertools
from dataclasses import replace
from typing import Any, Iterator

import numpy as np

from .schema import Config


def expand_sweeps(config: Config) -> Iterator[Config]:
    """
    Expand a configuration with sweeps into individual configurations.

    If no sweeps are defined, yields the original config once.

    Parameters
    ----------
    config : Config
        Configuration potentially containing sweep specifications.

    Yields
    ------
    Config
        Individual configurations with sweep parameters resolved.
    """
    if not config.sweeps:
        yield replace(config, sweeps=[])
        return

    # Expand each sweep into values
    value_lists = [_expand_sweep_values(sweep) for sweep in config.sweeps]
    paths = [sweep["path"] for sweep in config.sweeps]

    for combo in itertools.product(*value_lists):
        new_config = _apply_values(config, paths, combo)
        # Remove sweep specifications from the expanded config
        yield replace(new_config, sweeps=[])


def _expand_sweep_values(sweep: dict[str, Any]) -> list[Any]:
    """Convert sweep specification to list of values."""
    if "path" not in sweep:
        raise ValueError(f"Sweep {sweep} has no 'path'")
    if "values" in sweep:
        return list(sweep["values"])
    elif "range" in sweep:
        start, stop, *step = sweep["range"]
        return list(range(int(start), int(stop), *(int(s) for s in step)))
    elif "linspace" in sweep:
        start, stop, num = sweep["linspace"]
        return np.linspace(start, stop, int(num)).tolist()
    else:
        raise ValueError(f"Sweep at path '{sweep['path']}' has no values specified. "
                         "Use values, range, or linspace.")


def _apply_values(config: Config, paths: list[str], values: tuple[Any, ...]) -> Config:
    """Apply sweep values to a config by modifying the nested sections."""
    # Work on a deep copy to avoid mutating the original
    new_config = copy.deepcopy(config)

    for path, value in zip(paths, values):
        _set_nested_item(new_config, path, value)

    return new_config


def _set_nested_item(config: Config, path: str, value: Any) -> None:
    """
    Set a nested entry using dot notation.

    Example: path="rule.order" sets config.rule["order"] = value
    """
    [section, *keys] = path.split(".")
    if section not in ("rule", "solver") or not keys:
        raise ValueError(f"Sweep path '{path}' should name an entry inside [rule] or [solver]")
    obj = getattr(config, section)
    # Navigate to the parent table
    for key in keys[:-1]:
        obj = obj.setdefault(key, {})
    obj[keys[-1]] = value


def count_sweep_combinations(config: Config) -> int:
    """
    Count the total number of configurations that would be generated.

    Returns 1 if no sweeps are defined.
    """
    total = 1
    for sweep in config.sweeps:
        total *= len(_expand_sweep_values(sweep))
    return total
