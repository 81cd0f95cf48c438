"""
TOML configuration loading and saving.

Uses tomllib (Python 3.11+) or tomli (backport) for reading,
and tomli_w for writing.
"""

import sys
from pathlib import Path
from typing import Any

# Import tomllib or backport
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w

from .schema import Config


known_sections = ("rule", "solver", "sweep")


def load_config(path: str | Path) -> Config:
    """Load a TOML configuration file and return a Config object."""
    path = Path(path)
    with open(path, "rb") as f:
        data = tomllib.load(f)
    return config_from_dict(data)


def config_from_dict(data: dict[str, Any]) -> Config:
    """Build a Config from the parsed TOML tables."""
    unknown = [key for key in data if key not in known_sections]
    if unknown:
        raise ValueError(f"Unknown configuration section(s): {', '.join(unknown)}")
    if "rule" not in data:
        raise ValueError("Configuration needs a [rule] section")

    # Extract sweeps (TOML uses [[sweep]] array syntax)
    return Config(
        rule=data["rule"],
        solver=data.get("solver", {}),
        sweeps=data.get("sweep", []),
    )


def save_config(config: Config, path: str | Path) -> None:
    """Save a Config object to a TOML file."""
    path = Path(path)
    data: dict[str, Any] = {"rule": config.rule}

    if config.solver:
        data["solver"] = config.solver
    if config.sweeps:
        data["sweep"] = config.sweeps

    with open(path, "wb") as f:
        tomli_w.dump(data, f)
