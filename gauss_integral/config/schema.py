"""
Configuration schema.

Minimal schema that mirrors the package organization:
- rule: quadrature order and interval
- solver: Newton-Raphson settings for the Legendre roots
- sweeps: parameter sweep specifications

Each section is a raw dict - semantic knowledge lives in the consuming code
(run.py), not here.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Config:
    """
    Top-level configuration.

    All sections are raw dicts to avoid schema duplication.
    """
    rule: dict[str, Any]
    solver: dict[str, Any] = field(default_factory=dict)
    sweeps: list[dict[str, Any]] = field(default_factory=list)
