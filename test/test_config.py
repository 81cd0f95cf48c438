"""
Tests for TOML configuration loading and sweep expansion.
"""

import os
import tempfile

import pytest

from gauss_integral.config import (
    load_config,
    save_config,
    config_from_dict,
    expand_sweeps,
    count_sweep_combinations,
    Config,
)


@pytest.fixture
def sample_toml_content():
    return """
[rule]
order = 4
interval = [0.0, 2.0]

[solver]
max_iterations = 50
tolerance = 1e-15
"""


@pytest.fixture
def sample_toml_with_sweep():
    return """
[rule]
order = 2
interval = [-1.0, 1.0]

[[sweep]]
path = "rule.order"
range = [1, 6]

[[sweep]]
path = "solver.max_iterations"
values = [80, 120]
"""


@pytest.fixture
def temp_toml_file(sample_toml_content):
    with tempfile.NamedTemporaryFile(mode="w", suffix=".toml", delete=False) as f:
        f.write(sample_toml_content)
        filepath = f.name
    yield filepath
    os.unlink(filepath)


@pytest.fixture
def temp_toml_with_sweep(sample_toml_with_sweep):
    with tempfile.NamedTemporaryFile(mode="w", suffix=".toml", delete=False) as f:
        f.write(sample_toml_with_sweep)
        filepath = f.name
    yield filepath
    os.unlink(filepath)


def test_load_config(temp_toml_file):
    config = load_config(temp_toml_file)

    assert isinstance(config, Config)
    assert config.rule["order"] == 4
    assert config.rule["interval"] == [0.0, 2.0]
    assert config.solver["max_iterations"] == 50
    assert config.solver["tolerance"] == 1e-15
    assert config.sweeps == []


def test_save_and_reload_config(temp_toml_with_sweep, tmp_path):
    config = load_config(temp_toml_with_sweep)
    path = tmp_path / "saved.toml"
    save_config(config, path)
    reloaded = load_config(path)

    assert reloaded == config
    assert len(reloaded.sweeps) == 2


def test_solver_section_is_optional():
    config = config_from_dict({"rule": {"order": 3}})
    assert config.solver == {}
    assert config.sweeps == []


def test_missing_rule_section():
    with pytest.raises(ValueError, match=r"\[rule\]"):
        config_from_dict({"solver": {}})


def test_unknown_section():
    with pytest.raises(ValueError, match="Unknown configuration section"):
        config_from_dict({"rule": {"order": 3}, "mesh": {}})


def test_no_sweep_yields_config_once(temp_toml_file):
    config = load_config(temp_toml_file)
    expanded = list(expand_sweeps(config))

    assert len(expanded) == 1
    assert expanded[0].rule == config.rule
    assert count_sweep_combinations(config) == 1


def test_sweep_expansion(temp_toml_with_sweep):
    config = load_config(temp_toml_with_sweep)
    expanded = list(expand_sweeps(config))

    assert count_sweep_combinations(config) == 10
    assert len(expanded) == 10
    assert [c.rule["order"] for c in expanded[::2]] == [1, 2, 3, 4, 5]
    assert [c.solver["max_iterations"] for c in expanded[:2]] == [80, 120]
    assert all(c.sweeps == [] for c in expanded)
    # the original is not modified
    assert config.rule["order"] == 2
    assert "max_iterations" not in config.solver


def test_sweep_linspace_and_step():
    config = config_from_dict({
        "rule": {"order": 2},
        "sweep": [{"path": "rule.order", "range": [2, 12, 4]}],
    })
    assert [c.rule["order"] for c in expand_sweeps(config)] == [2, 6, 10]

    config = config_from_dict({
        "rule": {"order": 2},
        "sweep": [{"path": "solver.tolerance", "linspace": [1e-15, 3e-15, 3]}],
    })
    tolerances = [c.solver["tolerance"] for c in expand_sweeps(config)]
    assert tolerances == pytest.approx([1e-15, 2e-15, 3e-15])


def test_invalid_sweeps():
    config = config_from_dict({"rule": {"order": 2}, "sweep": [{"path": "rule.order"}]})
    with pytest.raises(ValueError, match="no values specified"):
        list(expand_sweeps(config))

    config = config_from_dict({"rule": {"order": 2}, "sweep": [{"values": [1, 2]}]})
    with pytest.raises(ValueError, match="no 'path'"):
        list(expand_sweeps(config))

    config = config_from_dict({"rule": {"order": 2}, "sweep": [{"path": "order", "values": [1, 2]}]})
    with pytest.raises(ValueError, match="Sweep path"):
        list(expand_sweeps(config))
