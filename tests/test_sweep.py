import numpy as np
import pytest

from coil_simulator.core.config import BuildSpecification
from coil_simulator.solvers.coil_solver import run_simulation
from coil_simulator.solvers.sweep import sweep_parameter


def test_wraps_sweep_resistance_increases():
    result = sweep_parameter(BuildSpecification(), 'wraps', [4, 5, 6, 7, 8])
    assert len(result) == 5
    resistance = result.column('resistance')
    assert isinstance(resistance, np.ndarray)
    assert np.all(np.diff(resistance) > 0)


def test_sweep_matches_single_runs():
    spec = BuildSpecification()
    result = sweep_parameter(spec, 'voltage', [3.2, 3.7, 4.2])
    for value, output in zip(result.values, result.outputs):
        assert output == run_simulation(spec.with_changes(voltage=float(value)))


def test_gauge_sweep_uses_table_keys():
    result = sweep_parameter(BuildSpecification(), 'gauge', [24, 26, 28])
    assert result.outputs[1] == run_simulation(BuildSpecification(gauge=26))
    # thinner wire, higher resistance
    assert np.all(np.diff(result.column('resistance')) > 0)


def test_best_efficiency_and_rows():
    result = sweep_parameter(BuildSpecification(), 'wraps', np.linspace(2, 12, 11))
    idx, value = result.best_efficiency()
    scores = result.column('efficiency_score')
    assert scores[idx] == scores.max()
    assert value == result.values[idx]

    rows = result.to_rows()
    assert len(rows) == 11
    assert rows[0]['wraps'] == 2.0
    assert rows[0]['thermal_class'] in result.thermal_classes()


def test_empty_sweep():
    result = sweep_parameter(BuildSpecification(), 'wraps', [])
    assert len(result) == 0
    assert result.best_efficiency() is None
    assert result.column('heat_flux').size == 0


def test_invalid_sweep_parameter():
    with pytest.raises(ValueError):
        sweep_parameter(BuildSpecification(), 'material', ['Ni80'])
    result = sweep_parameter(BuildSpecification(), 'wraps', [6])
    with pytest.raises(ValueError):
        result.column('thermal_class')
