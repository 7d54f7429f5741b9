import math

import pytest

from coil_simulator.core.config import BuildSpecification, CalculatorConfig
from coil_simulator.core.constants import CoilCountConfiguration
from coil_simulator.solvers.coil_solver import run_simulation
from coil_simulator.solvers.safety import assess_safety, evaluate_build


def test_draw_below_rating_is_safe():
    safety = assess_safety(0.5, 4.2, 20.0)
    assert safety.amperage == pytest.approx(8.4)
    assert safety.is_safe
    assert safety.headroom_amps == pytest.approx(11.6)
    assert safety.load_ratio == pytest.approx(0.42)


def test_draw_equal_to_rating_is_unsafe():
    safety = assess_safety(0.25, 5.0, 20.0)
    assert safety.amperage == 20.0
    assert not safety.is_safe


def test_zero_resistance_is_never_safe():
    safety = assess_safety(0.0, 3.7, 30.0)
    assert math.isinf(safety.amperage)
    assert not safety.is_safe


def test_nan_resistance_is_never_safe():
    assert not assess_safety(float('nan'), 3.7, 30.0).is_safe


def test_accepts_simulation_output():
    spec = BuildSpecification()
    output = run_simulation(spec)
    safety = assess_safety(output, spec.voltage, 20.0)
    assert safety.amperage == pytest.approx(output.amperage)


def test_evaluate_build_uses_default_cdr():
    result = evaluate_build(BuildSpecification())
    assert result.safety.cdr_amps == 20.0
    assert result.safety.is_safe
    assert result.output.resistance == pytest.approx(0.7787, abs=1e-3)


def test_evaluate_build_prefers_spec_cdr_over_config():
    quad = BuildSpecification(coil_configuration=CoilCountConfiguration.QUAD, voltage=4.2)
    config = CalculatorConfig(default_cdr_amps=10.0)

    from_config = evaluate_build(quad, config=config)
    assert from_config.safety.cdr_amps == 10.0
    assert not from_config.safety.is_safe  # ~21.6 A

    from_spec = evaluate_build(quad.with_changes(cdr_amps=30.0), config=config)
    assert from_spec.safety.cdr_amps == 30.0
    assert from_spec.safety.is_safe
