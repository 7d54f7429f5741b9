"""
Coil Simulator - Battery Safety Check
=====================================
Compares a build's current draw against the battery's continuous
discharge rating (CDR).
"""

from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from ..core.config import BuildSpecification, CalculatorConfig
from ..core.constants import SimulationDefaults
from .coil_solver import SimulationOutput, CoilSimulator


@dataclass(frozen=True)
class SafetyAssessment:
    """Amp draw versus battery rating."""
    amperage: float
    cdr_amps: float
    is_safe: bool

    @property
    def headroom_amps(self) -> float:
        return self.cdr_amps - self.amperage

    @property
    def load_ratio(self) -> float:
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.float64(self.amperage) / np.float64(self.cdr_amps))


@dataclass(frozen=True)
class BuildEvaluation:
    """A simulated build together with its safety verdict."""
    spec: BuildSpecification
    output: SimulationOutput
    safety: SafetyAssessment


def assess_safety(resistance: Union[SimulationOutput, float], voltage: float,
                  cdr_amps: float) -> SafetyAssessment:
    """
    Check the amp draw of a build against a battery CDR.

    Args:
        resistance: Final build resistance [Ω] or a SimulationOutput
        voltage: Supply voltage [V]
        cdr_amps: Continuous discharge rating [A]

    The build is safe only when the draw is strictly below the rating;
    a non-finite draw is never safe.
    """
    if isinstance(resistance, SimulationOutput):
        resistance = resistance.resistance

    with np.errstate(divide='ignore', invalid='ignore'):
        amperage = float(np.float64(voltage) / np.float64(resistance))

    return SafetyAssessment(
        amperage=amperage,
        cdr_amps=cdr_amps,
        is_safe=bool(amperage < cdr_amps),
    )


def evaluate_build(spec: BuildSpecification,
                   config: Optional[CalculatorConfig] = None,
                   simulator: Optional[CoilSimulator] = None) -> BuildEvaluation:
    """Simulate a build and check it against its CDR.

    The CDR comes from the build itself, then the calculator config, then
    the calculator default.
    """
    simulator = simulator or CoilSimulator()
    output = simulator.run(spec)

    if spec.cdr_amps is not None:
        cdr = spec.cdr_amps
    elif config is not None:
        cdr = config.effective_cdr(spec)
    else:
        cdr = SimulationDefaults.CDR_AMPS

    return BuildEvaluation(spec=spec, output=output,
                           safety=assess_safety(output, spec.voltage, cdr))


__all__ = ['SafetyAssessment', 'BuildEvaluation', 'assess_safety', 'evaluate_build']
