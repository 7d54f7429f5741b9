"""
Coil Simulator - Solvers Module
===============================
Coil simulation, battery safety check and parameter sweeps.
"""

from .coil_solver import (
    CoilGeometry,
    SimulationOutput,
    CoilSimulator,
    classify_heat_flux,
    score_efficiency,
    stress_index,
    simulate,
    run_simulation,
)

from .safety import (
    SafetyAssessment,
    BuildEvaluation,
    assess_safety,
    evaluate_build,
)

from .sweep import (
    SweepResult,
    sweep_parameter,
)

__all__ = [
    # Simulation
    'CoilGeometry',
    'SimulationOutput',
    'CoilSimulator',
    'classify_heat_flux',
    'score_efficiency',
    'stress_index',
    'simulate',
    'run_simulation',
    # Safety
    'SafetyAssessment',
    'BuildEvaluation',
    'assess_safety',
    'evaluate_build',
    # Sweeps
    'SweepResult',
    'sweep_parameter',
]
