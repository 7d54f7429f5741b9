"""
Coil Simulator
==============
Electro-thermal calculator for rebuildable vape coils.

Given the wire alloy, gauge, strand arrangement, coil count, inner diameter,
wrap count and supply voltage, derives:
- Resistance and amp draw
- Wire surface area and heat capacity
- Heat flux and ramp-up time
- Thermal class, stress index and efficiency score

Usage:
    from coil_simulator import BuildSpecification, run_simulation
    output = run_simulation(BuildSpecification(gauge=26, wraps=6))

Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"

from .core import (
    PhysicalConstants, WireMaterial, WireConfiguration, CoilCountConfiguration,
    ThermalClass, CoilMaterial, MaterialsDatabase, WireGaugeTable, SimulationDefaults,
    BuildSpecification, CalculatorConfig, ConfigManager,
    CoilRecord, SimulationSummary,
)

from .solvers import (
    CoilGeometry, SimulationOutput, CoilSimulator,
    classify_heat_flux, score_efficiency, simulate, run_simulation,
    SafetyAssessment, BuildEvaluation, assess_safety, evaluate_build,
    SweepResult, sweep_parameter,
)

__all__ = [
    '__version__',
    # Reference data
    'PhysicalConstants', 'WireMaterial', 'WireConfiguration', 'CoilCountConfiguration',
    'ThermalClass', 'CoilMaterial', 'MaterialsDatabase', 'WireGaugeTable', 'SimulationDefaults',
    # Configuration & records
    'BuildSpecification', 'CalculatorConfig', 'ConfigManager',
    'CoilRecord', 'SimulationSummary',
    # Simulation
    'CoilGeometry', 'SimulationOutput', 'CoilSimulator',
    'classify_heat_flux', 'score_efficiency', 'simulate', 'run_simulation',
    'SafetyAssessment', 'BuildEvaluation', 'assess_safety', 'evaluate_build',
    'SweepResult', 'sweep_parameter',
]
