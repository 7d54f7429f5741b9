"""
Coil Simulator - Core Module
============================
Reference data, configuration and library records.
"""

from .constants import (
    PhysicalConstants, WireMaterial, WireConfiguration, CoilCountConfiguration,
    ThermalClass, CoilMaterial, MaterialsDatabase, WireGaugeTable, SimulationDefaults
)

from .config import (
    BuildSpecification, CalculatorConfig, ConfigManager
)

from .records import (
    CoilRecord, SimulationSummary
)

__all__ = [
    # Constants & Materials
    'PhysicalConstants', 'WireMaterial', 'WireConfiguration', 'CoilCountConfiguration',
    'ThermalClass', 'CoilMaterial', 'MaterialsDatabase', 'WireGaugeTable', 'SimulationDefaults',

    # Configuration
    'BuildSpecification', 'CalculatorConfig', 'ConfigManager',

    # Records
    'CoilRecord', 'SimulationSummary',
]
