"""
Coil Simulator - Electro-Thermal Coil Solver
============================================
Closed-form model of a wound resistance-wire coil driven at constant voltage.

Pipeline (each stage only uses earlier stages of the same run):
- Geometry: wire diameter, cross-section, mean circumference, wire length
- Electrical: strand and coil parallel combination, power draw
- Thermal: surface area, heat flux, wire mass, heat capacity, ramp-up time
- Scores: thermal class, stress index, efficiency score

All arithmetic is float64 with IEEE-754 semantics. Degenerate geometry is not
rejected: zero divisors yield inf/NaN which propagate to every derived field.

Author: Coil Build Lab
Version: 1.0.0
"""

import math
from dataclasses import dataclass, asdict
from typing import Dict, Any, Union

import numpy as np

from ..core.constants import (
    PhysicalConstants, MaterialsDatabase, WireGaugeTable, ThermalClass,
    WireMaterial, WireConfiguration, CoilCountConfiguration
)
from ..core.config import BuildSpecification
from ..utils.logger import get_logger


@dataclass(frozen=True)
class CoilGeometry:
    """Micro-geometry of one coil, in millimetres."""
    wire_diameter_mm: float
    cross_section_mm2: float
    mean_circumference_mm: float
    wound_length_mm: float        # one strand, including leads
    total_wire_length_mm: float   # all strands of one coil
    strand_multiplier: float
    coil_count: int


@dataclass(frozen=True)
class SimulationOutput:
    """Result of one coil simulation."""
    resistance: float       # Ω
    amperage: float         # A
    power_w: float          # W
    surface_area: float     # mm²
    heat_capacity: float    # mJ/K
    heat_flux: float        # mW/mm²
    ramp_up_time: float     # s, 25 °C -> 200 °C
    thermal_class: ThermalClass
    stress_index: float     # % of reference max flux, unbounded
    efficiency_score: float  # 0..100

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['thermal_class'] = self.thermal_class.value
        return data


def classify_heat_flux(heat_flux: float) -> ThermalClass:
    """Map heat flux [mW/mm²] to a thermal class.

    Checked in order <120, >300, >220; everything else (including 220 and
    NaN) is Balanced, and 300 itself is Warm.
    """
    if heat_flux < 120:
        return ThermalClass.COOL
    if heat_flux > 300:
        return ThermalClass.HOT
    if heat_flux > 220:
        return ThermalClass.WARM
    return ThermalClass.BALANCED


def score_efficiency(ramp_up_time: float, heat_flux: float) -> float:
    """Efficiency score in [0, 100].

    Rewards flux close to the ideal 200 mW/mm² and penalizes slow ramp-up.
    """
    raw = 100 - (ramp_up_time * 10) - (abs(heat_flux - PhysicalConstants.IDEAL_FLUX) / 10)
    if math.isnan(raw):
        return 0.0
    return float(np.clip(raw, 0.0, 100.0))


def stress_index(heat_flux: float) -> float:
    """Heat flux as a percentage of the reference max flux. Not clamped."""
    return heat_flux / PhysicalConstants.REFERENCE_MAX_FLUX * 100


class CoilSimulator:
    """
    Derives the electrical and thermal behaviour of a coil build.

    Stateless: the material and gauge tables are read-only, so one instance
    (or the module-level helpers) can be shared freely between threads.
    """

    def __init__(self):
        self.logger = get_logger()

    def compute_geometry(self, wire_configuration: WireConfiguration,
                         coil_configuration: CoilCountConfiguration,
                         gauge, inner_diameter_mm: float, wraps: float) -> CoilGeometry:
        wire_diameter = np.float64(WireGaugeTable.diameter_mm(gauge))
        cross_section = math.pi * (wire_diameter / 2) ** 2

        # Centreline of the wound loop sits half a wire thickness outside the rod
        circumference = math.pi * (np.float64(inner_diameter_mm) + wire_diameter)
        wound_length = circumference * np.float64(wraps) + PhysicalConstants.LEAD_LENGTH_MM

        multiplier = wire_configuration.strand_multiplier
        return CoilGeometry(
            wire_diameter_mm=float(wire_diameter),
            cross_section_mm2=float(cross_section),
            mean_circumference_mm=float(circumference),
            wound_length_mm=float(wound_length),
            total_wire_length_mm=float(wound_length * multiplier),
            strand_multiplier=multiplier,
            coil_count=coil_configuration.coil_count,
        )

    def simulate(self, material: Union[WireMaterial, str],
                 wire_configuration: Union[WireConfiguration, str],
                 coil_configuration: Union[CoilCountConfiguration, str],
                 gauge, inner_diameter_mm: float, wraps: float,
                 voltage: float = PhysicalConstants.DEFAULT_VOLTAGE) -> SimulationOutput:
        """Run the full derivation for one build. Never raises on numeric input."""
        props = MaterialsDatabase.get(material)
        wire_configuration = WireConfiguration.parse(wire_configuration)
        coil_configuration = CoilCountConfiguration.parse(coil_configuration)

        self.logger.log_build({
            'material': props.name,
            'wire': wire_configuration.value,
            'coils': coil_configuration.value,
            'gauge': gauge,
            'id_mm': inner_diameter_mm,
            'wraps': wraps,
            'voltage': voltage,
        })

        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            geom = self.compute_geometry(wire_configuration, coil_configuration,
                                         gauge, inner_diameter_mm, wraps)
            area = np.float64(geom.cross_section_mm2)
            wound_length = np.float64(geom.wound_length_mm)
            total_length = np.float64(geom.total_wire_length_mm)
            n_coils = geom.coil_count
            volts = np.float64(voltage)

            # Electrical: Ω·mm²/m needs length in metres, area stays in mm²
            res_per_strand = props.resistivity * (wound_length / PhysicalConstants.MM_PER_M) / area
            single_coil_res = res_per_strand / geom.strand_multiplier
            resistance = single_coil_res / n_coils
            amperage = volts / resistance
            power = volts ** 2 / resistance

            # Thermal
            surface_area = math.pi * geom.wire_diameter_mm * total_length * n_coils
            heat_flux = power / surface_area * PhysicalConstants.MILLI

            volume = area * total_length * n_coils
            mass_g = (volume / PhysicalConstants.MM3_PER_CM3) * props.density
            heat_capacity = mass_g * props.specific_heat * PhysicalConstants.MILLI

            # mJ/K * K over mW
            ramp_up_time = (heat_capacity * PhysicalConstants.RAMP_DELTA_T) / (power * PhysicalConstants.MILLI)

            output = SimulationOutput(
                resistance=float(resistance),
                amperage=float(amperage),
                power_w=float(power),
                surface_area=float(surface_area),
                heat_capacity=float(heat_capacity),
                heat_flux=float(heat_flux),
                ramp_up_time=float(ramp_up_time),
                thermal_class=classify_heat_flux(float(heat_flux)),
                stress_index=float(stress_index(heat_flux)),
                efficiency_score=score_efficiency(float(ramp_up_time), float(heat_flux)),
            )

        self.logger.log_result(output.resistance, output.heat_flux, output.thermal_class.value)
        return output

    def run(self, spec: BuildSpecification) -> SimulationOutput:
        """Simulate a :class:`BuildSpecification`."""
        return self.simulate(
            spec.material,
            spec.wire_configuration,
            spec.coil_configuration,
            spec.gauge,
            spec.inner_diameter_mm,
            spec.wraps,
            spec.voltage,
        )


_default_simulator = CoilSimulator()


def simulate(material, wire_configuration, coil_configuration, gauge,
             inner_diameter_mm: float, wraps: float,
             voltage: float = PhysicalConstants.DEFAULT_VOLTAGE) -> SimulationOutput:
    """Convenience wrapper around :meth:`CoilSimulator.simulate`."""
    return _default_simulator.simulate(material, wire_configuration, coil_configuration,
                                       gauge, inner_diameter_mm, wraps, voltage)


def run_simulation(spec: BuildSpecification) -> SimulationOutput:
    """
    Convenience function to simulate a build specification.

    Args:
        spec: Build to simulate

    Returns:
        SimulationOutput with every derived quantity
    """
    return _default_simulator.run(spec)


__all__ = [
    'CoilGeometry',
    'SimulationOutput',
    'CoilSimulator',
    'classify_heat_flux',
    'score_efficiency',
    'stress_index',
    'simulate',
    'run_simulation',
]
