"""
Coil Simulator - Physical Constants and Wire Materials Database
===============================================================
Contains the fixed reference data used by the coil electro-thermal simulator:
resistance-wire alloys, the gauge-to-diameter table, build configurations
and the calculator's default form values.

All tables are immutable for the life of the process.

Author: Coil Build Lab
Version: 1.0.0
License: MIT
"""

from dataclasses import dataclass
from typing import Dict, Union
from enum import Enum


# =============================================================================
# PHYSICAL CONSTANTS
# =============================================================================

class PhysicalConstants:
    """Fixed constants of the coil heating model."""

    # Two legs clamped at the posts [mm]
    LEAD_LENGTH_MM = 5.0

    # Ramp-up window [°C]
    AMBIENT_TEMP_C = 25.0
    TARGET_TEMP_C = 200.0
    RAMP_DELTA_T = TARGET_TEMP_C - AMBIENT_TEMP_C

    # Heat flux references [mW/mm²]
    REFERENCE_MAX_FLUX = 350.0
    IDEAL_FLUX = 200.0

    # Single 18650 cell, nominal [V]
    DEFAULT_VOLTAGE = 3.7

    # Unit conversions
    MM_PER_M = 1000.0
    MM3_PER_CM3 = 1000.0
    MILLI = 1000.0


# =============================================================================
# ENUMERATIONS
# =============================================================================

class WireMaterial(Enum):
    """Supported resistance-wire alloys (values are display names)."""
    KANTHAL_A1 = 'Kanthal A1'
    NICHROME_80 = 'Ni80'
    SS316L = 'SS316L'
    NI200 = 'Ni200'
    TITANIUM = 'Titanium'

    @classmethod
    def parse(cls, value: Union['WireMaterial', str]) -> 'WireMaterial':
        """Accept an enum member, its display name or its member name."""
        if isinstance(value, cls):
            return value
        for member in cls:
            if value in (member.value, member.name):
                return member
        raise ValueError(f"Unknown wire material: {value}. Choose from {[m.value for m in cls]}")


class WireConfiguration(Enum):
    """Strand arrangement of the wire."""
    ROUND = 'Round'
    PARALLEL = 'Parallel'
    TWISTED = 'Twisted'

    @property
    def strand_multiplier(self) -> float:
        # Twisted approximates parallel with a small geometry penalty
        return _STRAND_MULTIPLIERS[self]

    @classmethod
    def parse(cls, value: Union['WireConfiguration', str]) -> 'WireConfiguration':
        if isinstance(value, cls):
            return value
        for member in cls:
            if value in (member.value, member.name):
                return member
        raise ValueError(f"Unknown wire configuration: {value}. Choose from {[m.value for m in cls]}")


class CoilCountConfiguration(Enum):
    """Number of identical coils wired in parallel on the deck."""
    SINGLE = 'Single'
    DUAL = 'Dual'
    TRIPLE = 'Triple'
    QUAD = 'Quad'

    @property
    def coil_count(self) -> int:
        return _COIL_COUNTS[self]

    @classmethod
    def parse(cls, value: Union['CoilCountConfiguration', str]) -> 'CoilCountConfiguration':
        if isinstance(value, cls):
            return value
        for member in cls:
            if value in (member.value, member.name):
                return member
        raise ValueError(f"Unknown coil configuration: {value}. Choose from {[m.value for m in cls]}")


class ThermalClass(Enum):
    """Coarse heat-flux category."""
    COOL = 'Cool'
    BALANCED = 'Balanced'
    WARM = 'Warm'
    HOT = 'Hot'


_STRAND_MULTIPLIERS = {
    WireConfiguration.ROUND: 1.0,
    WireConfiguration.PARALLEL: 2.0,
    WireConfiguration.TWISTED: 2.1,
}

_COIL_COUNTS = {
    CoilCountConfiguration.SINGLE: 1,
    CoilCountConfiguration.DUAL: 2,
    CoilCountConfiguration.TRIPLE: 3,
    CoilCountConfiguration.QUAD: 4,
}


# =============================================================================
# MATERIAL PROPERTIES
# =============================================================================

@dataclass(frozen=True)
class CoilMaterial:
    """Physical constants of a resistance-wire alloy."""
    name: str
    resistivity: float  # Ω·mm²/m
    density: float  # g/cm³
    specific_heat: float  # J/(g·K)

    def to_dict(self) -> Dict:
        """Serialize to dictionary."""
        return {
            'name': self.name,
            'resistivity': self.resistivity,
            'density': self.density,
            'specific_heat': self.specific_heat,
        }


class MaterialsDatabase:
    """Database of resistance-wire alloys keyed by material identity."""

    WIRES = {
        WireMaterial.KANTHAL_A1: CoilMaterial(
            name='Kanthal A1',
            resistivity=1.45,
            density=7.1,
            specific_heat=0.46
        ),
        WireMaterial.NICHROME_80: CoilMaterial(
            name='Nichrome 80 (Ni80)',
            resistivity=1.09,
            density=8.4,
            specific_heat=0.45
        ),
        WireMaterial.SS316L: CoilMaterial(
            name='Stainless Steel 316L',
            resistivity=0.74,
            density=8.0,
            specific_heat=0.50
        ),
        WireMaterial.NI200: CoilMaterial(
            name='Nickel 200',
            resistivity=0.096,  # Temperature-control wire, very low resistivity
            density=8.9,
            specific_heat=0.44
        ),
        WireMaterial.TITANIUM: CoilMaterial(
            name='Titanium',
            resistivity=0.42,
            density=4.5,
            specific_heat=0.52
        ),
    }

    @classmethod
    def get(cls, material: Union[WireMaterial, str]) -> CoilMaterial:
        """Look up the constants for a material (enum or display name)."""
        return cls.WIRES[WireMaterial.parse(material)]

    @classmethod
    def get_all_materials(cls) -> Dict[WireMaterial, CoilMaterial]:
        return dict(cls.WIRES)


# =============================================================================
# WIRE GAUGE TABLE
# =============================================================================

class WireGaugeTable:
    """AWG-style gauge number to bare wire diameter."""

    GAUGE_TO_MM = {
        20: 0.812,
        22: 0.644,
        24: 0.511,
        26: 0.405,
        28: 0.321,
        30: 0.255,
        32: 0.202,
    }

    # Unlisted gauges fall back silently
    DEFAULT_DIAMETER_MM = 0.4

    @classmethod
    def diameter_mm(cls, gauge) -> float:
        """Wire diameter for a gauge, or the default for unknown gauges."""
        try:
            return cls.GAUGE_TO_MM.get(gauge, cls.DEFAULT_DIAMETER_MM)
        except TypeError:
            # Unhashable input is just another unknown gauge
            return cls.DEFAULT_DIAMETER_MM


# =============================================================================
# SIMULATION DEFAULTS
# =============================================================================

class SimulationDefaults:
    """Initial values of the coil calculator form."""

    MATERIAL = WireMaterial.KANTHAL_A1
    WIRE_CONFIGURATION = WireConfiguration.ROUND
    COIL_CONFIGURATION = CoilCountConfiguration.SINGLE
    GAUGE = 26
    INNER_DIAMETER_MM = 3.0
    WRAPS = 6.0
    VOLTAGE = PhysicalConstants.DEFAULT_VOLTAGE

    # Continuous discharge rating of the battery [A]
    CDR_AMPS = 20.0


# =============================================================================
# EXPORT ALL
# =============================================================================

__all__ = [
    'PhysicalConstants',
    'WireMaterial',
    'WireConfiguration',
    'CoilCountConfiguration',
    'ThermalClass',
    'CoilMaterial',
    'MaterialsDatabase',
    'WireGaugeTable',
    'SimulationDefaults',
]
