"""
Coil Simulator - Coil Library Records
=====================================
Library entry created when a simulated build is saved from the calculator.
"""

import time
from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional, Any

from .config import BuildSpecification, _filter_kwargs


@dataclass
class SimulationSummary:
    """Thermal part of a simulation kept with a saved coil."""
    heat_flux: float = 0.0
    ramp_up_time: float = 0.0
    thermal_class: str = "Balanced"
    stress_index: float = 0.0
    efficiency_score: float = 0.0


@dataclass
class CoilRecord:
    """A saved coil build."""
    id: str
    name: str
    resistance: float
    material: str
    gauge: int
    wraps: float
    inner_diameter: float
    type: str = "Contact"  # Contact, Spaced
    wire_config: str = "Round"
    coil_count: str = "Single"
    liquid_consumed: float = 0.0
    usage_count: int = 0
    simulation: Optional[SimulationSummary] = None
    heat_capacity: Optional[float] = None
    surface_area: Optional[float] = None
    images: List[str] = field(default_factory=list)
    created_at: int = 0  # epoch ms

    @classmethod
    def from_simulation(cls, spec: BuildSpecification, output, name: str = "",
                        created_at: Optional[int] = None) -> 'CoilRecord':
        """Build a library entry from a spec and its SimulationOutput."""
        if created_at is None:
            created_at = int(time.time() * 1000)

        material = spec.material.value
        wire_config = spec.wire_configuration.value
        return cls(
            id=f"coil-{created_at}",
            name=name or f"{material} {wire_config} {output.resistance:.2f}Ω",
            resistance=round(output.resistance, 3),
            material=material,
            gauge=spec.gauge,
            wraps=spec.wraps,
            inner_diameter=spec.inner_diameter_mm,
            wire_config=wire_config,
            coil_count=spec.coil_configuration.value,
            simulation=SimulationSummary(
                heat_flux=output.heat_flux,
                ramp_up_time=output.ramp_up_time,
                thermal_class=output.thermal_class.value,
                stress_index=output.stress_index,
                efficiency_score=output.efficiency_score,
            ),
            heat_capacity=output.heat_capacity,
            surface_area=output.surface_area,
            created_at=created_at,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CoilRecord':
        kwargs = _filter_kwargs(cls, data)
        if isinstance(kwargs.get('simulation'), dict):
            kwargs['simulation'] = SimulationSummary(**_filter_kwargs(SimulationSummary, kwargs['simulation']))
        kwargs['images'] = list(kwargs.get('images') or [])
        return cls(**kwargs)


__all__ = ['CoilRecord', 'SimulationSummary']
