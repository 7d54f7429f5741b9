"""
Coil Simulator - Parameter Sweeps
=================================
Re-simulate a build across a range of one input (wraps, inner diameter,
voltage or gauge) and collect the outputs column-wise.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Iterable, Optional, Any, Tuple

import numpy as np

from ..core.config import BuildSpecification
from ..utils.logger import get_logger, timed_function
from .coil_solver import CoilSimulator, SimulationOutput


SWEEPABLE_FIELDS = ('wraps', 'inner_diameter_mm', 'voltage', 'gauge')

NUMERIC_COLUMNS = (
    'resistance', 'amperage', 'power_w', 'surface_area', 'heat_capacity',
    'heat_flux', 'ramp_up_time', 'stress_index', 'efficiency_score',
)


@dataclass
class SweepResult:
    """Outputs of a one-dimensional parameter sweep."""
    parameter: str
    values: np.ndarray
    outputs: List[SimulationOutput] = field(default_factory=list)
    _columns: Dict[str, np.ndarray] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self):
        for name in NUMERIC_COLUMNS:
            self._columns[name] = np.array([getattr(o, name) for o in self.outputs], dtype=np.float64)

    def __len__(self) -> int:
        return len(self.outputs)

    def column(self, name: str) -> np.ndarray:
        """One output quantity across the sweep."""
        if name not in self._columns:
            raise ValueError(f"Unknown output column: {name}. Choose from {list(NUMERIC_COLUMNS)}")
        return self._columns[name]

    def thermal_classes(self) -> List[str]:
        return [o.thermal_class.value for o in self.outputs]

    def best_efficiency(self) -> Optional[Tuple[int, float]]:
        """Index of the sweep value with the highest efficiency score.

        Ties go to the first occurrence. None for an empty sweep.
        """
        if not self.outputs:
            return None
        scores = self._columns['efficiency_score']
        idx = int(np.argmax(scores))
        return idx, float(self.values[idx])

    def to_rows(self) -> List[Dict[str, Any]]:
        rows = []
        for value, output in zip(self.values, self.outputs):
            row = {self.parameter: float(value)}
            row.update(output.to_dict())
            rows.append(row)
        return rows


@timed_function("parameter_sweep")
def sweep_parameter(spec: BuildSpecification, parameter: str, values: Iterable[float],
                    simulator: Optional[CoilSimulator] = None) -> SweepResult:
    """
    Simulate ``spec`` once per value of ``parameter``.

    Args:
        spec: Base build; every other input is held fixed
        parameter: One of wraps, inner_diameter_mm, voltage, gauge
        values: Values to substitute, in order

    Returns:
        SweepResult with the outputs in the same order as ``values``
    """
    if parameter not in SWEEPABLE_FIELDS:
        raise ValueError(f"Cannot sweep {parameter!r}. Choose from {list(SWEEPABLE_FIELDS)}")

    simulator = simulator or CoilSimulator()
    values = np.asarray(list(values), dtype=np.float64)
    get_logger().debug(f"Sweeping {parameter} over {len(values)} values")

    outputs = []
    for value in values:
        # Gauge is a table key, keep it integral when it is
        if parameter == 'gauge' and float(value).is_integer():
            value = int(value)
        else:
            value = float(value)
        outputs.append(simulator.run(spec.with_changes(**{parameter: value})))

    return SweepResult(parameter=parameter, values=values, outputs=outputs)


__all__ = ['SweepResult', 'sweep_parameter', 'SWEEPABLE_FIELDS', 'NUMERIC_COLUMNS']
