"""
Coil Simulator - Configuration Management
=========================================
Build specification record, calculator defaults and JSON serialization.

Author: Coil Build Lab
Version: 1.0.0
"""

import json
import logging
from typing import Dict, Optional, Any, Union
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from datetime import datetime

from .constants import (
    WireMaterial, WireConfiguration, CoilCountConfiguration, SimulationDefaults
)
from ..utils.logger import get_logger


def _filter_kwargs(dc_type, d: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Filter dict keys to those accepted by the dataclass constructor."""
    if d is None:
        return {}
    if not isinstance(d, dict):
        raise TypeError(f"Expected a JSON object for {dc_type.__name__}, got {type(d).__name__}")
    allowed = getattr(dc_type, '__dataclass_fields__', {}).keys()
    return {k: v for k, v in d.items() if k in allowed}


def resolve_log_level(name: Any, default: int = logging.WARNING) -> int:
    """Map a level name such as "ERROR" to its logging constant."""
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else default


@dataclass(frozen=True)
class BuildSpecification:
    """Everything the simulator needs to know about one coil build.

    ``cdr_amps`` is not used by the simulation itself; it is the battery
    continuous discharge rating the caller checks the amp draw against.
    """
    material: WireMaterial = SimulationDefaults.MATERIAL
    wire_configuration: WireConfiguration = SimulationDefaults.WIRE_CONFIGURATION
    coil_configuration: CoilCountConfiguration = SimulationDefaults.COIL_CONFIGURATION
    gauge: int = SimulationDefaults.GAUGE
    inner_diameter_mm: float = SimulationDefaults.INNER_DIAMETER_MM
    wraps: float = SimulationDefaults.WRAPS
    voltage: float = SimulationDefaults.VOLTAGE
    cdr_amps: Optional[float] = None

    def __post_init__(self):
        # Accept display names wherever an enum is expected
        object.__setattr__(self, 'material', WireMaterial.parse(self.material))
        object.__setattr__(self, 'wire_configuration', WireConfiguration.parse(self.wire_configuration))
        object.__setattr__(self, 'coil_configuration', CoilCountConfiguration.parse(self.coil_configuration))

    def with_changes(self, **changes) -> 'BuildSpecification':
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'material': self.material.value,
            'wire_configuration': self.wire_configuration.value,
            'coil_configuration': self.coil_configuration.value,
            'gauge': self.gauge,
            'inner_diameter_mm': self.inner_diameter_mm,
            'wraps': self.wraps,
            'voltage': self.voltage,
            'cdr_amps': self.cdr_amps,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BuildSpecification':
        return cls(**_filter_kwargs(cls, data))


@dataclass
class CalculatorConfig:
    """Persisted settings of the coil calculator."""
    version: str = "1.0.0"
    created: str = ""
    modified: str = ""

    default_build: BuildSpecification = field(default_factory=BuildSpecification)
    default_cdr_amps: float = SimulationDefaults.CDR_AMPS
    log_level: str = "WARNING"

    def __post_init__(self):
        if not self.created:
            self.created = datetime.now().isoformat()
        self.modified = datetime.now().isoformat()

    def effective_cdr(self, build: Optional[BuildSpecification] = None) -> float:
        """CDR of the given build, falling back to the configured default."""
        if build is not None and build.cdr_amps is not None:
            return build.cdr_amps
        return self.default_cdr_amps

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        self.modified = datetime.now().isoformat()
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data['default_build'] = self.default_build.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CalculatorConfig':
        """Create from dictionary."""
        kwargs = _filter_kwargs(cls, data)
        if 'default_build' in kwargs:
            kwargs['default_build'] = BuildSpecification.from_dict(kwargs['default_build'])
        return cls(**kwargs)


class ConfigManager:
    """Manages loading and saving the calculator configuration."""

    def __init__(self, config_path: Union[str, Path, None] = None):
        self._config_path: Optional[Path] = Path(config_path) if config_path else None
        self.config: Optional[CalculatorConfig] = None
        self.logger = get_logger()

    @property
    def config_path(self) -> Optional[Path]:
        return self._config_path

    def get_config(self) -> CalculatorConfig:
        """Get configuration, loading from file if exists."""
        if self.config:
            return self.config

        if self._config_path and self._config_path.exists():
            try:
                with open(self._config_path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
                self.config = CalculatorConfig.from_dict(data)
            except (OSError, ValueError, TypeError) as e:
                self.logger.warning(f"Failed to load config {self._config_path}: {e}")
                self.config = CalculatorConfig()
            self.apply_logging()
        else:
            self.config = CalculatorConfig()

        return self.config

    def save(self) -> bool:
        """Save configuration to file."""
        if not self.config or not self._config_path:
            return False
        return self._write(self._config_path)

    def export(self, path: Union[str, Path]) -> bool:
        """Export configuration to specified path."""
        if not self.config:
            return False
        return self._write(Path(path))

    def import_config(self, path: Union[str, Path]) -> bool:
        """Import configuration from file."""
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            self.config = CalculatorConfig.from_dict(data)
        except (OSError, ValueError, TypeError) as e:
            self.logger.warning(f"Failed to import config {path}: {e}")
            return False
        self.apply_logging()
        return True

    def apply_logging(self):
        """Set the simulator logger level from the loaded configuration."""
        if self.config:
            get_logger().set_log_level(resolve_log_level(self.config.log_level))

    def _write(self, path: Path) -> bool:
        try:
            data = self.config.to_dict()
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
            return True
        except OSError as e:
            self.logger.error(f"Failed to save config {path}: {e}")
            return False


__all__ = [
    'BuildSpecification', 'CalculatorConfig', 'ConfigManager', 'resolve_log_level',
]
