import json
import logging

import pytest

from coil_simulator.core.config import (
    BuildSpecification, CalculatorConfig, ConfigManager, resolve_log_level
)
from coil_simulator.core.constants import (
    WireMaterial, WireConfiguration, CoilCountConfiguration, SimulationDefaults
)
from coil_simulator.utils.logger import get_logger, initialize_logger


@pytest.fixture(autouse=True)
def fresh_logger():
    yield
    initialize_logger()


def test_build_specification_defaults_match_calculator_form():
    spec = BuildSpecification()
    assert spec.material is WireMaterial.KANTHAL_A1
    assert spec.wire_configuration is WireConfiguration.ROUND
    assert spec.coil_configuration is CoilCountConfiguration.SINGLE
    assert spec.gauge == 26
    assert spec.inner_diameter_mm == 3.0
    assert spec.wraps == 6
    assert spec.voltage == 3.7
    assert spec.cdr_amps is None


def test_build_specification_parses_display_names():
    spec = BuildSpecification(material='Ni80', wire_configuration='Twisted', coil_configuration='Dual')
    assert spec.material is WireMaterial.NICHROME_80
    assert spec.wire_configuration is WireConfiguration.TWISTED
    assert spec.coil_configuration is CoilCountConfiguration.DUAL


def test_build_specification_rejects_unknown_material():
    with pytest.raises(ValueError):
        BuildSpecification(material='Unobtainium')


def test_build_specification_dict_round_trip():
    spec = BuildSpecification(material=WireMaterial.SS316L, gauge=28, wraps=7.5, cdr_amps=25.0)
    data = spec.to_dict()
    assert data['material'] == 'SS316L'
    assert BuildSpecification.from_dict({**data, 'unknown': 1}) == spec


def test_calculator_config_round_trip():
    config = CalculatorConfig(default_cdr_amps=30.0,
                              default_build=BuildSpecification(material=WireMaterial.TITANIUM))
    restored = CalculatorConfig.from_dict(config.to_dict())
    assert restored.default_cdr_amps == 30.0
    assert restored.default_build.material is WireMaterial.TITANIUM
    assert restored.created == config.created


def test_effective_cdr():
    config = CalculatorConfig()
    assert config.effective_cdr() == SimulationDefaults.CDR_AMPS
    assert config.effective_cdr(BuildSpecification(cdr_amps=15.0)) == 15.0


def test_config_manager_save_and_load(tmp_path):
    path = tmp_path / "calculator.json"
    manager = ConfigManager(path)
    config = manager.get_config()
    config.default_cdr_amps = 35.0
    assert manager.save()

    reloaded = ConfigManager(path).get_config()
    assert reloaded.default_cdr_amps == 35.0


def test_config_manager_falls_back_on_corrupt_file(tmp_path):
    path = tmp_path / "calculator.json"
    path.write_text("{not json", encoding="utf-8")
    config = ConfigManager(path).get_config()
    assert config.default_cdr_amps == SimulationDefaults.CDR_AMPS


@pytest.mark.parametrize("payload", [[1, 2], {"default_build": "Kanthal"}, "text"])
def test_config_manager_falls_back_on_non_object_json(tmp_path, payload):
    path = tmp_path / "calculator.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    config = ConfigManager(path).get_config()
    assert config.default_cdr_amps == SimulationDefaults.CDR_AMPS
    assert config.default_build == BuildSpecification()

    manager = ConfigManager()
    assert not manager.import_config(path)
    assert manager.config is None


def test_config_manager_falls_back_on_unknown_material(tmp_path):
    path = tmp_path / "calculator.json"
    path.write_text(json.dumps({'default_build': {'material': 'Copper'}}), encoding="utf-8")
    config = ConfigManager(path).get_config()
    assert config.default_build.material is WireMaterial.KANTHAL_A1


def test_config_manager_without_path_cannot_save():
    manager = ConfigManager()
    manager.get_config()
    assert not manager.save()


def test_export_and_import(tmp_path):
    source = ConfigManager()
    source.get_config().log_level = "DEBUG"
    target_path = tmp_path / "exported.json"
    assert source.export(target_path)

    other = ConfigManager()
    assert other.import_config(target_path)
    assert other.config.log_level == "DEBUG"
    assert not other.import_config(tmp_path / "missing.json")


def test_loaded_log_level_is_applied(tmp_path):
    path = tmp_path / "calculator.json"
    path.write_text(json.dumps({'log_level': 'ERROR'}), encoding="utf-8")

    ConfigManager(path).get_config()
    assert get_logger().logger.level == logging.ERROR

    initialize_logger()
    assert ConfigManager().import_config(path)
    assert get_logger().logger.level == logging.ERROR


def test_resolve_log_level():
    assert resolve_log_level("error") == logging.ERROR
    assert resolve_log_level("DEBUG") == logging.DEBUG
    assert resolve_log_level("loud") == logging.WARNING
    assert resolve_log_level(None, default=logging.INFO) == logging.INFO
