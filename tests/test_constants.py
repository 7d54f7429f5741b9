import pytest

from coil_simulator.core.constants import (
    PhysicalConstants, WireMaterial, WireConfiguration, CoilCountConfiguration,
    MaterialsDatabase, WireGaugeTable
)


@pytest.mark.parametrize("material, resistivity, density, specific_heat", [
    (WireMaterial.KANTHAL_A1, 1.45, 7.1, 0.46),
    (WireMaterial.NICHROME_80, 1.09, 8.4, 0.45),
    (WireMaterial.SS316L, 0.74, 8.0, 0.50),
    (WireMaterial.NI200, 0.096, 8.9, 0.44),
    (WireMaterial.TITANIUM, 0.42, 4.5, 0.52),
])
def test_material_constants(material, resistivity, density, specific_heat):
    props = MaterialsDatabase.get(material)
    assert props.resistivity == resistivity
    assert props.density == density
    assert props.specific_heat == specific_heat


def test_materials_are_immutable():
    props = MaterialsDatabase.get(WireMaterial.KANTHAL_A1)
    with pytest.raises(AttributeError):
        props.resistivity = 2.0


def test_every_material_has_constants():
    assert set(MaterialsDatabase.get_all_materials()) == set(WireMaterial)


def test_lookup_by_display_or_member_name():
    assert MaterialsDatabase.get('Ni200') is MaterialsDatabase.get('NI200')
    with pytest.raises(ValueError):
        MaterialsDatabase.get('Copper')


@pytest.mark.parametrize("gauge, diameter", [
    (20, 0.812), (22, 0.644), (24, 0.511), (26, 0.405), (28, 0.321), (30, 0.255), (32, 0.202),
    (26.0, 0.405), (99, 0.4), (21, 0.4), (0, 0.4), (-26, 0.4), ([26], 0.4),
])
def test_gauge_table(gauge, diameter):
    assert WireGaugeTable.diameter_mm(gauge) == diameter


def test_strand_multipliers_and_coil_counts():
    assert [c.strand_multiplier for c in WireConfiguration] == [1.0, 2.0, 2.1]
    assert [c.coil_count for c in CoilCountConfiguration] == [1, 2, 3, 4]
    assert CoilCountConfiguration.parse('Quad') is CoilCountConfiguration.QUAD
    with pytest.raises(ValueError):
        WireConfiguration.parse('Clapton')


def test_ramp_window():
    assert PhysicalConstants.RAMP_DELTA_T == 175.0
