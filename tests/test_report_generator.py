import pytest

from coil_simulator.core.config import BuildSpecification
from coil_simulator.solvers.safety import evaluate_build
from coil_simulator.utils.report_generator import (
    BuildSheetGenerator, ReportSettings, generate_build_sheet, heat_flux_band
)


@pytest.mark.parametrize("flux, band", [
    (0.0, 'blue'), (149.9, 'blue'), (150.0, 'green'), (249.9, 'green'),
    (250.0, 'orange'), (349.9, 'orange'), (350.0, 'red'), (float('nan'), 'red'),
])
def test_heat_flux_band(flux, band):
    assert heat_flux_band(flux) == band


def test_generate_build_sheet(tmp_path):
    result = evaluate_build(BuildSpecification(cdr_amps=20.0))
    path = tmp_path / "sheet.pdf"
    assert generate_build_sheet(str(path), result.spec, result.output, result.safety,
                                ReportSettings(build_name="Daily MTL", author="tester"))
    assert path.read_bytes().startswith(b"%PDF")


def test_generate_degenerate_build(tmp_path):
    result = evaluate_build(BuildSpecification(wraps=float('nan'), voltage=0.0))
    path = tmp_path / "degenerate.pdf"
    generator = BuildSheetGenerator(ReportSettings(page_size="A4", include_material_summary=False))
    assert generator.generate(str(path), result.spec, result.output)
    assert path.exists()


def test_generate_reports_failure(tmp_path):
    result = evaluate_build(BuildSpecification())
    path = tmp_path / "missing" / "sheet.pdf"
    assert not generate_build_sheet(str(path), result.spec, result.output, result.safety)
