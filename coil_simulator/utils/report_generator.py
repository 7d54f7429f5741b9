"""
Coil Simulator - Build Sheet Generator
======================================
Generate a one-page PDF build sheet for a simulated coil.

Sections:
- Build parameters
- Wire material constants
- Simulation results (heat flux colour-coded)
- Battery safety verdict

Author: Coil Build Lab
Version: 1.0.0
"""

import math
from typing import Optional, List, Tuple
from dataclasses import dataclass
from datetime import datetime

from reportlab.lib import colors
from reportlab.lib.pagesizes import letter, A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import inch
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle
from reportlab.lib.enums import TA_CENTER

from ..core.config import BuildSpecification
from ..core.constants import MaterialsDatabase, WireGaugeTable
from ..solvers.coil_solver import SimulationOutput
from ..solvers.safety import SafetyAssessment
from .logger import get_logger, log_section


# Upper bounds [mW/mm²] of the calculator's flux colour bands
FLUX_BANDS: List[Tuple[float, str]] = [
    (150.0, 'blue'),
    (250.0, 'green'),
    (350.0, 'orange'),
]


def heat_flux_band(heat_flux: float) -> str:
    """Display colour for a heat flux value."""
    for upper, name in FLUX_BANDS:
        if heat_flux < upper:
            return name
    return 'red'


_BAND_COLORS = {
    'blue': colors.HexColor('#60A5FA'),
    'green': colors.HexColor('#4ADE80'),
    'orange': colors.HexColor('#FB923C'),
    'red': colors.HexColor('#EF4444'),
}


def _fmt(value: float, digits: int = 3) -> str:
    if math.isnan(value):
        return "n/a"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return f"{value:.{digits}f}"


@dataclass
class ReportSettings:
    """Settings for build sheet generation."""
    title: str = "Coil Build Sheet"
    build_name: str = ""
    author: str = ""
    page_size: str = "letter"  # 'letter' or 'A4'
    include_material_summary: bool = True


class BuildSheetGenerator:
    """Generate PDF build sheets."""

    def __init__(self, settings: Optional[ReportSettings] = None):
        self.settings = settings or ReportSettings()
        self.logger = get_logger()

    def generate(self, output_path: str,
                 spec: BuildSpecification,
                 output: SimulationOutput,
                 safety: Optional[SafetyAssessment] = None) -> bool:
        """
        Generate a build sheet.

        Returns True on success.
        """
        try:
            with log_section(f"Build sheet {output_path}"):
                self._build(output_path, spec, output, safety)
            return True
        except Exception:
            self.logger.exception(f"Build sheet generation failed: {output_path}")
            return False

    def _build(self, output_path: str, spec: BuildSpecification,
               output: SimulationOutput, safety: Optional[SafetyAssessment]):
        page_size = A4 if self.settings.page_size.lower() == 'a4' else letter

        doc = SimpleDocTemplate(
            str(output_path),
            pagesize=page_size,
            rightMargin=0.75*inch,
            leftMargin=0.75*inch,
            topMargin=0.75*inch,
            bottomMargin=0.75*inch
        )

        story = []
        styles = getSampleStyleSheet()

        title_style = ParagraphStyle(
            'CustomTitle',
            parent=styles['Heading1'],
            fontSize=22,
            spaceAfter=12,
            alignment=TA_CENTER
        )

        heading_style = ParagraphStyle(
            'CustomHeading',
            parent=styles['Heading2'],
            fontSize=13,
            spaceBefore=14,
            spaceAfter=6
        )

        story.append(Paragraph(self.settings.title, title_style))
        if self.settings.build_name:
            story.append(Paragraph(self.settings.build_name, styles['Heading3']))
        story.append(Paragraph(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}", styles['Normal']))
        if self.settings.author:
            story.append(Paragraph(f"Author: {self.settings.author}", styles['Normal']))
        story.append(Spacer(1, 0.2*inch))

        # Build parameters
        story.append(Paragraph("Build", heading_style))
        story.append(self._table([
            ['Material', spec.material.value],
            ['Wire', spec.wire_configuration.value],
            ['Coils', spec.coil_configuration.value],
            ['Gauge', f"{spec.gauge} ({WireGaugeTable.diameter_mm(spec.gauge)} mm)"],
            ['Inner diameter', f"{spec.inner_diameter_mm} mm"],
            ['Wraps', f"{spec.wraps}"],
            ['Voltage', f"{spec.voltage} V"],
        ]))

        if self.settings.include_material_summary:
            props = MaterialsDatabase.get(spec.material)
            story.append(Paragraph("Material", heading_style))
            story.append(self._table([
                ['Alloy', props.name],
                ['Resistivity', f"{props.resistivity} ohm·mm²/m"],
                ['Density', f"{props.density} g/cm³"],
                ['Specific heat', f"{props.specific_heat} J/(g·K)"],
            ]))

        # Results
        story.append(Paragraph("Simulation", heading_style))
        results = self._table([
            ['Resistance', f"{_fmt(output.resistance)} ohm"],
            ['Amp draw', f"{_fmt(output.amperage, 2)} A"],
            ['Power', f"{_fmt(output.power_w, 2)} W"],
            ['Heat flux', f"{_fmt(output.heat_flux, 1)} mW/mm²"],
            ['Thermal class', output.thermal_class.value],
            ['Surface area', f"{_fmt(output.surface_area, 2)} mm²"],
            ['Heat capacity', f"{_fmt(output.heat_capacity, 2)} mJ/K"],
            ['Ramp-up (25 to 200 °C)', f"{_fmt(output.ramp_up_time, 2)} s"],
            ['Stress index', f"{_fmt(output.stress_index, 1)}"],
            ['Efficiency', f"{_fmt(output.efficiency_score, 1)}"],
        ])
        band = _BAND_COLORS[heat_flux_band(output.heat_flux)]
        results.setStyle(TableStyle([('BACKGROUND', (1, 3), (1, 3), band)]))
        story.append(results)

        if safety is not None:
            story.append(Paragraph("Battery safety", heading_style))
            verdict = self._table([
                ['Amp draw', f"{_fmt(safety.amperage, 2)} A"],
                ['Battery CDR', f"{_fmt(safety.cdr_amps, 1)} A"],
                ['Verdict', 'SAFE' if safety.is_safe else 'UNSAFE'],
            ])
            verdict.setStyle(TableStyle([
                ('TEXTCOLOR', (1, 2), (1, 2), colors.green if safety.is_safe else colors.red),
            ]))
            story.append(verdict)

        doc.build(story)

    @staticmethod
    def _table(rows) -> Table:
        table = Table(rows, colWidths=[2.2*inch, 3.5*inch])
        table.setStyle(TableStyle([
            ('FONTNAME', (0, 0), (0, -1), 'Helvetica-Bold'),
            ('GRID', (0, 0), (-1, -1), 0.5, colors.grey),
            ('BACKGROUND', (0, 0), (0, -1), colors.whitesmoke),
            ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
        ]))
        return table


def generate_build_sheet(output_path: str,
                         spec: BuildSpecification,
                         output: SimulationOutput,
                         safety: Optional[SafetyAssessment] = None,
                         settings: Optional[ReportSettings] = None) -> bool:
    """
    Convenience function to generate a build sheet.

    Returns:
        True if the PDF was written successfully
    """
    return BuildSheetGenerator(settings).generate(output_path, spec, output, safety)


__all__ = ['BuildSheetGenerator', 'ReportSettings', 'generate_build_sheet', 'heat_flux_band', 'FLUX_BANDS']
