"""
Coil Simulator - Utilities Module
=================================
Logging and build sheet generation.
"""

from .logger import (
    CoilSimulatorLogger,
    CoilSimulatorFormatter,
    PerformanceTracker,
    get_logger,
    initialize_logger,
    timed_function,
    log_section,
)


def __getattr__(name):
    """Lazy access to the report classes (they import the solvers)."""
    if name in ('BuildSheetGenerator', 'ReportSettings', 'generate_build_sheet', 'heat_flux_band'):
        from . import report_generator
        return getattr(report_generator, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    # Logger
    'CoilSimulatorLogger',
    'CoilSimulatorFormatter',
    'PerformanceTracker',
    'get_logger',
    'initialize_logger',
    'timed_function',
    'log_section',
    # Report (lazy loaded)
    'BuildSheetGenerator',
    'ReportSettings',
    'generate_build_sheet',
    'heat_flux_band',
]
