"""Emissions model: COP resolution, grid path and wood vs. heating comparison."""

from woodheat.emissions.calculator import SNAPSHOT_HORIZON, EmissionsCalculator
from woodheat.emissions.cop import ashp_cop, gshp_cop, resolve_cop
from woodheat.emissions.grid_intensity import (
    current_grid_intensity,
    get_baseline_intensity,
    grid_intensity_path,
)

__all__ = [
    "SNAPSHOT_HORIZON",
    "EmissionsCalculator",
    "ashp_cop",
    "current_grid_intensity",
    "get_baseline_intensity",
    "grid_intensity_path",
    "gshp_cop",
    "resolve_cop",
]
