"""Data models and configuration for woodheat."""

from woodheat.models.config_models import (
    DEFAULTS,
    EmissionDefaults,
    load_defaults,
)
from woodheat.models.constants import (
    HeatSource,
    MixCategory,
)
from woodheat.models.heating_models import (
    ComparisonResult,
    Coordinate,
    CountryOption,
    CountrySummary,
    CumulativeEmissions,
    HorizonComparison,
    IntensityPoint,
    MixSlice,
    ScenarioInputs,
    TenYearSnapshot,
)

__all__ = [
    "DEFAULTS",
    "EmissionDefaults",
    "load_defaults",
    "HeatSource",
    "MixCategory",
    # Records
    "ComparisonResult",
    "Coordinate",
    "CountryOption",
    "CountrySummary",
    "CumulativeEmissions",
    "HorizonComparison",
    "IntensityPoint",
    "MixSlice",
    "ScenarioInputs",
    "TenYearSnapshot",
]
