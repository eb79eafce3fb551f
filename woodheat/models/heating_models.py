"""Data models for grid data, scenarios and emission comparisons."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from woodheat.models.constants import HeatSource, MixCategory


@dataclass(frozen=True)
class IntensityPoint:
    """One monthly grid carbon-intensity observation.

    Attributes
    ----------
    date : str
        Day-granularity ISO date (``YYYY-MM-DD``).
    value : float
        Grid intensity in gCO2/kWh of electricity.
    """

    date: str
    value: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {"date": self.date, "value": self.value}


@dataclass(frozen=True)
class CountryOption:
    """An entry of the selectable-country list."""

    iso3: str
    name: str


@dataclass(frozen=True)
class Coordinate:
    """Latitude/longitude in decimal degrees."""

    lat: float
    lon: float


@dataclass(frozen=True)
class MixSlice:
    """One segment of a generation-mix breakdown.

    Attributes
    ----------
    category : MixCategory
        Mix bucket (``Other`` for folded minor categories).
    label : str
        Display label.
    share : float
        Percentage of total generation.
    color : str
        Display colour.
    emission : float | None
        Emission rate in gCO2/kWh, or None when the dataset has none.
    """

    category: MixCategory
    label: str
    share: float
    color: str
    emission: float | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "category": self.category.value,
            "label": self.label,
            "share_pct": round(self.share, 4),
            "color": self.color,
            "emission_g_per_kwh": (
                round(self.emission, 4) if self.emission is not None else None
            ),
        }


@dataclass(frozen=True)
class ScenarioInputs:
    """Everything the emissions model needs besides the constants.

    Attributes
    ----------
    heat_source : HeatSource
        Heating method compared against wood.
    annual_heat_mwh : float
        Useful heat demand per year in MWh.
    gwp_bio_scale_pct : float
        Percentage applied to the GWPbio table (100 = table values).
    effective_cop : float | None
        Resolved COP for electric sources, None for combustion.
    current_year : int
        First year of every projection.
    grid_intensity : float
        Current grid intensity in gCO2/kWh.
    """

    heat_source: HeatSource
    annual_heat_mwh: float
    gwp_bio_scale_pct: float
    effective_cop: float | None
    current_year: int
    grid_intensity: float

    @property
    def annual_kwh(self) -> float:
        """Annual heat demand in kWh."""
        return self.annual_heat_mwh * 1000.0


@dataclass(frozen=True)
class CumulativeEmissions:
    """Cumulative emissions over one horizon, in grams CO2e."""

    horizon: int
    wood_g: float
    comparator_g: float
    diff_g: float
    diff_pct: float


@dataclass(frozen=True)
class HorizonComparison:
    """One row of the comparison table, in tonnes CO2e."""

    horizon: int
    wood_t: float
    comparator_t: float
    diff_t: float
    diff_pct: float

    @classmethod
    def from_cumulative(cls, totals: CumulativeEmissions) -> HorizonComparison:
        """Convert gram totals into a table row."""
        return cls(
            horizon=totals.horizon,
            wood_t=totals.wood_g / 1_000_000,
            comparator_t=totals.comparator_g / 1_000_000,
            diff_t=totals.diff_g / 1_000_000,
            diff_pct=totals.diff_pct,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "horizon_years": self.horizon,
            "wood_t": round(self.wood_t, 6),
            "comparator_t": round(self.comparator_t, 6),
            "diff_t": round(self.diff_t, 6),
            "diff_pct": round(self.diff_pct, 4),
        }


@dataclass(frozen=True)
class TenYearSnapshot:
    """Average gCO2e per kWh of heat over the next ten years."""

    wood_per_kwh: float = 0.0
    heating_per_kwh: float = 0.0
    diff_per_kwh: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "wood_g_per_kwh": round(self.wood_per_kwh, 4),
            "heating_g_per_kwh": round(self.heating_per_kwh, 4),
            "diff_g_per_kwh": round(self.diff_per_kwh, 4),
        }


@dataclass(frozen=True)
class ComparisonResult:
    """Full comparison for one scenario."""

    inputs: ScenarioInputs
    comparator_label: str
    comparator_per_kwh_now: float
    rows: tuple[HorizonComparison, ...]
    snapshot: TenYearSnapshot

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "heat_source": self.inputs.heat_source.value,
            "comparator_label": self.comparator_label,
            "annual_heat_mwh": self.inputs.annual_heat_mwh,
            "gwp_bio_scale_pct": self.inputs.gwp_bio_scale_pct,
            "effective_cop": self.inputs.effective_cop,
            "current_year": self.inputs.current_year,
            "grid_intensity_g_per_kwh": self.inputs.grid_intensity,
            "comparator_g_per_kwh_now": round(self.comparator_per_kwh_now, 4),
            "horizons": [row.to_dict() for row in self.rows],
            "ten_year_snapshot": self.snapshot.to_dict(),
        }


@dataclass
class CountrySummary:
    """Grid context for the selected country.

    Attributes
    ----------
    iso3 : str
        Country code (empty when nothing is selected).
    name : str
        Display name.
    grid_intensity : float
        Latest observed intensity, or the baseline fallback.
    grid_source : str
        ``"Ember monthly"``, ``"baseline"`` or ``"baseline (error)"``.
    last_updated : str
        Date of the latest observation, empty for baselines.
    recent : list[IntensityPoint]
        Up to three most recent observations, newest first.
    mix : list[MixSlice]
        Folded generation-mix breakdown.
    """

    iso3: str
    name: str
    grid_intensity: float
    grid_source: str
    last_updated: str = ""
    recent: list[IntensityPoint] = field(default_factory=list)
    mix: list[MixSlice] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "iso3": self.iso3,
            "name": self.name,
            "grid_intensity_g_per_kwh": self.grid_intensity,
            "grid_source": self.grid_source,
            "last_updated": self.last_updated,
            "recent": [p.to_dict() for p in self.recent],
            "mix": [s.to_dict() for s in self.mix],
        }
