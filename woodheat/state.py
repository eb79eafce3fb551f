"""Application state feeding the emissions model.

``AppState`` owns the user's selection and the loaded dataset snapshot.
The model itself never sees it: ``scenario_inputs`` freezes the current
selection into a ``ScenarioInputs`` struct, and ``comparison`` reuses the
previous result while that struct is unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from woodheat.data.loader import DatasetSnapshot
from woodheat.data.mix import fold_mix_slices
from woodheat.emissions.calculator import EmissionsCalculator
from woodheat.emissions.cop import resolve_cop
from woodheat.emissions.grid_intensity import current_grid_intensity
from woodheat.models.config_models import DEFAULTS, EmissionDefaults
from woodheat.models.constants import HeatSource
from woodheat.models.heating_models import (
    ComparisonResult,
    CountrySummary,
    ScenarioInputs,
)
from woodheat.utils.logger import Logger
from woodheat.utils.numbers import clamp, parse_finite

PREFERRED_COUNTRY = "DEU"
GWP_BIO_SCALE_RANGE = (25.0, 150.0)
DEFAULT_ANNUAL_HEAT_MWH = 10.0

_log = Logger.lazy("state")


@dataclass
class AppState:
    """Live selection and user-adjustable scalars.

    Attributes
    ----------
    defaults : EmissionDefaults
        Constants used for COP resolution and the model.
    snapshot : DatasetSnapshot
        Most recently applied dataset.
    country : str
        Selected ISO3 code, empty when nothing can be selected.
    heat_source : HeatSource
        Comparator heat source.
    annual_heat_mwh : float
        Useful heat demand per year.
    gwp_bio_scale_pct : float
        GWPbio scale, kept within ``GWP_BIO_SCALE_RANGE``.
    cop_override : str
        Raw manual COP text for heat pumps.
    district_cop : str
        Raw COP text for district heating.
    temperature_c : float | None
        Current ambient temperature, None while unknown.
    """

    defaults: EmissionDefaults = DEFAULTS
    snapshot: DatasetSnapshot = field(default_factory=DatasetSnapshot)
    country: str = ""
    heat_source: HeatSource = HeatSource.ASHP
    annual_heat_mwh: float = DEFAULT_ANNUAL_HEAT_MWH
    gwp_bio_scale_pct: float = 100.0
    cop_override: str = ""
    district_cop: str = ""
    temperature_c: float | None = None
    _memo: tuple[ScenarioInputs, ComparisonResult] | None = field(
        default=None, init=False, repr=False
    )

    def __post_init__(self) -> None:
        if not self.district_cop:
            self.district_cop = str(self.defaults.district.cop)
        self._calculator = EmissionsCalculator(self.defaults)

    # -------------------------------------------------------------------------
    # Selection
    # -------------------------------------------------------------------------

    def apply_snapshot(self, snapshot: DatasetSnapshot) -> None:
        """Replace the dataset and repair the country selection.

        The previous country is kept if the new data still has it;
        otherwise DEU is preferred, then the first country by name. With
        no countries at all the selection is cleared.
        """
        self.snapshot = snapshot
        countries = snapshot.countries
        if not countries:
            self.country = ""
            return
        if self.country and snapshot.has_country(self.country):
            return
        preferred = next((c for c in countries if c.iso3 == PREFERRED_COUNTRY), countries[0])
        self.country = preferred.iso3
        _log.debug("Selected country %s", self.country)

    def select_country(self, iso3: str) -> None:
        """Select a country; the temperature is unknown until looked up."""
        code = iso3.strip().upper()
        if code != self.country:
            self.temperature_c = None
        self.country = code

    def select_heat_source(self, source: HeatSource | str) -> None:
        """Select the comparator; leaving district heating resets its COP."""
        self.heat_source = HeatSource(source)
        if self.heat_source != HeatSource.DH:
            self.district_cop = str(self.defaults.district.cop)

    def set_annual_heat(self, value: Any) -> None:
        """Set annual demand in MWh; unparseable or negative input is ignored."""
        parsed = parse_finite(value)
        if parsed is None or parsed < 0:
            _log.debug("Ignoring annual heat %r", value)
            return
        self.annual_heat_mwh = parsed

    def set_gwp_bio_scale(self, value: Any) -> None:
        """Set the GWPbio scale in percent, clamped to the allowed range."""
        parsed = parse_finite(value)
        if parsed is None:
            return
        self.gwp_bio_scale_pct = clamp(parsed, *GWP_BIO_SCALE_RANGE)

    def set_temperature(self, value: Any) -> None:
        """Record the ambient temperature (None when unavailable)."""
        self.temperature_c = parse_finite(value)

    # -------------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------------

    def country_summary(self) -> CountrySummary:
        """Grid context and generation mix for the selected country."""
        intensity, source, updated = current_grid_intensity(
            self.snapshot, self.country or None, self.defaults
        )
        mix = self.snapshot.mix
        return CountrySummary(
            iso3=self.country,
            name=self.snapshot.name_of(self.country) if self.country else "",
            grid_intensity=intensity,
            grid_source=source,
            last_updated=updated,
            recent=self.snapshot.history.recent(self.country) if self.country else [],
            mix=fold_mix_slices(mix.shares.get(self.country), mix.intensities.get(self.country)),
        )

    def effective_cop(self) -> float | None:
        """COP of the selected heat source under the current inputs."""
        return resolve_cop(
            self.heat_source,
            temperature_c=self.temperature_c,
            override=self.cop_override,
            district_cop=self.district_cop,
            defaults=self.defaults,
        )

    def scenario_inputs(self, current_year: int | None = None) -> ScenarioInputs:
        """Freeze the current selection for the emissions model."""
        intensity, _, _ = current_grid_intensity(self.snapshot, self.country or None, self.defaults)
        return ScenarioInputs(
            heat_source=self.heat_source,
            annual_heat_mwh=self.annual_heat_mwh,
            gwp_bio_scale_pct=self.gwp_bio_scale_pct,
            effective_cop=self.effective_cop(),
            current_year=current_year if current_year is not None else date.today().year,
            grid_intensity=intensity,
        )

    def comparison(self, current_year: int | None = None) -> ComparisonResult:
        """Comparison for the current inputs, recomputed only when they change."""
        inputs = self.scenario_inputs(current_year)
        if self._memo is not None and self._memo[0] == inputs:
            return self._memo[1]
        result = self._calculator.compare(inputs)
        self._memo = (inputs, result)
        return result
