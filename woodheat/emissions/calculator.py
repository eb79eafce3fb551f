"""Emissions per kWh of useful heat, cumulative and averaged over horizons."""

from __future__ import annotations

import math

from woodheat.emissions.cop import resolve_cop
from woodheat.emissions.grid_intensity import grid_intensity_path
from woodheat.models.config_models import DEFAULTS, EmissionDefaults
from woodheat.models.constants import HeatSource
from woodheat.models.heating_models import (
    ComparisonResult,
    CumulativeEmissions,
    HorizonComparison,
    ScenarioInputs,
    TenYearSnapshot,
)

SNAPSHOT_HORIZON = 10


class EmissionsCalculator:
    """Compare a wood stove against another heat source.

    Every method is a pure function of its arguments and the constants
    the calculator was built with.

    Parameters
    ----------
    defaults : EmissionDefaults
        Emission factors, efficiencies, COP formulas and policy targets.
    """

    def __init__(self, defaults: EmissionDefaults = DEFAULTS) -> None:
        self.defaults = defaults

    def _usable_cop(self, source: HeatSource, cop: float | None) -> float:
        if cop is not None and math.isfinite(cop) and cop > 0:
            return cop
        fallback = resolve_cop(source, defaults=self.defaults)
        return fallback if fallback is not None else 1.0

    def heat_emission_rate(
        self, source: HeatSource, grid_intensity: float, cop: float | None = None
    ) -> float:
        """Emissions per kWh of delivered heat for a non-wood source.

        Parameters
        ----------
        source : HeatSource
            Heat source.
        grid_intensity : float
            Grid intensity for the year, gCO2/kWh of electricity.
        cop : float | None
            Effective COP for heat pumps and district heating; unusable
            values fall back to the source's default COP.

        Returns
        -------
        float
            gCO2e per kWh of heat. Gas and oil ignore the grid.
        """
        if source in (HeatSource.ASHP, HeatSource.GSHP, HeatSource.DH):
            return grid_intensity / self._usable_cop(source, cop)
        if source == HeatSource.RESISTIVE:
            return grid_intensity
        if source == HeatSource.GAS:
            return self.defaults.gas.ef_co2_fuel_g_per_kwh / self.defaults.gas.boiler_eff
        if source == HeatSource.OIL:
            return self.defaults.oil.ef_co2_fuel_g_per_kwh / self.defaults.oil.boiler_eff
        raise ValueError(f"Unknown heat source: {source}")

    def comparator_label(self, source: HeatSource, cop: float | None = None) -> str:
        """Short description of the comparator, with its COP where relevant."""
        if source in (HeatSource.ASHP, HeatSource.GSHP, HeatSource.DH):
            return f"{source.label} (COP {self._usable_cop(source, cop):.2f})"
        if source == HeatSource.GAS:
            return "Gas boiler"
        if source == HeatSource.OIL:
            return "Oil boiler"
        return source.label

    def gwp_bio(self, horizon: int) -> float:
        """GWPbio factor for a horizon; a flat fallback outside the table."""
        return self.defaults.gwp_bio.get(horizon, self.defaults.gwp_bio_fallback)

    def wood_emission_rate(self, horizon: int, scale_pct: float = 100.0) -> float:
        """Wood stove emissions per kWh of heat at a horizon.

        Parameters
        ----------
        horizon : int
            Horizon in years, selects the GWPbio factor.
        scale_pct : float
            Percentage applied to the GWPbio factor.

        Returns
        -------
        float
            gCO2e per kWh of heat: time-weighted biogenic CO2 plus
            CH4/N2O, both divided by stove efficiency.
        """
        wood = self.defaults.wood
        gwp = self.gwp_bio(horizon) * (scale_pct / 100)
        co2 = wood.ef_co2_fuel_g_per_kwh * gwp / wood.stove_eff
        non_co2 = wood.ef_ch4_n2o_g_per_kwh / wood.stove_eff
        return co2 + non_co2

    def intensity_path(self, horizon: int, inputs: ScenarioInputs) -> list[float]:
        """Yearly grid intensity over a horizon under the policy path."""
        policy = self.defaults.policy
        return grid_intensity_path(
            inputs.current_year,
            horizon,
            inputs.grid_intensity,
            policy.target_year,
            policy.target_grid_intensity_g_per_kwh,
        )

    def cumulative(self, horizon: int, inputs: ScenarioInputs) -> CumulativeEmissions:
        """Total emissions of both options over ``horizon`` years.

        Parameters
        ----------
        horizon : int
            Years to accumulate.
        inputs : ScenarioInputs
            Scenario parameters.

        Returns
        -------
        CumulativeEmissions
            Grams CO2e for wood and comparator, their difference
            (comparator - wood), and that difference as a percentage of
            the comparator (0 when the comparator total is not positive).
        """
        annual_kwh = inputs.annual_kwh if math.isfinite(inputs.annual_kwh) else 0.0
        comparator = 0.0
        for grid in self.intensity_path(horizon, inputs):
            rate = self.heat_emission_rate(inputs.heat_source, grid, inputs.effective_cop)
            comparator += rate * annual_kwh

        wood_rate = self.wood_emission_rate(horizon, inputs.gwp_bio_scale_pct)
        wood = wood_rate * max(horizon, 0) * annual_kwh

        diff = comparator - wood
        diff_pct = diff / comparator * 100 if comparator > 0 else 0.0
        return CumulativeEmissions(
            horizon=horizon,
            wood_g=wood,
            comparator_g=comparator,
            diff_g=diff,
            diff_pct=diff_pct,
        )

    def ten_year_snapshot(self, inputs: ScenarioInputs) -> TenYearSnapshot:
        """Average emissions per kWh of heat over the next ten years."""
        totals = self.cumulative(SNAPSHOT_HORIZON, inputs)
        total_kwh = inputs.annual_kwh * SNAPSHOT_HORIZON
        if not math.isfinite(total_kwh) or total_kwh <= 0:
            return TenYearSnapshot()
        wood = totals.wood_g / total_kwh
        heating = totals.comparator_g / total_kwh
        return TenYearSnapshot(
            wood_per_kwh=wood,
            heating_per_kwh=heating,
            diff_per_kwh=heating - wood,
        )

    def compare(self, inputs: ScenarioInputs) -> ComparisonResult:
        """Comparison table for every configured horizon plus the snapshot."""
        rows = tuple(
            HorizonComparison.from_cumulative(self.cumulative(horizon, inputs))
            for horizon in self.defaults.horizons
        )
        return ComparisonResult(
            inputs=inputs,
            comparator_label=self.comparator_label(inputs.heat_source, inputs.effective_cop),
            comparator_per_kwh_now=self.heat_emission_rate(
                inputs.heat_source, inputs.grid_intensity, inputs.effective_cop
            ),
            rows=rows,
            snapshot=self.ten_year_snapshot(inputs),
        )
