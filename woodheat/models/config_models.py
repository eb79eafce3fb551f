"""Emission factors, efficiencies and policy constants.

All values are configuration rather than computed state. ``DEFAULTS``
is the built-in set; ``load_defaults`` layers a YAML or JSON override
file on top of it.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from woodheat.errors import DefaultsFileError


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class WoodDefaults(_Frozen):
    """Wood stove emission factors per kWh of fuel."""

    ef_co2_fuel_g_per_kwh: float = Field(403.0, ge=0, description="Biogenic CO2 per kWh of wood")
    ef_ch4_n2o_g_per_kwh: float = Field(30.0, ge=0, description="CH4 + N2O per kWh of wood, CO2e")
    stove_eff: float = Field(0.75, gt=0, description="Stove efficiency (heat out / fuel in)")


class BoilerDefaults(_Frozen):
    """Combustion boiler emission factor and efficiency."""

    ef_co2_fuel_g_per_kwh: float = Field(..., ge=0)
    boiler_eff: float = Field(..., gt=0)


class DistrictDefaults(_Frozen):
    """Electric district heating."""

    cop: float = Field(2.5, gt=0)


class GSHPDefaults(_Frozen):
    """Ground-source heat pump."""

    base_cop: float = Field(4.0, gt=0)


class ASHPDefaults(_Frozen):
    """Air-source heat pump: COP = clamp(a + b*T, min_cop, max_cop)."""

    a: float = 2.8
    b: float = 0.06
    min_cop: float = Field(1.8, gt=0)
    max_cop: float = Field(5.0, gt=0)


class PolicyDefaults(_Frozen):
    """Linear grid decarbonization target."""

    target_year: int = 2050
    target_grid_intensity_g_per_kwh: float = Field(50.0, ge=0)


class EmissionDefaults(_Frozen):
    """Complete set of physical and engineering constants."""

    wood: WoodDefaults = WoodDefaults()
    gas: BoilerDefaults = BoilerDefaults(ef_co2_fuel_g_per_kwh=202.0, boiler_eff=0.92)
    oil: BoilerDefaults = BoilerDefaults(ef_co2_fuel_g_per_kwh=267.0, boiler_eff=0.9)
    district: DistrictDefaults = DistrictDefaults()
    gshp: GSHPDefaults = GSHPDefaults()
    ashp: ASHPDefaults = ASHPDefaults()
    policy: PolicyDefaults = PolicyDefaults()
    gwp_bio: dict[int, float] = Field(
        default_factory=lambda: {1: 0.95, 10: 0.85, 30: 0.7, 100: 0.5, 1000: 0.25},
        description="GWPbio factor by horizon in years",
    )
    gwp_bio_fallback: float = Field(0.5, ge=0, description="GWPbio for horizons not in the table")
    horizons: tuple[int, ...] = (1, 10, 30, 100, 1000)
    default_ambient_temp_c: float = Field(5.0, description="Used when no forecast is available")
    valid_units: frozenset[str] = frozenset({"gco2/kwh", "gco2/kwh_e", "gco2eq/kwh"})
    baseline_grid_intensity: dict[str, float] = Field(
        default_factory=lambda: {"DEU": 320.0, "FRA": 60.0, "POL": 680.0, "USA": 360.0},
        description="Fallback gCO2/kWh per ISO3 code when the dataset has no series",
    )
    default_baseline_intensity: float = Field(350.0, ge=0)

    def baseline_intensity(self, iso3: str | None) -> float:
        """Baseline grid intensity for a country, or the global default."""
        if not iso3:
            return self.default_baseline_intensity
        return self.baseline_grid_intensity.get(iso3.upper(), self.default_baseline_intensity)


DEFAULTS = EmissionDefaults()


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_defaults(path: str | Path, base: EmissionDefaults = DEFAULTS) -> EmissionDefaults:
    """Load an override file and merge it over ``base``.

    Parameters
    ----------
    path : str | Path
        YAML (``.yml``/``.yaml``) or JSON file. Only the keys to change
        need to be present; nested sections are merged key by key.
    base : EmissionDefaults
        Values the overrides are applied to.

    Returns
    -------
    EmissionDefaults
        Validated, frozen defaults.

    Raises
    ------
    DefaultsFileError
        If the file cannot be read, is not a mapping, or fails validation.
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise DefaultsFileError(str(path), str(e)) from e

    try:
        if p.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DefaultsFileError(str(path), str(e)) from e

    if data is None:
        return base
    if not isinstance(data, dict):
        raise DefaultsFileError(str(path), "top level must be a mapping")

    merged = _deep_merge(base.model_dump(), data)
    # GWPbio and baseline tables replace rather than extend when given
    for key in ("gwp_bio", "baseline_grid_intensity"):
        if key in data:
            merged[key] = data[key]

    try:
        return EmissionDefaults.model_validate(merged)
    except ValidationError as e:
        raise DefaultsFileError(str(path), str(e)) from e
