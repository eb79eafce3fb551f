"""Grid carbon intensity: baselines and the policy decline path.

Values are grams of CO2e emitted per kilowatt-hour of electricity
(gCO2/kWh). When the dataset has no series for a country, a small table
of baselines stands in, with a global default for everything else.

Sources: Ember monthly release, national averages 2023-2024.
"""

from __future__ import annotations

from woodheat.data.loader import DatasetSnapshot
from woodheat.models.config_models import DEFAULTS, EmissionDefaults


def get_baseline_intensity(iso3: str | None, defaults: EmissionDefaults = DEFAULTS) -> float:
    """Get the baseline gCO2/kWh for a country.

    Parameters
    ----------
    iso3 : str | None
        ISO3 country code (case-insensitive).

    Returns
    -------
    float
        Baseline intensity, or the global default if the country is not
        in the baseline table.
    """
    return defaults.baseline_intensity(iso3)


def current_grid_intensity(
    snapshot: DatasetSnapshot,
    iso3: str | None,
    defaults: EmissionDefaults = DEFAULTS,
) -> tuple[float, str, str]:
    """Resolve the intensity to project from.

    Parameters
    ----------
    snapshot : DatasetSnapshot
        Loaded dataset (possibly empty after a failed load).
    iso3 : str | None
        Selected country.

    Returns
    -------
    tuple[float, str, str]
        ``(intensity, source label, last updated date)``. The source is
        ``"Ember monthly"`` for observed data, ``"baseline (error)"``
        after a failed load and ``"baseline"`` otherwise.
    """
    latest = snapshot.history.latest(iso3) if iso3 else None
    if latest is not None:
        return latest.value, "Ember monthly", latest.date
    source = "baseline (error)" if snapshot.error else "baseline"
    return get_baseline_intensity(iso3, defaults), source, ""


def grid_intensity_path(
    current_year: int,
    horizon_years: int,
    current_intensity: float,
    target_year: int,
    target_intensity: float,
) -> list[float]:
    """Linear decline of grid intensity towards a policy target.

    Parameters
    ----------
    current_year : int
        Calendar year of the first entry.
    horizon_years : int
        Number of yearly entries to produce.
    current_intensity : float
        Intensity this year, in gCO2/kWh.
    target_year : int
        Year from which the target applies.
    target_intensity : float
        Intensity at and after ``target_year``.

    Returns
    -------
    list[float]
        One value per year. Years at or past the target year are pinned
        at the target.
    """
    path: list[float] = []
    for i in range(max(horizon_years, 0)):
        year = current_year + i
        if year >= target_year:
            path.append(target_intensity)
        else:
            frac = (target_year - year) / (target_year - current_year)
            path.append(target_intensity + (current_intensity - target_intensity) * frac)
    return path
