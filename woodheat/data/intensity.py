"""Per-country grid carbon-intensity history."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from woodheat.data import fields
from woodheat.models.config_models import DEFAULTS
from woodheat.models.constants import INTENSITY_VARIABLE, Column
from woodheat.models.heating_models import CountryOption, IntensityPoint
from woodheat.utils.logger import Logger

HISTORY_WINDOW = 12

_log = Logger.lazy("data.intensity")


@dataclass
class IntensityHistory:
    """Monthly intensity series and naming for every country in the data.

    Attributes
    ----------
    series : dict[str, list[IntensityPoint]]
        Per ISO3 code, at most ``HISTORY_WINDOW`` points sorted by date.
    names : dict[str, str]
        Display name per ISO3 code.
    countries : list[CountryOption]
        Countries with at least one point, sorted by display name.
    """

    series: dict[str, list[IntensityPoint]] = field(default_factory=dict)
    names: dict[str, str] = field(default_factory=dict)
    countries: list[CountryOption] = field(default_factory=list)

    def latest(self, iso3: str) -> IntensityPoint | None:
        """Most recent point for a country, if any."""
        points = self.series.get(iso3)
        return points[-1] if points else None

    def recent(self, iso3: str, count: int = 3) -> list[IntensityPoint]:
        """The ``count`` most recent points, newest first."""
        return list(reversed(self.series.get(iso3, [])[-count:]))


def build_intensity_history(
    rows: Iterable[Mapping[str, Any]],
    valid_units: frozenset[str] = DEFAULTS.valid_units,
) -> IntensityHistory:
    """Collect CO2-intensity rows into per-country series.

    Parameters
    ----------
    rows : Iterable[Mapping[str, Any]]
        Parsed dataset records.
    valid_units : frozenset[str]
        Accepted units, already lower-cased and without whitespace.

    Returns
    -------
    IntensityHistory
        Series sorted ascending by date and truncated to the most recent
        ``HISTORY_WINDOW`` points.
    """
    history = IntensityHistory()
    first_names: dict[str, str] = {}
    accepted = 0

    for row in rows:
        if not row or row.get(Column.VARIABLE) != INTENSITY_VARIABLE:
            continue

        iso3 = fields.country_code(row)
        if iso3 is None:
            continue
        name = fields.area_name(row, fallback=iso3)

        if fields.normalized_unit(row) not in valid_units:
            _log.debug("Skipping %s intensity row with unit %r", iso3, row.get(Column.UNIT))
            continue

        value = fields.finite_value(row)
        if value is None:
            continue

        date = fields.day(row)
        if date is None:
            continue

        history.series.setdefault(iso3, []).append(IntensityPoint(date=date, value=value))
        first_names.setdefault(iso3, name)
        history.names[iso3] = name
        accepted += 1

    for iso3, points in history.series.items():
        points.sort(key=lambda p: p.date)
        if len(points) > HISTORY_WINDOW:
            history.series[iso3] = points[-HISTORY_WINDOW:]

    history.countries = sorted(
        (CountryOption(iso3=iso3, name=name) for iso3, name in first_names.items()),
        key=lambda option: option.name.casefold(),
    )
    _log.debug(
        "Accepted %d intensity rows for %d countries", accepted, len(history.countries)
    )
    return history
