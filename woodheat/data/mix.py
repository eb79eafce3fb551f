"""Generation-mix shares and per-fuel emission rates.

Generation and power-sector emission rows are reduced in one pass to the
latest record per (country, category). Dates are zero-padded ISO strings,
so the greatest string is the most recent; on equal dates the later row
in input order replaces the earlier one.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from woodheat.data import fields
from woodheat.models.constants import (
    EMISSIONS_CATEGORY,
    FUEL_SUBCATEGORY,
    GENERATION_CATEGORY,
    Column,
    MixCategory,
    fuel_category,
)
from woodheat.models.heating_models import MixSlice
from woodheat.utils.logger import Logger

CountryMix = dict[MixCategory, float]
CountryMixIntensity = dict[MixCategory, float]

MINOR_SHARE_PCT = 2.0
MINOR_NOISE_PCT = 0.5

_log = Logger.lazy("data.mix")


@dataclass(frozen=True)
class _Dated:
    date: str
    value: float


_LatestBuckets = dict[str, dict[MixCategory, _Dated]]


@dataclass
class GenerationMix:
    """Latest generation shares and emission rates per country.

    Attributes
    ----------
    shares : dict[str, CountryMix]
        Percent of total generation per category.
    intensities : dict[str, CountryMixIntensity]
        gCO2/kWh per category, only where both volumes are known.
    """

    shares: dict[str, CountryMix] = field(default_factory=dict)
    intensities: dict[str, CountryMixIntensity] = field(default_factory=dict)


def _keep_latest(buckets: _LatestBuckets, iso3: str, category: MixCategory, entry: _Dated) -> None:
    per_country = buckets.setdefault(iso3, {})
    current = per_country.get(category)
    if current is None or entry.date >= current.date:
        per_country[category] = entry


def aggregate_generation_mix(rows: Iterable[Mapping[str, Any]]) -> GenerationMix:
    """Build shares and emission rates from fuel-breakdown rows.

    Parameters
    ----------
    rows : Iterable[Mapping[str, Any]]
        Parsed dataset records.

    Returns
    -------
    GenerationMix
        Countries whose latest total generation is not positive are left
        out entirely.
    """
    generation: _LatestBuckets = {}
    emissions: _LatestBuckets = {}

    for row in rows:
        if not row or row.get(Column.SUBCATEGORY) != FUEL_SUBCATEGORY:
            continue
        kind = row.get(Column.CATEGORY)
        if kind == GENERATION_CATEGORY:
            target = generation
        elif kind == EMISSIONS_CATEGORY:
            target = emissions
        else:
            continue

        iso3 = fields.country_code(row)
        if iso3 is None:
            continue
        value = fields.finite_value(row)
        if value is None:
            continue
        date = fields.day(row)
        if date is None:
            continue

        category = fuel_category(row.get(Column.VARIABLE))
        _keep_latest(target, iso3, category, _Dated(date=date, value=value))

    result = GenerationMix()
    for iso3, bucket in generation.items():
        total = sum(entry.value for entry in bucket.values())
        if total <= 0:
            _log.debug("Skipping %s mix: total generation %s", iso3, total)
            continue

        result.shares[iso3] = {
            category: entry.value / total * 100 for category, entry in bucket.items()
        }

        emission_bucket = emissions.get(iso3, {})
        rates: CountryMixIntensity = {}
        for category, entry in bucket.items():
            if entry.value <= 0:
                continue
            emitted = emission_bucket.get(category)
            if emitted is None:
                continue
            # Mt / TWh -> g / kWh
            rates[category] = emitted.value / entry.value * 1000
        result.intensities[iso3] = rates

    return result


def fold_mix_slices(
    shares: CountryMix | None,
    intensities: CountryMixIntensity | None = None,
) -> list[MixSlice]:
    """Build a display breakdown, folding minor categories into Other.

    Categories with a share below ``MINOR_SHARE_PCT`` are summed into one
    synthetic ``Other`` slice whose emission rate is their share-weighted
    average (unknown rates count as zero). The slice is only added when
    the folded total exceeds ``MINOR_NOISE_PCT``.

    Parameters
    ----------
    shares : CountryMix | None
        Percent shares for one country.
    intensities : CountryMixIntensity | None
        Emission rates for the same country.

    Returns
    -------
    list[MixSlice]
        Major slices in descending share order, then the folded slice.
    """
    if not shares:
        return []
    rates = intensities or {}

    entries = sorted(
        ((category, share) for category, share in shares.items() if share > 0),
        key=lambda item: item[1],
        reverse=True,
    )
    major = [(c, s) for c, s in entries if s >= MINOR_SHARE_PCT]
    minor = [(c, s) for c, s in entries if s < MINOR_SHARE_PCT]

    slices = [
        MixSlice(
            category=category,
            label=category.label,
            share=share,
            color=category.color,
            emission=rates.get(category),
        )
        for category, share in major
    ]

    minor_total = sum(share for _, share in minor)
    if minor_total > MINOR_NOISE_PCT:
        weighted = sum(rates.get(category, 0.0) * (share / minor_total) for category, share in minor)
        slices.append(
            MixSlice(
                category=MixCategory.OTHER,
                label=MixCategory.OTHER.label,
                share=minor_total,
                color=MixCategory.OTHER.color,
                emission=weighted,
            )
        )
    return slices
