"""Dataset inspection commands: countries and generation mix."""

from __future__ import annotations

import json
import sys

from woodheat.data.loader import DatasetSnapshot, load_dataset
from woodheat.data.mix import fold_mix_slices
from woodheat.utils.numbers import PLACEHOLDER, format_number

_SECTION_SEP = "=" * 40
_HEADING_UNDERLINE = "---"


def _load_or_exit(dataset: str) -> DatasetSnapshot:
    snapshot = load_dataset(dataset)
    if snapshot.error:
        print(f"Error: {snapshot.error}", file=sys.stderr)
        sys.exit(1)
    return snapshot


def run_countries(dataset: str, output_json: bool) -> None:
    """List countries with intensity data and their latest value."""
    snapshot = _load_or_exit(dataset)
    history = snapshot.history

    if output_json:
        payload = []
        for option in snapshot.countries:
            latest = history.latest(option.iso3)
            payload.append(
                {
                    "iso3": option.iso3,
                    "name": option.name,
                    "latest": latest.to_dict() if latest else None,
                }
            )
        print(json.dumps(payload, indent=2))
        return

    if not snapshot.countries:
        print("No intensity data in dataset.")
        return

    print(_SECTION_SEP)
    print(f"  {len(snapshot.countries)} countries")
    print(_SECTION_SEP)
    for option in snapshot.countries:
        latest = history.latest(option.iso3)
        value = format_number(latest.value) if latest else PLACEHOLDER
        when = latest.date if latest else ""
        print(f"  {option.iso3}  {option.name:<28} {value:>6} gCO2/kWh  {when}")


def run_mix(dataset: str, country: str, output_json: bool) -> None:
    """Show the latest generation mix of one country."""
    snapshot = _load_or_exit(dataset)
    iso3 = country.strip().upper()
    shares = snapshot.mix.shares.get(iso3)
    rates = snapshot.mix.intensities.get(iso3, {})

    if output_json:
        print(
            json.dumps(
                {
                    "iso3": iso3,
                    "shares_pct": {c.value: s for c, s in (shares or {}).items()},
                    "intensity_g_per_kwh": {c.value: r for c, r in rates.items()},
                    "slices": [s.to_dict() for s in fold_mix_slices(shares, rates)],
                },
                indent=2,
            )
        )
        return

    if not shares:
        print(f"No generation mix for {iso3}.")
        return

    print(_SECTION_SEP)
    print(f"  {snapshot.name_of(iso3)} ({iso3}) generation mix")
    print(_SECTION_SEP)
    print("\n  [Share / emission rate]")
    print(f"  {_HEADING_UNDERLINE}")
    for part in fold_mix_slices(shares, rates):
        print(
            f"  {part.label:<18} {format_number(part.share, 1):>5}%"
            f"  {format_number(part.emission):>5} g/kWh"
        )
