"""Compare command implementation."""

from __future__ import annotations

import asyncio
import sys

from woodheat.data.loader import DatasetSnapshot, load_dataset
from woodheat.enrichment.coordinator import EnrichmentCoordinator
from woodheat.enrichment.open_meteo import OpenMeteoClient
from woodheat.errors import DefaultsFileError
from woodheat.models.config_models import DEFAULTS, EmissionDefaults, load_defaults
from woodheat.models.constants import HeatSource
from woodheat.report import ComparisonReport, OutputFormat
from woodheat.state import PREFERRED_COUNTRY, AppState
from woodheat.utils.logger import Logger


def _resolve_defaults(defaults_file: str | None) -> EmissionDefaults:
    if not defaults_file:
        return DEFAULTS
    try:
        return load_defaults(defaults_file)
    except DefaultsFileError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


async def _fetch_temperature(state: AppState) -> None:
    client = OpenMeteoClient()
    coordinator = EnrichmentCoordinator(state, client)
    try:
        coordinator.select(state.country)
        await coordinator.wait()
    finally:
        await coordinator.aclose()
        client.close()


def run_compare(
    dataset: str | None,
    country: str | None,
    heat: str,
    annual_mwh: str,
    gwp_scale: str,
    cop_override: str,
    district_cop: str | None,
    temperature: str | None,
    fetch_weather: bool,
    defaults_file: str | None,
    output_format: str,
    output: str | None,
    year: int | None,
) -> None:
    """Build the scenario from CLI options and emit the comparison.

    Parameters
    ----------
    dataset : str | None
        Long-format CSV; without it baseline intensities are used.
    country : str | None
        ISO3 code; defaults to DEU or the first country in the dataset.
    heat : str
        Heat source identifier.
    annual_mwh, gwp_scale, cop_override, district_cop, temperature : str
        Raw user inputs; unparseable values fall back to defaults.
    fetch_weather : bool
        Look up the current temperature when none was given.
    defaults_file : str | None
        YAML/JSON emission-defaults override.
    output_format : str
        ``text``, ``json`` or ``yaml``.
    output : str | None
        File to write; stdout when omitted.
    year : int | None
        First projection year; defaults to the current year.
    """
    log = Logger.get("commands.compare")
    defaults = _resolve_defaults(defaults_file)

    state = AppState(defaults=defaults)
    notes: list[str] = []

    snapshot = load_dataset(dataset, defaults) if dataset else DatasetSnapshot.empty()
    state.apply_snapshot(snapshot)
    if snapshot.error:
        notes.append(snapshot.error)

    if country:
        state.select_country(country)
        if snapshot.countries and not snapshot.has_country(state.country):
            notes.append(f"No intensity data for {state.country}; using baseline intensity.")
    elif not state.country:
        state.select_country(PREFERRED_COUNTRY)

    state.select_heat_source(HeatSource(heat.upper()))
    state.set_annual_heat(annual_mwh)
    state.set_gwp_bio_scale(gwp_scale)
    state.cop_override = cop_override
    if district_cop is not None:
        state.district_cop = district_cop

    if temperature is not None:
        state.set_temperature(temperature)
    elif fetch_weather and state.heat_source == HeatSource.ASHP and state.country:
        log.info("Fetching current temperature for %s", state.country)
        asyncio.run(_fetch_temperature(state))
        if state.temperature_c is None:
            notes.append(
                f"Temperature unavailable; assuming {defaults.default_ambient_temp_c:g} °C."
            )

    report = ComparisonReport(state.country_summary(), state.comparison(year), notes=notes)
    report.emit(output if output else sys.stdout, OutputFormat(output_format.lower()))
    if output:
        print(f"Wrote {output_format} report to {output}")
