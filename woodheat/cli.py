#!/usr/bin/env python3
"""woodheat CLI - wood stove vs. heating system emissions."""

import click

from woodheat.models.constants import HeatSource
from woodheat.utils.logger import Logger

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.group()
@click.option(
    "--log-level",
    envvar="WOODHEAT_LOG_LEVEL",
    default="WARNING",
    show_default=True,
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    help="Logging level (also read from WOODHEAT_LOG_LEVEL)",
)
def woodheat(log_level):
    """Compare wood stove emissions with other ways of heating a home."""
    # Handler must bind to the stderr of this invocation
    Logger.configure(level=log_level, output="stderr", timestamps=False)


@woodheat.command()
@click.argument("dataset", type=click.Path(dir_okay=False))
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def countries(dataset, output_json):
    """List countries with grid intensity data in DATASET."""
    from woodheat.commands.dataset_cmd import run_countries

    run_countries(dataset, output_json)


@woodheat.command()
@click.argument("dataset", type=click.Path(dir_okay=False))
@click.option("--country", "-c", required=True, help="ISO3 country code (e.g. DEU)")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def mix(dataset, country, output_json):
    """Show the latest generation mix of a country in DATASET."""
    from woodheat.commands.dataset_cmd import run_mix

    run_mix(dataset, country, output_json)


@woodheat.command()
@click.argument("dataset", type=click.Path(dir_okay=False), required=False)
@click.option("--country", "-c", default=None, help="ISO3 country code (default: DEU)")
@click.option(
    "--heat",
    type=click.Choice([s.value for s in HeatSource], case_sensitive=False),
    default=HeatSource.ASHP.value,
    show_default=True,
    help="Heat source compared against wood",
)
@click.option("--annual-mwh", default="10", show_default=True, help="Annual heat demand in MWh")
@click.option(
    "--gwp-scale",
    default="100",
    show_default=True,
    help="GWPbio scale in percent (25-150)",
)
@click.option("--cop-override", default="", help="Manual COP for heat pumps")
@click.option("--district-cop", default=None, help="COP for electric district heating")
@click.option("--temperature", default=None, help="Ambient temperature in °C")
@click.option(
    "--fetch-weather",
    is_flag=True,
    help="Look up the current temperature (air-source heat pumps only)",
)
@click.option(
    "--defaults",
    "defaults_file",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML or JSON file overriding emission defaults",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json", "yaml"], case_sensitive=False),
    default="text",
    show_default=True,
    help="Report format",
)
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Write report to file")
@click.option("--year", type=int, default=None, help="First projection year (default: this year)")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def compare(
    dataset,
    country,
    heat,
    annual_mwh,
    gwp_scale,
    cop_override,
    district_cop,
    temperature,
    fetch_weather,
    defaults_file,
    output_format,
    output,
    year,
    verbose,
):
    r"""Compare wood with a heat source over 1 to 1000 years.

    DATASET is the long-format monthly electricity CSV. Without it, or when
    it cannot be read, baseline grid intensities are used.

    \b
    Examples:
      woodheat compare data.csv -c DEU --heat ASHP --fetch-weather
      woodheat compare data.csv -c FRA --heat GAS --format json
      woodheat compare -c POL --heat RESISTIVE --annual-mwh 15
    """
    from woodheat.commands.compare_cmd import run_compare

    if verbose:
        Logger.set_level("DEBUG")

    run_compare(
        dataset=dataset,
        country=country,
        heat=heat,
        annual_mwh=annual_mwh,
        gwp_scale=gwp_scale,
        cop_override=cop_override,
        district_cop=district_cop,
        temperature=temperature,
        fetch_weather=fetch_weather,
        defaults_file=defaults_file,
        output_format=output_format,
        output=output,
        year=year,
    )


@woodheat.command()
@click.option("--verbose", "-v", is_flag=True, help="Show detailed version information")
def version(verbose):
    """Display woodheat version information."""
    from woodheat.commands.version_cmd import run_version

    run_version(verbose=verbose)


if __name__ == "__main__":
    woodheat()
