"""Comparison report emission.

Supports multiple output formats: JSON, YAML, and human-readable text.

Usage:
    from woodheat.report import ComparisonReport, OutputFormat

    report = ComparisonReport(state.country_summary(), state.comparison())
    report.emit("comparison.json", OutputFormat.JSON)
    report.emit(sys.stdout, OutputFormat.TEXT)
"""

import json
from datetime import datetime, timezone
from enum import Enum
from io import StringIO
from pathlib import Path
from typing import Any, TextIO

import yaml

from woodheat.models.heating_models import ComparisonResult, CountrySummary
from woodheat.utils.numbers import format_number


class OutputFormat(Enum):
    """Supported report formats."""

    JSON = "json"
    YAML = "yaml"
    TEXT = "text"


class ComparisonReport:
    """A country context plus one wood vs. heating comparison.

    Example:
        >>> report = ComparisonReport(summary, result)
        >>> report.emit(sys.stdout, OutputFormat.TEXT)
    """

    def __init__(
        self,
        country: CountrySummary,
        result: ComparisonResult,
        notes: list[str] | None = None,
    ) -> None:
        self.country = country
        self.result = result
        self.notes = list(notes or [])
        self._generated_at = datetime.now(timezone.utc).isoformat()

    def _get_version(self) -> str:
        try:
            from woodheat import __version__

            return str(__version__)
        except (ImportError, AttributeError):
            return "unknown"

    def to_dict(self) -> dict[str, Any]:
        """Convert the report to a dictionary for serialization."""
        return {
            "metadata": {
                "generated_at": self._generated_at,
                "woodheat_version": self._get_version(),
            },
            "country": self.country.to_dict(),
            "comparison": self.result.to_dict(),
            "notes": self.notes or None,
        }

    def emit(
        self,
        output: str | Path | TextIO,
        format: OutputFormat = OutputFormat.TEXT,
        indent: int = 2,
    ) -> None:
        """Write the report to a file path or stream.

        Args:
            output: File path or file-like object (e.g., sys.stdout).
            format: Output format (JSON, YAML, TEXT).
            indent: Indentation level for JSON/YAML.
        """
        if format == OutputFormat.JSON:
            content = json.dumps(self.to_dict(), indent=indent, default=str)
        elif format == OutputFormat.YAML:
            content = yaml.safe_dump(
                self.to_dict(), indent=indent, default_flow_style=False, sort_keys=False
            )
        elif format == OutputFormat.TEXT:
            content = self.to_text()
        else:
            raise ValueError(f"Unknown format: {format}")

        if isinstance(output, str | Path):
            Path(output).write_text(content, encoding="utf-8")
        else:
            output.write(content)

    def to_text(self) -> str:
        """Render the report as aligned plain text."""
        out = StringIO()
        country = self.country
        result = self.result
        inputs = result.inputs

        out.write("=" * 60 + "\n")
        out.write("  WOOD STOVE VS. HEATING SYSTEM\n")
        out.write("=" * 60 + "\n\n")

        name = f"{country.name} ({country.iso3})" if country.iso3 else "No country selected"
        out.write(f"Country:      {name}\n")
        grid = f"{format_number(country.grid_intensity)} gCO2/kWh ({country.grid_source}"
        if country.last_updated:
            grid += f", {country.last_updated}"
        out.write(f"Grid:         {grid})\n")
        out.write(f"Comparator:   {result.comparator_label}\n")
        out.write(f"Annual heat:  {format_number(inputs.annual_heat_mwh, 1)} MWh\n")
        out.write(f"GWPbio scale: {format_number(inputs.gwp_bio_scale_pct)}%\n\n")

        if country.mix:
            out.write("Generation mix\n")
            out.write("-" * 40 + "\n")
            for part in country.mix:
                out.write(
                    f"  {part.label:<18}{format_number(part.share, 1):>6}%"
                    f"  {format_number(part.emission):>6} g/kWh\n"
                )
            out.write("\n")

        out.write("Cumulative emissions (t CO2e)\n")
        out.write("-" * 60 + "\n")
        out.write(f"  {'Horizon':>8}  {'Wood':>10}  {'Heating':>10}  {'Diff':>10}  {'Diff %':>7}\n")
        for row in result.rows:
            out.write(
                f"  {str(row.horizon) + ' y':>8}  {format_number(row.wood_t, 2):>10}"
                f"  {format_number(row.comparator_t, 2):>10}  {format_number(row.diff_t, 2):>10}"
                f"  {format_number(row.diff_pct, 1):>7}\n"
            )
        out.write("\n")

        snap = result.snapshot
        out.write("Next 10 years, average per kWh of heat\n")
        out.write("-" * 40 + "\n")
        out.write(f"  Wood:      {format_number(snap.wood_per_kwh, 1)} g/kWh\n")
        out.write(f"  Heating:   {format_number(snap.heating_per_kwh, 1)} g/kWh\n")
        out.write(f"  Diff:      {format_number(snap.diff_per_kwh, 1)} g/kWh\n")

        for note in self.notes:
            out.write(f"\nNote: {note}\n")

        out.write("=" * 60 + "\n")
        return out.getvalue()
