"""Tests for comparison report output."""

import json
from io import StringIO

import pytest
import yaml

from woodheat.data.loader import build_snapshot
from woodheat.models.constants import HeatSource
from woodheat.report import ComparisonReport, OutputFormat
from woodheat.state import AppState


@pytest.fixture
def report(sample_csv):
    state = AppState()
    state.apply_snapshot(build_snapshot(sample_csv))
    state.select_heat_source(HeatSource.GAS)
    return ComparisonReport(
        state.country_summary(), state.comparison(current_year=2025), notes=["Check inputs."]
    )


class TestComparisonReport:
    """Tests for ComparisonReport."""

    def test_to_dict(self, report):
        data = report.to_dict()
        assert set(data) == {"metadata", "country", "comparison", "notes"}
        assert data["metadata"]["woodheat_version"]
        assert data["country"]["iso3"] == "DEU"
        assert data["comparison"]["comparator_label"] == "Gas boiler"
        assert data["comparison"]["effective_cop"] is None
        assert data["notes"] == ["Check inputs."]

    def test_no_notes_is_null(self, sample_csv):
        state = AppState()
        state.apply_snapshot(build_snapshot(sample_csv))
        data = ComparisonReport(state.country_summary(), state.comparison(2025)).to_dict()
        assert data["notes"] is None

    def test_emit_json(self, report):
        out = StringIO()
        report.emit(out, OutputFormat.JSON)
        data = json.loads(out.getvalue())
        assert len(data["comparison"]["horizons"]) == 5
        assert data["country"]["mix"][0]["category"] == "Wind"

    def test_emit_yaml(self, report):
        out = StringIO()
        report.emit(out, OutputFormat.YAML)
        data = yaml.safe_load(out.getvalue())
        assert list(data) == ["metadata", "country", "comparison", "notes"]
        assert data["comparison"]["heat_source"] == "GAS"

    def test_emit_to_path(self, report, tmp_path):
        path = tmp_path / "report.json"
        report.emit(str(path), OutputFormat.JSON)
        assert json.loads(path.read_text())["country"]["name"] == "Germany"

    def test_text(self, report):
        text = report.to_text()
        assert "WOOD STOVE VS. HEATING SYSTEM" in text
        assert "Germany (DEU)" in text
        assert "310 gCO2/kWh (Ember monthly, 2024-03-01)" in text
        assert "Comparator:   Gas boiler" in text
        assert "Generation mix" in text
        assert "1000 y" in text
        assert "Note: Check inputs." in text

    def test_text_without_mix_or_country(self):
        state = AppState()
        report = ComparisonReport(state.country_summary(), state.comparison(2025))
        text = report.to_text()
        assert "No country selected" in text
        assert "Generation mix" not in text
        assert "350 gCO2/kWh (baseline)" in text

    def test_unknown_format(self, report):
        with pytest.raises(ValueError, match="Unknown format"):
            report.emit(StringIO(), "xml")
