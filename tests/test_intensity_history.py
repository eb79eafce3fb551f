"""Tests for per-country intensity history."""

from dataset_helpers import row
from woodheat.data.intensity import HISTORY_WINDOW, build_intensity_history
from woodheat.models.heating_models import CountryOption, IntensityPoint


class TestBuildIntensityHistory:
    """Tests for collecting CO2-intensity rows."""

    def test_series_sorted_by_date(self):
        """Points come out oldest first regardless of input order."""
        rows = [
            row(date="2024-03-01", value=310),
            row(date="2024-01-01", value=345),
            row(date="2024-02-01", value=330),
        ]
        history = build_intensity_history(rows)
        assert [p.date for p in history.series["DEU"]] == [
            "2024-01-01",
            "2024-02-01",
            "2024-03-01",
        ]
        assert history.latest("DEU") == IntensityPoint(date="2024-03-01", value=310.0)

    def test_window_keeps_most_recent(self):
        """Only the last twelve points survive."""
        rows = [row(date=f"2023-{m:02d}-01", value=m) for m in range(1, 13)]
        rows += [row(date=f"2024-{m:02d}-01", value=100 + m) for m in range(1, 4)]
        history = build_intensity_history(rows)
        points = history.series["DEU"]
        assert len(points) == HISTORY_WINDOW
        assert points[0].date == "2023-04-01"
        assert points[-1].date == "2024-03-01"

    def test_recent_newest_first(self):
        """recent() returns up to three points, newest first."""
        rows = [row(date=f"2024-0{m}-01", value=m) for m in range(1, 6)]
        history = build_intensity_history(rows)
        assert [p.value for p in history.recent("DEU")] == [5.0, 4.0, 3.0]
        assert history.recent("XXX") == []
        assert history.latest("XXX") is None

    def test_other_variables_ignored(self):
        """Only the CO2 intensity variable contributes."""
        rows = [
            row(variable="Coal", category="Electricity generation", unit="TWh"),
            row(iso3="FRA", area="France", value=55),
        ]
        history = build_intensity_history(rows)
        assert list(history.series) == ["FRA"]

    def test_unit_normalized(self):
        """Units match case-insensitively and ignore whitespace."""
        rows = [
            row(iso3="AAA", area="A", unit="gCO2 / kWh"),
            row(iso3="BBB", area="B", unit="GCO2EQ/KWH"),
            row(iso3="CCC", area="C", unit="gCO2/kWh_e"),
            row(iso3="DDD", area="D", unit="kg/MWh"),
        ]
        history = build_intensity_history(rows)
        assert sorted(history.series) == ["AAA", "BBB", "CCC"]

    def test_invalid_rows_skipped(self):
        """Rows without code, value or date are dropped."""
        rows = [
            row(iso3=None),
            row(iso3="   "),
            row(value=None),
            row(value="n/a"),
            row(value=float("nan")),
            row(date=None),
            {},
        ]
        history = build_intensity_history(rows)
        assert history.series == {}
        assert history.countries == []

    def test_code_trimmed_and_upper_cased(self):
        """Country codes are normalized."""
        history = build_intensity_history([row(iso3=" deu ")])
        assert "DEU" in history.series

    def test_date_truncated_to_day(self):
        """Timestamps are cut to YYYY-MM-DD."""
        history = build_intensity_history([row(date="2024-05-01T00:00:00")])
        assert history.latest("DEU").date == "2024-05-01"

    def test_blank_area_falls_back_to_code(self):
        """A country without a name is listed under its code."""
        history = build_intensity_history([row(area="  ")])
        assert history.names["DEU"] == "DEU"
        assert history.countries == [CountryOption(iso3="DEU", name="DEU")]

    def test_country_list_sorted_by_name(self):
        """Countries are sorted case-insensitively by display name."""
        rows = [
            row(iso3="POL", area="poland"),
            row(iso3="DEU", area="Germany"),
            row(iso3="FRA", area="France"),
        ]
        history = build_intensity_history(rows)
        assert [c.iso3 for c in history.countries] == ["FRA", "DEU", "POL"]

    def test_names_keep_last_seen(self):
        """The display map follows the latest name, the list the first."""
        rows = [
            row(area="Germany", date="2024-01-01"),
            row(area="Federal Republic of Germany", date="2024-02-01"),
        ]
        history = build_intensity_history(rows)
        assert history.names["DEU"] == "Federal Republic of Germany"
        assert history.countries[0].name == "Germany"

    def test_custom_units(self):
        """Accepted units can be narrowed."""
        rows = [row(unit="gCO2/kWh"), row(iso3="FRA", area="France", unit="gCO2eq/kWh")]
        history = build_intensity_history(rows, valid_units=frozenset({"gco2eq/kwh"}))
        assert list(history.series) == ["FRA"]
