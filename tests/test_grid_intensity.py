"""Tests for grid intensity resolution and the policy path."""

import pytest

from dataset_helpers import row
from woodheat.data.intensity import build_intensity_history
from woodheat.data.loader import DatasetSnapshot
from woodheat.emissions.grid_intensity import (
    current_grid_intensity,
    get_baseline_intensity,
    grid_intensity_path,
)


class TestBaselineIntensity:
    """Tests for baseline lookup."""

    def test_known_country(self):
        assert get_baseline_intensity("POL") == 680

    def test_case_insensitive(self):
        assert get_baseline_intensity("fra") == 60

    def test_unknown_falls_back_to_default(self):
        assert get_baseline_intensity("XXX") == 350
        assert get_baseline_intensity(None) == 350


class TestCurrentGridIntensity:
    """Tests for picking observed data or a baseline."""

    def test_observed(self):
        history = build_intensity_history(
            [row(date="2024-01-01", value=345), row(date="2024-03-01", value=310)]
        )
        snapshot = DatasetSnapshot(history=history)
        assert current_grid_intensity(snapshot, "DEU") == (310.0, "Ember monthly", "2024-03-01")

    def test_baseline_without_series(self):
        snapshot = DatasetSnapshot.empty()
        assert current_grid_intensity(snapshot, "DEU") == (320.0, "baseline", "")

    def test_baseline_after_error(self):
        snapshot = DatasetSnapshot.empty(error="Failed")
        value, source, updated = current_grid_intensity(snapshot, "USA")
        assert value == 360.0
        assert source == "baseline (error)"
        assert updated == ""

    def test_no_country(self):
        value, source, _ = current_grid_intensity(DatasetSnapshot.empty(), None)
        assert value == 350.0
        assert source == "baseline"


class TestGridIntensityPath:
    """Tests for the linear decline towards the target."""

    def test_length_matches_horizon(self):
        assert len(grid_intensity_path(2025, 30, 320, 2050, 50)) == 30
        assert grid_intensity_path(2025, 0, 320, 2050, 50) == []

    def test_starts_at_current(self):
        path = grid_intensity_path(2025, 10, 320, 2050, 50)
        assert path[0] == pytest.approx(320)

    def test_reaches_target(self):
        path = grid_intensity_path(2025, 30, 320, 2050, 50)
        assert path[24] == pytest.approx(50 + 270 / 25)
        assert path[25:] == [50] * 5

    def test_monotone_when_above_target(self):
        path = grid_intensity_path(2025, 40, 320, 2050, 50)
        assert all(a >= b for a, b in zip(path, path[1:], strict=False))

    def test_rises_when_below_target(self):
        """A grid cleaner than the target converges upwards."""
        path = grid_intensity_path(2025, 30, 20, 2050, 50)
        assert all(a <= b for a, b in zip(path, path[1:], strict=False))
        assert path[-1] == 50

    def test_past_target_year(self):
        """Starting at or after the target year pins every entry."""
        assert grid_intensity_path(2050, 3, 320, 2050, 50) == [50, 50, 50]
        assert grid_intensity_path(2060, 2, 320, 2050, 50) == [50, 50]
