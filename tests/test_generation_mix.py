"""Tests for generation-mix aggregation and slice folding."""

import pytest

from dataset_helpers import emissions, generation
from woodheat.data.mix import aggregate_generation_mix, fold_mix_slices
from woodheat.models.constants import MixCategory, fuel_category


class TestFuelCategory:
    """Tests for fuel name mapping."""

    def test_known_fuels(self):
        assert fuel_category("Coal") is MixCategory.COAL
        assert fuel_category("Other Renewables") is MixCategory.OTHER_RENEWABLES

    def test_aliases(self):
        """Finer fuels fold into their broader bucket."""
        assert fuel_category("Oil") is MixCategory.OTHER_FOSSIL
        assert fuel_category("Peat") is MixCategory.OTHER_FOSSIL
        assert fuel_category("Geothermal") is MixCategory.OTHER_RENEWABLES
        assert fuel_category("Waste") is MixCategory.OTHER_RENEWABLES

    def test_unknown_is_other(self):
        assert fuel_category("Tidal") is MixCategory.OTHER
        assert fuel_category(None) is MixCategory.OTHER


class TestAggregateGenerationMix:
    """Tests for latest shares and per-fuel emission rates."""

    def test_shares_and_rates(self):
        """Shares are percent of total; rates are Mt/TWh scaled to g/kWh."""
        rows = [
            generation("DEU", "Coal", 10),
            generation("DEU", "Wind", 20),
            generation("DEU", "Gas", 10),
            generation("DEU", "Solar", 10),
            emissions("DEU", "Coal", 10),
            emissions("DEU", "Gas", 4),
        ]
        mix = aggregate_generation_mix(rows)
        shares = mix.shares["DEU"]
        assert shares[MixCategory.COAL] == pytest.approx(20.0)
        assert shares[MixCategory.WIND] == pytest.approx(40.0)
        assert sum(shares.values()) == pytest.approx(100.0)

        rates = mix.intensities["DEU"]
        assert rates[MixCategory.COAL] == pytest.approx(1000.0)
        assert rates[MixCategory.GAS] == pytest.approx(400.0)
        assert MixCategory.SOLAR not in rates

    def test_zero_emissions_kept(self):
        """A reported zero is a rate; a missing entry is not."""
        rows = [generation("DEU", "Wind", 5), emissions("DEU", "Wind", 0)]
        mix = aggregate_generation_mix(rows)
        assert mix.intensities["DEU"] == {MixCategory.WIND: 0.0}

    def test_latest_date_wins(self):
        """Older rows are replaced by newer ones per category."""
        rows = [
            generation("DEU", "Coal", 30, date="2024-05-01"),
            generation("DEU", "Coal", 10, date="2024-06-01"),
            generation("DEU", "Coal", 99, date="2024-04-01"),
            generation("DEU", "Wind", 10, date="2024-06-01"),
        ]
        mix = aggregate_generation_mix(rows)
        assert mix.shares["DEU"][MixCategory.COAL] == pytest.approx(50.0)

    def test_equal_dates_last_seen_wins(self):
        """On a tie the later input row replaces the earlier one."""
        rows = [
            generation("DEU", "Coal", 10),
            generation("DEU", "Coal", 30),
            generation("DEU", "Wind", 10),
        ]
        mix = aggregate_generation_mix(rows)
        assert mix.shares["DEU"][MixCategory.COAL] == pytest.approx(75.0)

    def test_aliased_fuels_share_a_bucket(self):
        """Fuels mapped to one category replace each other by date."""
        rows = [
            generation("DEU", "Oil", 5, date="2024-05-01"),
            generation("DEU", "Peat", 15, date="2024-06-01"),
            generation("DEU", "Wind", 5),
        ]
        mix = aggregate_generation_mix(rows)
        assert mix.shares["DEU"][MixCategory.OTHER_FOSSIL] == pytest.approx(75.0)

    def test_zero_total_country_dropped(self):
        """Countries with no positive generation are absent."""
        rows = [generation("AAA", "Coal", 0), generation("BBB", "Wind", 1)]
        mix = aggregate_generation_mix(rows)
        assert "AAA" not in mix.shares
        assert "AAA" not in mix.intensities
        assert "BBB" in mix.shares

    def test_non_fuel_rows_ignored(self):
        """Only Subcategory Fuel rows in the two categories count."""
        rows = [
            generation("DEU", "Wind", 10),
            {**generation("DEU", "Coal", 10), "Subcategory": "Aggregate fuel"},
            {**generation("DEU", "Gas", 10), "Category": "Capacity"},
        ]
        mix = aggregate_generation_mix(rows)
        assert mix.shares["DEU"] == {MixCategory.WIND: pytest.approx(100.0)}

    def test_invalid_values_skipped(self):
        """Rows with non-numeric values or missing dates are dropped."""
        rows = [
            generation("DEU", "Wind", 10),
            generation("DEU", "Coal", "lots"),
            generation("DEU", "Gas", 5, date=None),
        ]
        mix = aggregate_generation_mix(rows)
        assert list(mix.shares["DEU"]) == [MixCategory.WIND]

    def test_rate_skipped_for_zero_generation(self):
        """No rate is derived when a category generated nothing."""
        rows = [
            generation("DEU", "Coal", 0),
            generation("DEU", "Wind", 10),
            emissions("DEU", "Coal", 1),
        ]
        mix = aggregate_generation_mix(rows)
        assert MixCategory.COAL not in mix.intensities["DEU"]


class TestFoldMixSlices:
    """Tests for display slices."""

    def test_empty(self):
        assert fold_mix_slices(None) == []
        assert fold_mix_slices({}) == []

    def test_major_slices_sorted_descending(self):
        shares = {MixCategory.COAL: 20.0, MixCategory.WIND: 50.0, MixCategory.GAS: 30.0}
        slices = fold_mix_slices(shares, {MixCategory.COAL: 1000.0})
        assert [s.category for s in slices] == [
            MixCategory.WIND,
            MixCategory.GAS,
            MixCategory.COAL,
        ]
        assert slices[0].label == "Wind"
        assert slices[0].color == MixCategory.WIND.color
        assert slices[0].emission is None
        assert slices[2].emission == 1000.0

    def test_minor_slices_folded_into_other(self):
        """Shares under 2% merge with a share-weighted rate."""
        shares = {
            MixCategory.WIND: 97.0,
            MixCategory.COAL: 1.5,
            MixCategory.SOLAR: 1.5,
        }
        rates = {MixCategory.COAL: 900.0}
        slices = fold_mix_slices(shares, rates)
        assert [s.category for s in slices] == [MixCategory.WIND, MixCategory.OTHER]
        other = slices[-1]
        assert other.share == pytest.approx(3.0)
        assert other.emission == pytest.approx(450.0)
        assert other.label == "Other"

    def test_tiny_remainder_dropped(self):
        """Minor totals at or under 0.5% are left out."""
        shares = {MixCategory.WIND: 99.6, MixCategory.COAL: 0.4}
        slices = fold_mix_slices(shares)
        assert [s.category for s in slices] == [MixCategory.WIND]

    def test_zero_shares_excluded(self):
        shares = {MixCategory.WIND: 100.0, MixCategory.COAL: 0.0}
        assert len(fold_mix_slices(shares)) == 1

    def test_to_dict(self):
        slices = fold_mix_slices({MixCategory.WIND: 100.0}, {MixCategory.WIND: 0.0})
        data = slices[0].to_dict()
        assert data["share_pct"] == 100.0
        assert data["emission_g_per_kwh"] == 0.0
