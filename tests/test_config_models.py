"""Tests for emission defaults and override files."""

import json

import pytest
from pydantic import ValidationError

from woodheat.errors import DefaultsFileError
from woodheat.models.config_models import DEFAULTS, EmissionDefaults, load_defaults


class TestEmissionDefaults:
    """Tests for the built-in constants."""

    def test_values(self):
        assert DEFAULTS.wood.ef_co2_fuel_g_per_kwh == 403
        assert DEFAULTS.gas.boiler_eff == 0.92
        assert DEFAULTS.oil.ef_co2_fuel_g_per_kwh == 267
        assert DEFAULTS.policy.target_year == 2050
        assert DEFAULTS.horizons == (1, 10, 30, 100, 1000)
        assert DEFAULTS.gwp_bio[1000] == 0.25

    def test_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULTS.wood.stove_eff = 0.5

    def test_unknown_keys_rejected(self):
        with pytest.raises(ValidationError):
            EmissionDefaults.model_validate({"wood": {"colour": "brown"}})

    def test_invalid_efficiency_rejected(self):
        with pytest.raises(ValidationError):
            EmissionDefaults.model_validate({"wood": {"stove_eff": 0}})

    def test_baseline_intensity(self):
        assert DEFAULTS.baseline_intensity("deu") == 320
        assert DEFAULTS.baseline_intensity("XXX") == 350
        assert DEFAULTS.baseline_intensity(None) == 350
        assert DEFAULTS.baseline_intensity("") == 350


class TestLoadDefaults:
    """Tests for YAML/JSON override files."""

    def test_yaml_merges_sections(self, tmp_path):
        path = tmp_path / "defaults.yaml"
        path.write_text("wood:\n  stove_eff: 0.8\npolicy:\n  target_year: 2045\n")
        defaults = load_defaults(path)
        assert defaults.wood.stove_eff == 0.8
        assert defaults.wood.ef_co2_fuel_g_per_kwh == 403
        assert defaults.policy.target_year == 2045
        assert defaults.policy.target_grid_intensity_g_per_kwh == 50

    def test_json(self, tmp_path):
        path = tmp_path / "defaults.json"
        path.write_text(json.dumps({"gwp_bio": {"1": 1.0, "100": 0.4}, "gwp_bio_fallback": 0.3}))
        defaults = load_defaults(path)
        assert defaults.gwp_bio == {1: 1.0, 100: 0.4}
        assert defaults.gwp_bio_fallback == 0.3

    def test_baseline_table_replaced(self, tmp_path):
        path = tmp_path / "defaults.yml"
        path.write_text("baseline_grid_intensity:\n  SWE: 40\n")
        defaults = load_defaults(path)
        assert defaults.baseline_intensity("SWE") == 40
        assert defaults.baseline_intensity("DEU") == 350

    def test_empty_file_keeps_base(self, tmp_path):
        path = tmp_path / "defaults.yaml"
        path.write_text("")
        assert load_defaults(path) is DEFAULTS

    def test_missing_file(self, tmp_path):
        with pytest.raises(DefaultsFileError) as excinfo:
            load_defaults(tmp_path / "missing.yaml")
        assert "missing.yaml" in str(excinfo.value)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "defaults.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(DefaultsFileError, match="mapping"):
            load_defaults(path)

    def test_malformed(self, tmp_path):
        path = tmp_path / "defaults.json"
        path.write_text("{not json")
        with pytest.raises(DefaultsFileError):
            load_defaults(path)

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "defaults.yaml"
        path.write_text("gas:\n  boiler_eff: -1\n")
        with pytest.raises(DefaultsFileError):
            load_defaults(path)
