"""Shared fixtures: a small long-format dataset."""

import pytest

from dataset_helpers import csv_text


@pytest.fixture
def sample_csv():
    """Two countries with intensity history and a generation mix for one."""
    return csv_text(
        "Germany,DEU,2024-02-01,Power sector emissions,CO2 intensity,CO2 intensity,gCO2/kWh,330",
        "Germany,DEU,2024-01-01,Power sector emissions,CO2 intensity,CO2 intensity,gCO2/kWh,345",
        "Germany,DEU,2024-03-01,Power sector emissions,CO2 intensity,CO2 intensity,gCO2/kWh,310",
        "France,FRA,2024-03-01,Power sector emissions,CO2 intensity,CO2 intensity,gCO2/kWh,55",
        "Germany,DEU,2024-03-01,Electricity generation,Fuel,Coal,TWh,10",
        "Germany,DEU,2024-03-01,Electricity generation,Fuel,Wind,TWh,20",
        "Germany,DEU,2024-03-01,Electricity generation,Fuel,Gas,TWh,10",
        "Germany,DEU,2024-03-01,Electricity generation,Fuel,Solar,TWh,10",
        "Germany,DEU,2024-03-01,Power sector emissions,Fuel,Coal,mtCO2,10",
        "Germany,DEU,2024-03-01,Power sector emissions,Fuel,Gas,mtCO2,4",
        "Germany,DEU,2024-03-01,Power sector emissions,Fuel,Wind,mtCO2,0",
    )


@pytest.fixture
def sample_csv_file(tmp_path, sample_csv):
    """The sample dataset written to disk."""
    path = tmp_path / "monthly_full_release_long_format.csv"
    path.write_text(sample_csv, encoding="utf-8")
    return path
