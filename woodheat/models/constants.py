"""Catalogs and dataset vocabulary shared by the data pipeline and the model."""

import sys

if sys.version_info >= (3, 11):  # noqa: UP036
    from enum import StrEnum
else:
    from backports.strenum import StrEnum  # noqa: UP035


class HeatSource(StrEnum):
    """Heating methods compared against a wood stove."""

    ASHP = "ASHP"
    GSHP = "GSHP"
    DH = "DH"
    RESISTIVE = "RESISTIVE"
    GAS = "GAS"
    OIL = "OIL"

    @property
    def label(self) -> str:
        """Human-readable name."""
        return HEAT_SOURCE_LABELS[self]

    @property
    def is_electric(self) -> bool:
        """True for sources whose emissions follow the grid."""
        return self in (
            HeatSource.ASHP,
            HeatSource.GSHP,
            HeatSource.DH,
            HeatSource.RESISTIVE,
        )


HEAT_SOURCE_LABELS: dict[HeatSource, str] = {
    HeatSource.ASHP: "Air-source heat pump",
    HeatSource.GSHP: "Ground-source heat pump",
    HeatSource.DH: "District heating (electric)",
    HeatSource.RESISTIVE: "Electric resistance heating",
    HeatSource.GAS: "Gas heating",
    HeatSource.OIL: "Oil heating",
}


class MixCategory(StrEnum):
    """Generation-mix buckets."""

    NUCLEAR = "Nuclear"
    COAL = "Coal"
    GAS = "Gas"
    BIOENERGY = "Bioenergy"
    HYDRO = "Hydro"
    WIND = "Wind"
    SOLAR = "Solar"
    OTHER_FOSSIL = "Other Fossil"
    OTHER_RENEWABLES = "Other Renewables"
    OTHER = "Other"

    @property
    def label(self) -> str:
        """Display label."""
        return MIX_LABELS[self]

    @property
    def color(self) -> str:
        """Display colour (hex)."""
        return MIX_COLORS[self]


MIX_LABELS: dict[MixCategory, str] = {
    MixCategory.NUCLEAR: "Nuclear",
    MixCategory.COAL: "Coal",
    MixCategory.GAS: "Gas",
    MixCategory.BIOENERGY: "Bioenergy",
    MixCategory.HYDRO: "Hydro",
    MixCategory.WIND: "Wind",
    MixCategory.SOLAR: "Solar",
    MixCategory.OTHER_FOSSIL: "Other fossil",
    MixCategory.OTHER_RENEWABLES: "Other renewables",
    MixCategory.OTHER: "Other",
}

MIX_COLORS: dict[MixCategory, str] = {
    MixCategory.NUCLEAR: "#6366f1",
    MixCategory.COAL: "#1f2937",
    MixCategory.GAS: "#f97316",
    MixCategory.BIOENERGY: "#22c55e",
    MixCategory.HYDRO: "#0ea5e9",
    MixCategory.WIND: "#38bdf8",
    MixCategory.SOLAR: "#facc15",
    MixCategory.OTHER_FOSSIL: "#ef4444",
    MixCategory.OTHER_RENEWABLES: "#a855f7",
    MixCategory.OTHER: "#94a3b8",
}

# Fuel names as they appear in the dataset's Variable column
FUEL_TO_CATEGORY: dict[str, MixCategory] = {
    "Nuclear": MixCategory.NUCLEAR,
    "Coal": MixCategory.COAL,
    "Gas": MixCategory.GAS,
    "Bioenergy": MixCategory.BIOENERGY,
    "Hydro": MixCategory.HYDRO,
    "Wind": MixCategory.WIND,
    "Solar": MixCategory.SOLAR,
    "Other Fossil": MixCategory.OTHER_FOSSIL,
    "Other Renewables": MixCategory.OTHER_RENEWABLES,
    "Oil": MixCategory.OTHER_FOSSIL,
    "Peat": MixCategory.OTHER_FOSSIL,
    "Geothermal": MixCategory.OTHER_RENEWABLES,
    "Waste": MixCategory.OTHER_RENEWABLES,
}


def fuel_category(variable: object) -> MixCategory:
    """Map a dataset fuel name onto its mix bucket (unknown -> Other)."""
    if isinstance(variable, str):
        return FUEL_TO_CATEGORY.get(variable, MixCategory.OTHER)
    return MixCategory.OTHER


class Column(StrEnum):
    """Columns of the long-format dataset."""

    ISO3 = "ISO 3 code"
    AREA = "Area"
    DATE = "Date"
    CATEGORY = "Category"
    SUBCATEGORY = "Subcategory"
    VARIABLE = "Variable"
    UNIT = "Unit"
    VALUE = "Value"


REQUIRED_COLUMNS: tuple[Column, ...] = tuple(Column)

INTENSITY_VARIABLE = "CO2 intensity"
GENERATION_CATEGORY = "Electricity generation"
EMISSIONS_CATEGORY = "Power sector emissions"
FUEL_SUBCATEGORY = "Fuel"
