"""Dataset loading with fallback to empty structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from woodheat.data.intensity import IntensityHistory, build_intensity_history
from woodheat.data.mix import GenerationMix, aggregate_generation_mix
from woodheat.data.parser import parse_dataset
from woodheat.errors import DatasetParseError
from woodheat.models.config_models import DEFAULTS, EmissionDefaults
from woodheat.models.heating_models import CountryOption
from woodheat.utils.logger import Logger

LOAD_FAILED_MESSAGE = "Failed to load Ember CSV; using baseline intensities."

_log = Logger.lazy("data.loader")


@dataclass(frozen=True)
class DatasetSnapshot:
    """Everything derived from one dataset load.

    Rebuilt in full on every load and never mutated afterwards.

    Attributes
    ----------
    history : IntensityHistory
        Intensity series, names and the selectable-country list.
    mix : GenerationMix
        Generation shares and per-fuel emission rates.
    error : str
        Empty on success; otherwise a user-facing message explaining why
        baseline values are shown.
    """

    history: IntensityHistory = field(default_factory=IntensityHistory)
    mix: GenerationMix = field(default_factory=GenerationMix)
    error: str = ""

    @classmethod
    def empty(cls, error: str = "") -> DatasetSnapshot:
        """Snapshot with no data, as used after a failed load."""
        return cls(error=error)

    @property
    def ok(self) -> bool:
        """True when the load succeeded."""
        return not self.error

    @property
    def countries(self) -> list[CountryOption]:
        """Selectable countries, sorted by display name."""
        return self.history.countries

    def has_country(self, iso3: str) -> bool:
        """True when the country has an intensity series."""
        return iso3 in self.history.names

    def name_of(self, iso3: str) -> str:
        """Display name, falling back to the code itself."""
        return self.history.names.get(iso3, iso3)


def build_snapshot(text: str, defaults: EmissionDefaults = DEFAULTS) -> DatasetSnapshot:
    """Parse dataset text and derive all per-country structures.

    A parse failure does not raise: it yields an empty snapshot carrying
    the parser's message.
    """
    try:
        rows = parse_dataset(text)
    except DatasetParseError as e:
        _log.warning("Dataset parse failed: %s", e.message)
        return DatasetSnapshot.empty(error=e.message)

    history = build_intensity_history(rows, valid_units=defaults.valid_units)
    mix = aggregate_generation_mix(rows)
    _log.info(
        "Loaded %d rows: %d countries with intensity, %d with generation mix",
        len(rows),
        len(history.countries),
        len(mix.shares),
    )
    return DatasetSnapshot(history=history, mix=mix)


def load_dataset(path: str | Path, defaults: EmissionDefaults = DEFAULTS) -> DatasetSnapshot:
    """Read a dataset file and build its snapshot.

    Parameters
    ----------
    path : str | Path
        Local CSV file.
    defaults : EmissionDefaults
        Supplies the accepted intensity units.

    Returns
    -------
    DatasetSnapshot
        Never raises for I/O or format problems; ``error`` is set instead.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        _log.error("Could not read dataset %s: %s", path, e)
        return DatasetSnapshot.empty(error=LOAD_FAILED_MESSAGE)
    return build_snapshot(text, defaults=defaults)
