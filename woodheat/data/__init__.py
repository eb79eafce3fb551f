"""Dataset ingestion: parsing and per-country aggregation."""

from woodheat.data.intensity import HISTORY_WINDOW, IntensityHistory, build_intensity_history
from woodheat.data.loader import DatasetSnapshot, build_snapshot, load_dataset
from woodheat.data.mix import GenerationMix, aggregate_generation_mix, fold_mix_slices
from woodheat.data.parser import parse_dataset

__all__ = [
    "HISTORY_WINDOW",
    "DatasetSnapshot",
    "GenerationMix",
    "IntensityHistory",
    "aggregate_generation_mix",
    "build_intensity_history",
    "build_snapshot",
    "fold_mix_slices",
    "load_dataset",
    "parse_dataset",
]
