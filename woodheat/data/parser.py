"""Long-format dataset parsing.

Turns the raw CSV text of the monthly electricity release into a list of
loosely typed records keyed by column name. Numbers come out as numbers,
text as text and empty cells as None. Only blank cells are missing:
strings such as "NA" (Namibia) are kept as text. Nothing else is
validated here.
"""

from __future__ import annotations

import io
from typing import Any

import pandas as pd

from woodheat.errors import DatasetParseError
from woodheat.models.constants import REQUIRED_COLUMNS
from woodheat.utils.logger import Logger

Row = dict[str, Any]

_log = Logger.lazy("data.parser")


def parse_dataset(text: str) -> list[Row]:
    """Parse delimited text with a header row into records.

    Parameters
    ----------
    text : str
        Comma-separated text. Blank lines are ignored.

    Returns
    -------
    list[Row]
        One dict per data line, keyed by header name. Missing cells are
        None; numeric cells are ``int``/``float``.

    Raises
    ------
    DatasetParseError
        If the text is empty, cannot be tokenized, or lacks one of the
        required columns. Individual lines with too many fields are
        skipped and logged instead.
    """
    if not text or not text.strip():
        raise DatasetParseError("Dataset is empty")

    skipped: list[list[str]] = []

    def _skip_bad_line(fields: list[str]) -> None:
        skipped.append(fields)
        return None

    try:
        frame = pd.read_csv(
            io.StringIO(text),
            engine="python",
            skip_blank_lines=True,
            keep_default_na=False,
            na_values=[""],
            on_bad_lines=_skip_bad_line,
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise DatasetParseError(str(e).strip() or "CSV parse error") from e

    frame.columns = [str(c).strip() for c in frame.columns]
    missing = [c.value for c in REQUIRED_COLUMNS if c.value not in frame.columns]
    if missing:
        raise DatasetParseError(f"Missing required columns: {', '.join(missing)}")

    if skipped:
        _log.warning("Skipped %d malformed line(s)", len(skipped))

    records: list[Row] = (
        frame.astype(object).where(frame.notna(), None).to_dict(orient="records")
    )
    _log.debug("Parsed %d rows with columns %s", len(records), list(frame.columns))
    return records
