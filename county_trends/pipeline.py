"""Core pipeline logic: reshape census extracts into county and state tables.

This module composes the reshaping, key parsing and geographic split steps
into a single call and folds several extracts into one cumulative dataset:

* :func:`process` turns one wide extract into a ``(county, state)``
  :class:`~county_trends.datasets.Dataset`.
* :func:`run_pipeline` loads each configured source, processes it with its
  own year cutoff and merges the results.

No step performs I/O except :func:`load_extract`; every function returns new
DataFrames and leaves its inputs untouched.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Tuple

import pandas as pd

from .config import (
    DEFAULT_SEP,
    DEFAULT_VALUE_LABEL,
    RESERVED_COLUMNS,
    SOURCES,
    VALUE_SUFFIX,
)
from .datasets import Dataset, merge_all
from .errors import InputError
from .keys import parse_survey_keys
from .reshape import select_and_pivot
from .split import split_geography

# Module‑level logger
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def validate_arguments(raw_table: object, value_label: object, year_cutoff: object) -> None:
    """Raise :class:`InputError` for arguments :func:`process` cannot use."""
    if not isinstance(raw_table, pd.DataFrame):
        raise InputError(
            f"raw_table must be a pandas DataFrame, got {type(raw_table).__name__}"
        )
    if not isinstance(value_label, str) or not value_label.strip():
        raise InputError(f"value_label must be a non-empty string, got {value_label!r}")
    if value_label in RESERVED_COLUMNS:
        raise InputError(f"value_label {value_label!r} clashes with a reserved column")
    if (
        isinstance(year_cutoff, bool)
        or not isinstance(year_cutoff, int)
        or not 0 <= year_cutoff <= 99
    ):
        raise InputError(f"year_cutoff must be an int in 0..99, got {year_cutoff!r}")


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------


def load_extract(source: str | Path, sep: str = DEFAULT_SEP) -> pd.DataFrame:
    """Load one raw census extract.

    Parameters
    ----------
    source : str or Path
        Path or URL to the CSV extract.
    sep : str, optional
        Column delimiter; defaults to `","`.

    Returns
    -------
    pd.DataFrame
        The raw extract as read from the CSV.
    """
    logger.info("Loading extract %s", source)
    return pd.read_csv(source, sep=sep)


# ---------------------------------------------------------------------------
# Driver
# ---------------------------------------------------------------------------


def process(
    raw_table: pd.DataFrame,
    value_label: str,
    year_cutoff: int,
    *,
    suffix: str = VALUE_SUFFIX,
) -> Dataset:
    """Run one wide extract through reshape, key parsing and the split.

    Parameters
    ----------
    raw_table : pd.DataFrame
        Wide extract with ``Area_name``, ``STCOU`` and compound-key value
        columns.
    value_label : str
        Name for the value column of the output tables.
    year_cutoff : int
        Two-digit years at or above this value are read as 19xx, the rest
        as 20xx.  Extracts differ, so there is no default.
    suffix : str, optional
        Filter letter for value columns.

    Returns
    -------
    Dataset
        County-level and state-level tables.
    """
    validate_arguments(raw_table, value_label, year_cutoff)

    long = select_and_pivot(raw_table, value_label, suffix=suffix)
    parsed = parse_survey_keys(long, year_cutoff)
    dataset = split_geography(parsed)

    logger.debug(
        "Processed %d raw rows into %d county and %d state rows",
        len(raw_table),
        len(dataset.county),
        len(dataset.state),
    )
    return dataset


def run_pipeline(
    sources: Optional[Iterable[Tuple[str | Path, int]]] = None,
    value_label: str = DEFAULT_VALUE_LABEL,
    *,
    year_cutoff: Optional[int] = None,
    sep: str = DEFAULT_SEP,
) -> Dataset:
    """Load, process and merge several extracts.

    Parameters
    ----------
    sources : iterable of (location, cutoff), optional
        Extracts to read, each with its own year cutoff.  Defaults to
        ``config.SOURCES``.
    value_label : str, optional
        Name for the value column of the output tables.
    year_cutoff : Optional[int], optional
        When given, overrides every per-source cutoff.
    sep : str, optional
        Column delimiter of the extracts.

    Returns
    -------
    Dataset
        Cumulative county and state tables across all sources.
    """
    if sources is None:
        sources = list(SOURCES.values())
    sources = list(sources)
    if not sources:
        raise InputError("run_pipeline needs at least one source")

    # 1. Load and process each extract with its own cutoff
    results = []
    for location, cutoff in sources:
        raw = load_extract(location, sep=sep)
        cutoff_used = cutoff if year_cutoff is None else year_cutoff
        results.append(process(raw, value_label, cutoff_used))

    # 2. Fold into one cumulative (county, state) pair
    merged = merge_all(*results)
    logger.info(
        "Merged %d sources: %d county rows, %d state rows",
        len(results),
        len(merged.county),
        len(merged.state),
    )
    return merged
