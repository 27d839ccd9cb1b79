"""Wide-to-long reshaping of raw census extracts.

Each raw extract has one row per area and one column per survey/year
combination (e.g. ``EDU010187D``).  :func:`select_and_pivot` keeps the
identifying columns plus the value columns ending in the filter suffix and
melts the latter into ``(survey_id, value)`` rows.
"""

from __future__ import annotations

import logging
from typing import List

import pandas as pd

from .config import (
    AREA_CODE,
    AREA_NAME,
    SOURCE_CODE_COL,
    SOURCE_NAME_COL,
    SURVEY_ID,
    VALUE_SUFFIX,
)
from .errors import InputError, SchemaError

logger = logging.getLogger(__name__)


def ensure_columns(df: pd.DataFrame, required: List[str]) -> None:
    """Raise :class:`SchemaError` if the DataFrame lacks any required column."""
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise SchemaError(f"Missing expected columns: {missing}")


def value_columns(df: pd.DataFrame, suffix: str, exclude: List[str]) -> List[str]:
    """Return the columns of ``df`` ending in ``suffix``, in table order."""
    return [
        col
        for col in df.columns
        if col not in exclude and str(col).endswith(suffix)
    ]


def select_and_pivot(
    raw: pd.DataFrame,
    value_label: str,
    *,
    suffix: str = VALUE_SUFFIX,
    name_col: str = SOURCE_NAME_COL,
    code_col: str = SOURCE_CODE_COL,
) -> pd.DataFrame:
    """Select identifying and value columns and pivot the values to long form.

    Parameters
    ----------
    raw : pd.DataFrame
        Wide extract with one row per area.
    value_label : str
        Name given to the column holding the melted values.
    suffix : str, optional
        Only value columns whose name ends in this string are kept.
    name_col, code_col : str, optional
        Identifying columns in ``raw``; renamed to ``area_name`` and
        ``area_code``.

    Returns
    -------
    pd.DataFrame
        Columns ``area_name``, ``area_code``, ``survey_id`` (the original
        column name) and ``value_label`` (numeric, NaN where the cell was
        empty or non-numeric).  One row per (raw row, value column).
    """
    ensure_columns(raw, [name_col, code_col])
    id_cols = [name_col, code_col]
    values = value_columns(raw, suffix, exclude=id_cols)
    if not values:
        raise SchemaError(f"No value columns ending in {suffix!r} found.")
    if value_label in values:
        raise InputError(f"value_label {value_label!r} clashes with a value column")

    # Rename first so only the canonical identifiers can clash with value_label
    selected = raw[id_cols + values].rename(
        columns={name_col: AREA_NAME, code_col: AREA_CODE}
    )
    long = selected.melt(
        id_vars=[AREA_NAME, AREA_CODE],
        value_vars=values,
        var_name=SURVEY_ID,
        value_name=value_label,
    )
    long[AREA_NAME] = long[AREA_NAME].astype(str)
    long[SURVEY_ID] = long[SURVEY_ID].astype(str)
    long[value_label] = pd.to_numeric(long[value_label], errors="coerce")

    logger.debug(
        "Reshaped %d rows x %d value columns into %d rows",
        len(raw),
        len(values),
        len(long),
    )
    return long
