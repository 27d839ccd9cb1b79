"""The ``(county, state)`` table pair and its merge helpers."""

from __future__ import annotations

import logging
from functools import reduce
from typing import NamedTuple

import pandas as pd

from .errors import ShapeError

logger = logging.getLogger(__name__)


class Dataset(NamedTuple):
    """County-level and state-level tables produced from one or more extracts."""

    county: pd.DataFrame
    state: pd.DataFrame


def _check_pair(pair: object, name: str) -> Dataset:
    if not isinstance(pair, (tuple, list)) or len(pair) != 2:
        raise ShapeError(
            f"{name} must be a (county, state) pair, got {type(pair).__name__}"
        )
    for side, table in zip(Dataset._fields, pair):
        if not isinstance(table, pd.DataFrame):
            raise ShapeError(
                f"{name}.{side} must be a DataFrame, got {type(table).__name__}"
            )
    return Dataset(*pair)


def merge(first: Dataset, second: Dataset) -> Dataset:
    """Stack two datasets row-wise, side by side.

    Columns present in only one input are filled with NaN in the other's
    rows.  Duplicated rows across inputs are kept; neither input is modified.
    """
    a = _check_pair(first, "first")
    b = _check_pair(second, "second")
    merged = Dataset(
        county=pd.concat([a.county, b.county], ignore_index=True, sort=False),
        state=pd.concat([a.state, b.state], ignore_index=True, sort=False),
    )
    logger.debug(
        "Merged datasets: county %d + %d, state %d + %d",
        len(a.county),
        len(b.county),
        len(a.state),
        len(b.state),
    )
    return merged


def merge_all(*datasets: Dataset) -> Dataset:
    """Fold :func:`merge` over any number of datasets."""
    if not datasets:
        raise ShapeError("merge_all needs at least one dataset")
    first = _check_pair(datasets[0], "datasets[0]")
    return reduce(merge, datasets[1:], Dataset(first.county.copy(), first.state.copy()))
