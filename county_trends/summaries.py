"""Summaries over the merged county and state tables.

* :func:`division_trend` averages the state table per year and census
  division, ignoring the ``"ERROR"`` rows.
* :func:`county_ranking` picks the top or bottom ``n`` counties of a state by
  their mean value and returns their yearly series.
"""

from __future__ import annotations

from typing import List

import pandas as pd

from .config import (
    DEFAULT_DIRECTION,
    DEFAULT_STATE,
    DEFAULT_TOP_N,
    DEFAULT_VALUE_LABEL,
    ERROR_DIVISION,
    YEAR,
    Direction,
)
from .errors import InputError
from .reshape import ensure_columns


def division_trend(
    state: pd.DataFrame, value_col: str = DEFAULT_VALUE_LABEL
) -> pd.DataFrame:
    """Mean of ``value_col`` per (year, division), skipping the ERROR sentinel.

    Parameters
    ----------
    state : pd.DataFrame
        State table with ``year``, ``division`` and ``value_col``.
    value_col : str, optional
        Numeric column to average; NaN values are ignored.

    Returns
    -------
    pd.DataFrame
        Columns ``year``, ``division`` and ``mean_value``, sorted by year then
        division.
    """
    ensure_columns(state, [YEAR, "division", value_col])
    known = state[state["division"] != ERROR_DIVISION]
    trend = (
        known.groupby([YEAR, "division"], as_index=False)[value_col]
        .mean()
        .rename(columns={value_col: "mean_value"})
    )
    return trend.sort_values([YEAR, "division"], ignore_index=True)


def _check_ranking_args(direction: str, n: int) -> None:
    if direction not in ("top", "bottom"):
        raise InputError(f"direction must be 'top' or 'bottom', got {direction!r}")
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise InputError(f"n must be a non-negative int, got {n!r}")


def rank_counties(
    county: pd.DataFrame,
    *,
    value_col: str = DEFAULT_VALUE_LABEL,
    state: str = DEFAULT_STATE,
    direction: Direction = DEFAULT_DIRECTION,
    n: int = DEFAULT_TOP_N,
) -> List[str]:
    """Return the names of the ``n`` highest (or lowest) counties of a state.

    Counties are ordered by the mean of ``value_col`` over all their rows.
    Ties keep the order in which counties first appear in ``county``.
    """
    _check_ranking_args(direction, n)
    ensure_columns(county, ["county", "state", value_col])

    in_state = county[county["state"] == state]
    means = in_state.groupby("county", sort=False)[value_col].mean()
    # Mergesort keeps first-appearance order among equal means
    order = means if direction == "bottom" else -means
    ranked = order.sort_values(kind="mergesort", na_position="last")
    return ranked.index[:n].tolist()


def county_ranking(
    county: pd.DataFrame,
    value_col: str = DEFAULT_VALUE_LABEL,
    state: str = DEFAULT_STATE,
    direction: Direction = DEFAULT_DIRECTION,
    n: int = DEFAULT_TOP_N,
) -> pd.DataFrame:
    """Yearly series of the top or bottom ``n`` counties of ``state``.

    Parameters
    ----------
    county : pd.DataFrame
        County table with ``county``, ``state``, ``year`` and ``value_col``.
    value_col : str, optional
        Numeric column to rank and plot.
    state : str, optional
        State abbreviation, matched exactly against the ``state`` column.
    direction : {"top", "bottom"}, optional
        ``"top"`` keeps the highest means, ``"bottom"`` the lowest.
    n : int, optional
        Number of counties to keep.

    Returns
    -------
    pd.DataFrame
        Columns ``year``, ``county`` and ``value`` holding the original
        (unaggregated) rows of the selected counties, ordered by rank and
        then year.
    """
    ensure_columns(county, [YEAR])
    chosen = rank_counties(
        county, value_col=value_col, state=state, direction=direction, n=n
    )
    rank = {name: pos for pos, name in enumerate(chosen)}

    rows = county[(county["state"] == state) & county["county"].isin(chosen)]
    series = rows[[YEAR, "county", value_col]].rename(columns={value_col: "value"})
    series = series.assign(_rank=series["county"].map(rank))
    series = series.sort_values(["_rank", YEAR], kind="mergesort")
    return series.drop(columns="_rank").reset_index(drop=True)
