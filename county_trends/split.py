"""Split parsed rows into county and state tables and enrich each side.

County rows gain ``county`` and ``state`` columns taken from the area name
(``"Wake County, NC"`` -> ``"Wake County"``, ``"NC"``).  State and aggregate
rows gain a ``division`` column; rows whose name is not a known state keep
the ``"ERROR"`` division rather than being dropped.
"""

from __future__ import annotations

import logging

import pandas as pd

from .config import AREA_CODE, AREA_NAME, ERROR_DIVISION
from .datasets import Dataset
from .errors import FormatError
from .geography import assign_divisions, flag_counties

logger = logging.getLogger(__name__)


def _after_identifiers(df: pd.DataFrame, added: list[str]) -> pd.DataFrame:
    """Reorder so ``added`` columns sit right after area name and code."""
    front = [AREA_NAME, AREA_CODE, *added]
    rest = [col for col in df.columns if col not in front]
    return df[front + rest]


def enrich_counties(county: pd.DataFrame) -> pd.DataFrame:
    """Attach ``county`` and ``state`` parsed from ``area_name``."""
    df = county.copy()
    names = df[AREA_NAME].astype(str)
    no_comma = ~names.str.contains(",", regex=False)
    if no_comma.any():
        raise FormatError(
            "County rows without a comma before the state: "
            f"{names[no_comma].unique()[:5].tolist()}"
        )
    parts = names.str.split(",", n=1)
    df["county"] = parts.str[0]
    df["state"] = parts.str[1].str.strip()
    return _after_identifiers(df, ["county", "state"])


def enrich_states(state: pd.DataFrame) -> pd.DataFrame:
    """Attach the census ``division`` of each ``area_name``."""
    df = state.copy()
    df["division"] = assign_divisions(df[AREA_NAME])
    unmatched = int((df["division"] == ERROR_DIVISION).sum())
    if unmatched:
        logger.debug("%d non-county rows have no division", unmatched)
    return _after_identifiers(df, ["division"])


def split_geography(parsed: pd.DataFrame) -> Dataset:
    """Partition rows into county and state tables.

    Parameters
    ----------
    parsed : pd.DataFrame
        Long table with at least ``area_name`` and ``area_code``.

    Returns
    -------
    Dataset
        ``county`` holds every row whose name ends in a ``", XX"`` state
        suffix, ``state`` holds the rest.  Together they contain each input
        row exactly once.
    """
    is_county = flag_counties(parsed[AREA_NAME])
    county = enrich_counties(parsed.loc[is_county]).reset_index(drop=True)
    state = enrich_states(parsed.loc[~is_county]).reset_index(drop=True)
    return Dataset(county=county, state=state)
