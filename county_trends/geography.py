"""Geographic classification of area names.

Two questions are answered here:

* Is an area name a county?  County rows carry a trailing ``", XX"`` state
  abbreviation (e.g. ``"Wake County, NC"``); state and national rows do not.
* Which census division does a state belong to?  State names are matched
  exactly (case-sensitive) against the membership lists in
  :data:`county_trends.config.DIVISIONS`; anything unmatched, such as the
  ``"UNITED STATES"`` total row, maps to the ``"ERROR"`` sentinel.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

import pandas as pd

from .config import DIVISIONS, ERROR_DIVISION

# Comma, optional whitespace, then a two-character state abbreviation
COUNTY_PATTERN = re.compile(r",\s*\w{2}\b")


def _build_lookup() -> Mapping[str, str]:
    lookup = {}
    for division, members in DIVISIONS.items():
        for name in members:
            lookup[name] = division
    return MappingProxyType(lookup)


# State name -> division, built once at import
DIVISION_LOOKUP: Mapping[str, str] = _build_lookup()


def is_county(area_name: str) -> bool:
    """Return ``True`` when ``area_name`` carries a ``", XX"`` state suffix."""
    return bool(COUNTY_PATTERN.search(str(area_name)))


def division_of(state_name: str) -> str:
    """Return the census division of ``state_name``, or ``"ERROR"``.

    Matching is exact and case-sensitive against the uppercase state names.
    The one mixed-case entry is ``"District of Columbia"``, which is how the
    census extracts spell it; ``"DISTRICT OF COLUMBIA"`` is accepted too.
    """
    return DIVISION_LOOKUP.get(state_name, ERROR_DIVISION)


def flag_counties(names: pd.Series) -> pd.Series:
    """Vectorised :func:`is_county`; missing names are never counties."""
    flags = names.astype(str).str.contains(COUNTY_PATTERN.pattern, regex=True)
    return flags.fillna(False).astype(bool)


def assign_divisions(names: pd.Series) -> pd.Series:
    """Vectorised :func:`division_of`."""
    return names.map(division_of)
