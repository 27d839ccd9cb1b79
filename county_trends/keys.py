from __future__ import annotations

import pandas as pd

from .config import KEY_MIN_LENGTH, SURVEY_ID, SURVEY_ID_LENGTH, YEAR
from .errors import ParseError

# Offending keys quoted in a ParseError message
_MAX_REPORTED = 5


def resolve_years(two_digit: pd.Series, cutoff: int) -> pd.Series:
    """Expand two-digit years: ``>= cutoff`` is 19xx, anything lower is 20xx."""
    return (two_digit + 1900).where(two_digit >= cutoff, two_digit + 2000).astype(int)


def resolve_year(two_digit: int, cutoff: int) -> int:
    """Scalar form of :func:`resolve_years`."""
    return int(resolve_years(pd.Series([two_digit]), cutoff).iloc[0])


def parse_survey_keys(long: pd.DataFrame, cutoff: int) -> pd.DataFrame:
    """Split compound ``survey_id`` keys into a survey id and a 4-digit year.

    ``EDU010187D`` becomes ``survey_id="EDU0101"`` and, with ``cutoff=87``,
    ``year=1987``.  Returns a new DataFrame with ``year`` placed right after
    ``survey_id``.
    """
    keys = long[SURVEY_ID].astype(str)

    short = keys[keys.str.len() < KEY_MIN_LENGTH]
    if not short.empty:
        sample = short.unique()[:_MAX_REPORTED].tolist()
        raise ParseError(
            f"Survey keys shorter than {KEY_MIN_LENGTH} characters: {sample}"
        )

    digits = keys.str.slice(SURVEY_ID_LENGTH, SURVEY_ID_LENGTH + 2)
    bad = ~digits.str.fullmatch(r"\d{2}")
    if bad.any():
        sample = keys[bad].unique()[:_MAX_REPORTED].tolist()
        raise ParseError(f"Survey keys without a two-digit year: {sample}")

    parsed = long.copy()
    parsed[SURVEY_ID] = keys.str.slice(0, SURVEY_ID_LENGTH)
    years = resolve_years(digits.astype(int), cutoff)
    parsed.insert(parsed.columns.get_loc(SURVEY_ID) + 1, YEAR, years)
    return parsed
