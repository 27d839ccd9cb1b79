from __future__ import annotations

import pandas as pd
import pytest


@pytest.fixture
def raw_extract() -> pd.DataFrame:
    """A small wide extract shaped like the census EDU01 files."""
    return pd.DataFrame(
        {
            "Area_name": [
                "UNITED STATES",
                "ALABAMA",
                "Autauga, AL",
                "NORTH CAROLINA",
                "Wake, NC",
            ],
            "STCOU": [0, 1000, 1001, 37000, 37183],
            "EDU010187F": [0, 0, 0, 0, 0],
            "EDU010187D": [40024299, 733735, 6829, 1086000, 61000],
            "EDU010188D": [39967624, 728234, 6900, 1080000, 62500],
            "EDU010188N": [1, 1, 1, 1, 1],
        }
    )


def county_rows(state: str, values: dict[str, list[float]]) -> pd.DataFrame:
    records = []
    for name, series in values.items():
        for offset, value in enumerate(series):
            records.append(
                {
                    "area_name": f"{name}, {state}",
                    "area_code": 0,
                    "county": name,
                    "state": state,
                    "survey_id": "EDU0101",
                    "year": 2000 + offset,
                    "enrollment_count": value,
                }
            )
    return pd.DataFrame(records)


@pytest.fixture
def make_county_rows():
    """Build a county table: one row per (county, year) from value lists."""
    return county_rows
