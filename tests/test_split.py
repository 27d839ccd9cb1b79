from __future__ import annotations

import pandas as pd
import pytest

from county_trends.errors import FormatError
from county_trends.split import enrich_counties, split_geography


def _parsed(names: list[str]) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "area_name": names,
            "area_code": range(len(names)),
            "survey_id": ["EDU0101"] * len(names),
            "year": [1987] * len(names),
            "enrollment_count": [float(i) for i in range(len(names))],
        }
    )


def test_split_geography_partitions_and_enriches() -> None:
    parsed = _parsed(["UNITED STATES", "ALABAMA", "Autauga, AL", "Wake ,  NC"])

    county, state = split_geography(parsed)

    assert len(county) + len(state) == len(parsed)
    assert list(county.columns) == [
        "area_name",
        "area_code",
        "county",
        "state",
        "survey_id",
        "year",
        "enrollment_count",
    ]
    assert county["county"].tolist() == ["Autauga", "Wake "]
    assert county["state"].tolist() == ["AL", "NC"]

    assert list(state.columns) == [
        "area_name",
        "area_code",
        "division",
        "survey_id",
        "year",
        "enrollment_count",
    ]
    assert state["division"].tolist() == ["ERROR", "East South Central"]
    assert state.index.tolist() == [0, 1]


def test_split_geography_with_no_counties_yields_empty_county_table() -> None:
    county, state = split_geography(_parsed(["TEXAS", "OHIO"]))

    assert county.empty
    assert {"county", "state"} <= set(county.columns)
    assert state["division"].tolist() == ["West South Central", "East North Central"]


def test_county_row_without_comma_raises_format_error() -> None:
    with pytest.raises(FormatError, match="ALABAMA"):
        enrich_counties(_parsed(["Autauga, AL", "ALABAMA"]))


def test_split_geography_does_not_mutate_input() -> None:
    parsed = _parsed(["Autauga, AL", "ALABAMA"])
    before = parsed.copy()
    split_geography(parsed)
    pd.testing.assert_frame_equal(parsed, before)
