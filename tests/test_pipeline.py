"""End-to-end tests for the pipeline orchestrator and multi-source driver."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from county_trends.errors import InputError
from county_trends.pipeline import load_extract, process, run_pipeline


def test_process_single_county_row_end_to_end() -> None:
    raw = pd.DataFrame(
        {
            "Area_name": ["ALBANY, NY"],
            "STCOU": [36001],
            "EDU010187D": [500],
            "EDU010105D": [700],
        }
    )

    county, state = process(raw, "enrollment", 87)

    assert state.empty
    county = county.sort_values("year", ignore_index=True)
    assert county["survey_id"].tolist() == ["EDU0101", "EDU0101"]
    assert county["year"].tolist() == [1987, 2005]
    assert county["enrollment"].tolist() == [500, 700]
    assert county["county"].tolist() == ["ALBANY", "ALBANY"]
    assert county["state"].tolist() == ["NY", "NY"]


def test_process_partitions_every_reshaped_row(raw_extract: pd.DataFrame) -> None:
    before = raw_extract.copy()

    dataset = process(raw_extract, "enrollment_count", 87)

    # 5 areas x 2 "D" columns
    assert len(dataset.county) + len(dataset.state) == 10
    assert len(dataset.county) == 4
    assert set(dataset.county["state"]) == {"AL", "NC"}
    assert set(dataset.state["year"]) == {1987, 1988}

    us = dataset.state[dataset.state["area_name"] == "UNITED STATES"]
    assert (us["division"] == "ERROR").all()
    pd.testing.assert_frame_equal(raw_extract, before)


@pytest.mark.parametrize(
    "raw, label, cutoff",
    [
        ([{"Area_name": "TEXAS"}], "value", 87),
        (None, "value", 87),
        ("PLACEHOLDER", "", 87),
        ("PLACEHOLDER", "   ", 87),
        ("PLACEHOLDER", 5, 87),
        ("PLACEHOLDER", "year", 87),
        ("PLACEHOLDER", "value", 100),
        ("PLACEHOLDER", "value", -1),
        ("PLACEHOLDER", "value", True),
        ("PLACEHOLDER", "value", "87"),
    ],
)
def test_process_rejects_bad_arguments(
    raw_extract: pd.DataFrame, raw: object, label: object, cutoff: object
) -> None:
    table = raw_extract if isinstance(raw, str) else raw
    with pytest.raises(InputError):
        process(table, label, cutoff)  # type: ignore[arg-type]


@pytest.mark.parametrize("label", ["STCOU", "Area_name"])
def test_process_accepts_label_named_like_a_source_identifier(label: str) -> None:
    raw = pd.DataFrame({"Area_name": ["TEXAS"], "STCOU": [48000], "EDU010187D": [1]})

    county, state = process(raw, label, 87)

    assert county.empty
    assert state[label].tolist() == [1]
    assert state["area_code"].tolist() == [48000]
    assert state["division"].tolist() == ["West South Central"]


def test_process_rejects_label_named_like_a_value_column() -> None:
    raw = pd.DataFrame({"Area_name": ["TEXAS"], "STCOU": [48000], "EDU010187D": [1]})
    with pytest.raises(InputError, match="EDU010187D"):
        process(raw, "EDU010187D", 87)


def _write_extracts(tmp_path: Path, raw_extract: pd.DataFrame) -> tuple[Path, Path]:
    first = tmp_path / "EDU01a.csv"
    raw_extract.to_csv(first, index=False)

    second = tmp_path / "EDU01b.csv"
    pd.DataFrame(
        {
            "Area_name": ["NORTH CAROLINA", "Wake, NC", "Durham, NC"],
            "STCOU": [37000, 37183, 37063],
            "EDU010197D": [1200000, 90000, 30000],
            "EDU010205D": [1300000, 120000, ""],
        }
    ).to_csv(second, index=False)
    return first, second


def test_load_extract_reads_csv(tmp_path: Path, raw_extract: pd.DataFrame) -> None:
    first, _ = _write_extracts(tmp_path, raw_extract)
    loaded = load_extract(first)
    assert list(loaded.columns) == list(raw_extract.columns)
    assert len(loaded) == len(raw_extract)


def test_run_pipeline_merges_sources_with_their_own_cutoffs(
    tmp_path: Path, raw_extract: pd.DataFrame
) -> None:
    first, second = _write_extracts(tmp_path, raw_extract)

    merged = run_pipeline([(first, 87), (second, 26)], "enrollment_count")

    assert len(merged.county) == 4 + 4
    assert len(merged.state) == 6 + 2
    assert sorted(set(merged.county["year"])) == [1987, 1988, 1997, 2005]
    durham = merged.county[merged.county["county"] == "Durham"]
    assert durham["enrollment_count"].isna().sum() == 1
    assert merged.county.index.tolist() == list(range(8))


def test_run_pipeline_cutoff_override_applies_to_every_source(
    tmp_path: Path, raw_extract: pd.DataFrame
) -> None:
    first, second = _write_extracts(tmp_path, raw_extract)

    merged = run_pipeline([(first, 87), (second, 26)], year_cutoff=0)

    assert set(merged.state["year"]) == {1905, 1987, 1988, 1997}


def test_run_pipeline_requires_sources() -> None:
    with pytest.raises(InputError):
        run_pipeline([])
