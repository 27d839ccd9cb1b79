"""county_trends package initializer.

This package reshapes wide census survey extracts into county-level and
state-level tables and summarises them.  Modules include reshaping, key
parsing, geographic classification, merging, summaries and plotting
helpers.  See individual module docstrings for details.
"""

from .datasets import Dataset, merge, merge_all
from .geography import division_of, is_county
from .pipeline import load_extract, process, run_pipeline
from .summaries import county_ranking, division_trend, rank_counties

__all__ = [
    "Dataset",
    "county_ranking",
    "division_of",
    "division_trend",
    "is_county",
    "load_extract",
    "merge",
    "merge_all",
    "process",
    "rank_counties",
    "run_pipeline",
]
