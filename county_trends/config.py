"""
Configuration constants for the county trends data pipeline.
"""

from typing import Dict, FrozenSet, List, Literal, Tuple

# ======================================================
#  DATA SOURCES / CONSTANTS
# ======================================================
# Census survey extracts; each entry is (location, two-digit year cutoff).
SOURCES: Dict[str, Tuple[str, int]] = {
    "EDU01a": ("https://www4.stat.ncsu.edu/~online/datasets/EDU01a.csv", 87),
    "EDU01b": ("https://www4.stat.ncsu.edu/~online/datasets/EDU01b.csv", 26),
}

DEFAULT_SEP: str = ","

# Identifying columns as they appear in the raw extracts
SOURCE_NAME_COL: str = "Area_name"
SOURCE_CODE_COL: str = "STCOU"

# Canonical names after reshaping
AREA_NAME: str = "area_name"
AREA_CODE: str = "area_code"
SURVEY_ID: str = "survey_id"
YEAR: str = "year"

# Only value columns ending in this letter are kept
VALUE_SUFFIX: str = "D"

# Compound key layout: AAA#### (survey id) followed by YY (two-digit year)
SURVEY_ID_LENGTH: int = 7
KEY_MIN_LENGTH: int = 9

RESERVED_COLUMNS: FrozenSet[str] = frozenset(
    {AREA_NAME, AREA_CODE, SURVEY_ID, YEAR, "county", "state", "division"}
)

# ======================================================
#  GEOGRAPHY
# ======================================================
ERROR_DIVISION: str = "ERROR"

DIVISIONS: Dict[str, List[str]] = {
    "New England": [
        "CONNECTICUT",
        "MAINE",
        "MASSACHUSETTS",
        "NEW HAMPSHIRE",
        "RHODE ISLAND",
        "VERMONT",
    ],
    "Mid-Atlantic": ["NEW JERSEY", "NEW YORK", "PENNSYLVANIA"],
    "East North Central": ["ILLINOIS", "INDIANA", "MICHIGAN", "OHIO", "WISCONSIN"],
    "West North Central": [
        "IOWA",
        "KANSAS",
        "MINNESOTA",
        "MISSOURI",
        "NEBRASKA",
        "NORTH DAKOTA",
        "SOUTH DAKOTA",
    ],
    "South Atlantic": [
        "DELAWARE",
        "DISTRICT OF COLUMBIA",
        # The extracts spell this one in mixed case.
        "District of Columbia",
        "FLORIDA",
        "GEORGIA",
        "MARYLAND",
        "NORTH CAROLINA",
        "SOUTH CAROLINA",
        "VIRGINIA",
        "WEST VIRGINIA",
    ],
    "East South Central": ["ALABAMA", "KENTUCKY", "MISSISSIPPI", "TENNESSEE"],
    "West South Central": ["ARKANSAS", "LOUISIANA", "OKLAHOMA", "TEXAS"],
    "Mountain": [
        "ARIZONA",
        "COLORADO",
        "IDAHO",
        "MONTANA",
        "NEVADA",
        "NEW MEXICO",
        "UTAH",
        "WYOMING",
    ],
    "Pacific": ["ALASKA", "CALIFORNIA", "HAWAII", "OREGON", "WASHINGTON"],
}

# ======================================================
#  SUMMARY DEFAULTS
# ======================================================
Direction = Literal["top", "bottom"]

DEFAULT_VALUE_LABEL: str = "enrollment_count"
DEFAULT_STATE: str = "NC"
DEFAULT_DIRECTION: Direction = "top"
DEFAULT_TOP_N: int = 5
