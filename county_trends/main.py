from __future__ import annotations

"""
County trends: load census survey extracts, split them into county and state
tables, merge them and summarise by census division and by county rank.
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .config import (
    DEFAULT_DIRECTION,
    DEFAULT_SEP,
    DEFAULT_STATE,
    DEFAULT_TOP_N,
    DEFAULT_VALUE_LABEL,
    SOURCES,
)
from .errors import InputError, PipelineError
from .pipeline import run_pipeline
from .plotting import create_county_plot, create_division_plot
from .summaries import county_ranking, division_trend

logger = logging.getLogger(__name__)


def parse_source(text: str) -> Tuple[str, int]:
    """Parse ``location=cutoff``; a bare location gets cutoff -1 (unset)."""
    location, sep, cutoff = text.rpartition("=")
    # URLs may carry '=' in a query string
    if not sep or not cutoff.isdigit():
        return text, -1
    return location, int(cutoff)


def resolve_sources(
    sources: Optional[List[Tuple[str, int]]], year_cutoff: Optional[int]
) -> List[Tuple[str, int]]:
    if not sources:
        return list(SOURCES.values())
    missing = [loc for loc, cutoff in sources if cutoff < 0]
    if missing and year_cutoff is None:
        raise InputError(f"No year cutoff for sources {missing}; pass --year-cutoff")
    return sources


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Reshape census survey extracts into county and state tables, "
            "merge them and summarise by division and county rank."
        )
    )
    parser.add_argument(
        "--source",
        action="append",
        type=parse_source,
        default=None,
        help=(
            "Extract to load as LOCATION or LOCATION=CUTOFF; repeatable "
            "(default: the configured EDU01a/EDU01b extracts)."
        ),
    )
    parser.add_argument(
        "--sep",
        default=DEFAULT_SEP,
        help=f"Delimiter used in the extracts (default: '{DEFAULT_SEP}').",
    )
    parser.add_argument(
        "--year-cutoff",
        type=int,
        default=None,
        help="Two-digit year cutoff applied to every source (overrides per-source cutoffs).",
    )
    parser.add_argument(
        "--value-label",
        default=DEFAULT_VALUE_LABEL,
        help=f"Name of the value column (default: {DEFAULT_VALUE_LABEL}).",
    )
    parser.add_argument(
        "--state",
        default=DEFAULT_STATE,
        help=f"State abbreviation for the county ranking (default: {DEFAULT_STATE}).",
    )
    parser.add_argument(
        "--direction",
        choices=["top", "bottom"],
        default=DEFAULT_DIRECTION,
        help=f"Rank the highest or lowest counties (default: {DEFAULT_DIRECTION}).",
    )
    parser.add_argument(
        "--n",
        type=int,
        default=DEFAULT_TOP_N,
        help=f"Number of counties to keep (default: {DEFAULT_TOP_N}).",
    )
    parser.add_argument(
        "--figures-dir",
        type=Path,
        default=None,
        help="Write both charts as HTML into this directory.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
        help="Logging level (default: INFO).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        sources = resolve_sources(args.source, args.year_cutoff)
        dataset = run_pipeline(
            sources,
            args.value_label,
            year_cutoff=args.year_cutoff,
            sep=args.sep,
        )
        trend = division_trend(dataset.state, args.value_label)
        ranking = county_ranking(
            dataset.county,
            value_col=args.value_label,
            state=args.state,
            direction=args.direction,
            n=args.n,
        )
    except PipelineError as exc:
        logger.error("%s: %s", exc.error_code, exc)
        raise SystemExit(1) from exc
    except OSError as exc:
        logger.error("Could not read source: %s", exc)
        raise SystemExit(1) from exc

    print("\n--- COUNTY TRENDS COMPLETE ---")
    print(
        f"Sources: {len(sources)} | County rows: {len(dataset.county)} | "
        f"State rows: {len(dataset.state)}"
    )
    print("\nDivision trend head:")
    print(trend.head(8))
    print(f"\n{args.direction.title()} {args.n} counties in {args.state}:")
    print(ranking.head(8))

    if args.figures_dir is not None:
        args.figures_dir.mkdir(parents=True, exist_ok=True)
        division_path = args.figures_dir / "division_trend.html"
        county_path = args.figures_dir / f"county_{args.direction}_{args.state}.html"
        create_division_plot(trend, value_label=args.value_label).write_html(division_path)
        create_county_plot(
            ranking,
            state=args.state,
            direction=args.direction,
            value_label=args.value_label,
        ).write_html(county_path)
        print(f"\nSaved figures to {args.figures_dir}/:")
        print(f"  - {division_path.name}")
        print(f"  - {county_path.name}")


if __name__ == "__main__":
    main()
