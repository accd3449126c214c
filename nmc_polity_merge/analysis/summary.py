"""
Summary statistics for the state-year table.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from .. import config
from ..utils.file_io import write_csv


def regime_coverage(state_year: pd.DataFrame) -> pd.DataFrame:
    """Per year, the number of state-years and how many carry regime data.

    A row counts as covered when at least one regime measure is present.
    """
    measures = [c for c in config.REGIME_COLUMNS if c in state_year.columns]
    covered = state_year[measures].notna().any(axis=1) if measures else False
    coverage = (
        state_year.assign(covered=covered)
        .groupby(config.YEAR_COLUMN)
        .agg(states=(config.CODE_COLUMN, "nunique"), covered=("covered", "sum"))
        .reset_index()
    )
    coverage["share_covered"] = coverage["covered"] / coverage["states"]
    return coverage


def summarise(state_year: pd.DataFrame) -> tuple[pd.DataFrame, pd.DataFrame]:
    """Return (descriptive statistics, yearly regime coverage)."""
    numeric = state_year.drop(columns=[config.CODE_COLUMN, config.YEAR_COLUMN])
    stats = numeric.describe().T.reset_index().rename(columns={"index": "variable"})
    return stats, regime_coverage(state_year)


def write_summary(state_year: pd.DataFrame, output_dir: Path) -> None:
    output_dir.mkdir(parents=True, exist_ok=True)
    stats, coverage = summarise(state_year)
    write_csv(stats, output_dir / "summary_statistics.csv")
    write_csv(coverage, output_dir / "regime_coverage.csv")
    logging.info("Wrote summary statistics for %s variables to %s", len(stats), output_dir)
