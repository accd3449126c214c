"""
Diagnostics for country codes that the two coding schemes disagree on.

All functions here are read-only queries on a relation.  They are used
before reconciliation to see which regime codes have no counterpart in
the capability data, and by the rule applicator to confirm that a
listed conflict year really is one.
"""

from __future__ import annotations

import pandas as pd

from .. import config


def codes_only_in(
    a: pd.DataFrame,
    b: pd.DataFrame,
    code_col: str = config.CODE_COLUMN,
) -> list[int]:
    """Return the sorted codes that occur in ``a`` but never in ``b``."""
    only = set(a[code_col].dropna().unique()) - set(b[code_col].dropna().unique())
    return sorted(int(c) for c in only)


def overlap_years(
    code1: int,
    code2: int,
    relation: pd.DataFrame,
    code_col: str = config.CODE_COLUMN,
    year_col: str = config.YEAR_COLUMN,
) -> list[int]:
    """Years in which both ``code1`` and ``code2`` have at least one row."""
    years1 = set(relation.loc[relation[code_col] == code1, year_col])
    years2 = set(relation.loc[relation[code_col] == code2, year_col])
    return sorted(int(y) for y in years1 & years2)


def overlap(
    code1: int,
    code2: int,
    relation: pd.DataFrame,
    code_col: str = config.CODE_COLUMN,
    year_col: str = config.YEAR_COLUMN,
) -> pd.DataFrame:
    """Rows of ``code1`` and ``code2`` restricted to the years they share.

    An empty frame with the columns of ``relation`` is returned when the
    two codes never coexist, which is the usual case.
    """
    years = overlap_years(code1, code2, relation, code_col, year_col)
    mask = relation[code_col].isin([code1, code2]) & relation[year_col].isin(years)
    return relation.loc[mask].sort_values([year_col, code_col])


def duplicate_keys(
    relation: pd.DataFrame,
    keys: tuple[str, str] = (config.CODE_COLUMN, config.YEAR_COLUMN),
) -> pd.DataFrame:
    """Every key that occurs more than once, one row per occurrence."""
    keys = list(keys)
    dupes = relation.duplicated(subset=keys, keep=False)
    return relation.loc[dupes, keys].sort_values(keys).reset_index(drop=True)


def conflict_report(
    regime: pd.DataFrame,
    capabilities: pd.DataFrame,
    code_col: str = config.CODE_COLUMN,
    year_col: str = config.YEAR_COLUMN,
    name_col: str = config.NAME_COLUMN,
) -> pd.DataFrame:
    """Summarise the regime codes that have no capability counterpart.

    One row per code with the entity name (when the regime relation has
    one), the first and last year observed and the number of years.
    """
    codes = codes_only_in(regime, capabilities, code_col)
    subset = regime.loc[regime[code_col].isin(codes)]
    agg = {
        "first_year": (year_col, "min"),
        "last_year": (year_col, "max"),
        "n_years": (year_col, "nunique"),
    }
    if name_col in subset.columns:
        agg[name_col] = (name_col, "first")
    report = subset.groupby(code_col).agg(**agg).reset_index()
    columns = [code_col] + ([name_col] if name_col in report.columns else [])
    columns += ["first_year", "last_year", "n_years"]
    return report[columns]
