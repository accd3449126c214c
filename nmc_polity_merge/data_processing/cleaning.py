"""
Cleaning of the raw NMC and Polity5 tables.

Both functions return a new frame with integer ``ccode``/``year`` keys
and the dataset's missing-value markers replaced by NaN.  Rows without
a usable key are dropped.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from .. import config
from ..utils.file_io import read_table


def _coerce_keys(df: pd.DataFrame) -> pd.DataFrame:
    keys = [config.CODE_COLUMN, config.YEAR_COLUMN]
    for col in keys:
        df[col] = pd.to_numeric(df[col], errors="coerce")
    before = len(df)
    df = df.dropna(subset=keys).copy()
    if len(df) < before:
        logging.warning("Dropped %s rows with missing code or year", before - len(df))
    df[keys] = df[keys].astype(int)
    return df


def clean_capabilities(df: pd.DataFrame) -> pd.DataFrame:
    """Keep the key and capability measures of an NMC table."""
    df = df.drop(columns=[c for c in config.CAPABILITY_DROP_COLUMNS if c in df.columns])
    measures = [c for c in config.CAPABILITY_COLUMNS if c in df.columns]
    df = df[[config.CODE_COLUMN, config.YEAR_COLUMN] + measures].copy()
    df[measures] = df[measures].mask(df[measures] == config.CAPABILITY_MISSING_VALUE)
    return _coerce_keys(df).reset_index(drop=True)


def clean_regime(df: pd.DataFrame) -> pd.DataFrame:
    """Strip a Polity5 table down to key, name and regime measures.

    Bookkeeping and regime-transition columns are removed, and the
    special codes -66/-77/-88 are treated as missing.
    """
    dropped = config.REGIME_DROP_COLUMNS + config.REGIME_TRANSITION_COLUMNS
    df = df.drop(columns=[c for c in dropped if c in df.columns])
    measures = [c for c in config.REGIME_COLUMNS if c in df.columns]
    keep = [config.CODE_COLUMN, config.YEAR_COLUMN]
    if config.NAME_COLUMN in df.columns:
        keep.append(config.NAME_COLUMN)
    df = df[keep + measures].copy()
    df[measures] = df[measures].mask(df[measures].isin(list(config.REGIME_SPECIAL_VALUES)))
    return _coerce_keys(df).reset_index(drop=True)


def load_capabilities(path: Path) -> pd.DataFrame:
    return clean_capabilities(read_table(path))


def load_regime(path: Path) -> pd.DataFrame:
    return clean_regime(read_table(path))
