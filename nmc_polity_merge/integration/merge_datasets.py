"""
Integration of the capability and regime relations.

The capability (NMC) relation is the base of the state-year table: every
one of its rows appears in the output exactly once, with the Polity
measures attached where the reconciled regime relation has a matching
(code, year) key and left missing otherwise.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import pandas as pd

from .. import config
from ..exceptions import JoinCardinalityViolation
from ..utils.file_io import read_csv, write_csv
from .conflicts import codes_only_in, conflict_report
from .reconcile import apply_rules, assert_unique_keys
from .rules import RULES, ReconciliationRule


def left_join(
    base: pd.DataFrame,
    other: pd.DataFrame,
    keys: tuple[str, str] = (config.CODE_COLUMN, config.YEAR_COLUMN),
    drop_columns: Iterable[str] = (config.NAME_COLUMN,),
) -> pd.DataFrame:
    """Attach the non-key columns of ``other`` to every row of ``base``.

    Parameters
    ----------
    base : DataFrame
        Relation whose rows are all kept, once each.
    other : DataFrame
        Relation providing the extra columns.  Must be unique on ``keys``.
    keys : tuple of str
        Join columns, code first.
    drop_columns : iterable of str
        Columns removed from ``other`` before joining (the entity name is
        for inspection only).

    Raises
    ------
    UniquenessViolation
        If ``other`` has duplicate keys.
    JoinCardinalityViolation
        If the result does not have exactly ``len(base)`` rows.
    """
    code_col, year_col = keys
    other = other.drop(columns=[c for c in drop_columns if c in other.columns])
    assert_unique_keys(other, None, code_col, year_col)

    merged = base.merge(other, on=[code_col, year_col], how="left")
    if len(merged) != len(base):
        raise JoinCardinalityViolation(len(base), len(merged))
    logging.info("Merged %s base rows on %s", len(merged), list(keys))
    return merged


def integrate_datasets(
    capabilities: pd.DataFrame,
    regime: pd.DataFrame,
    rules: Iterable[ReconciliationRule] = RULES,
) -> pd.DataFrame:
    """Reconcile the regime codes and join them onto the capability rows."""
    unmatched = codes_only_in(regime, capabilities)
    logging.info("%s regime codes have no capability counterpart before reconciliation: %s",
                 len(unmatched), unmatched)

    reconciled = apply_rules(regime, rules, capabilities=capabilities)

    remaining = codes_only_in(reconciled, capabilities)
    logging.info("%s regime codes unmatched after reconciliation: %s", len(remaining), remaining)

    return left_join(capabilities, reconciled)


def integrate_files(
    processed_data_dir: Path,
    output_dir: Path,
) -> Path | None:
    """Merge the cleaned CSVs in ``processed_data_dir`` into one table.

    Writes ``conflict_report.csv`` and ``state_year.csv`` into
    ``output_dir`` and returns the path of the latter, or ``None`` when
    the cleaned inputs are missing.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    capabilities_path = processed_data_dir / "capabilities.csv"
    regime_path = processed_data_dir / "regime.csv"
    for path in (capabilities_path, regime_path):
        if not path.exists():
            logging.error("Processed input not found at %s", path)
            return None

    capabilities = read_csv(capabilities_path)
    regime = read_csv(regime_path)

    write_csv(conflict_report(regime, capabilities), output_dir / "conflict_report.csv")

    state_year = integrate_datasets(capabilities, regime)
    out_path = output_dir / "state_year.csv"
    write_csv(state_year, out_path)
    logging.info("Saved state-year table (%s rows) to %s", len(state_year), out_path)
    return out_path
