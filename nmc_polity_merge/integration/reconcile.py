"""
Apply the reconciliation rules to the Polity (regime) relation.

Every rule is evaluated against one snapshot of the relation and returns
a new frame; the caller's frame is never modified.  Code changes are
computed into a complete new column before it is assigned, so a rule
that exchanges codes (341 <-> 347) cannot rename a row twice.

After each rule the relation is checked for duplicate (code, year) keys.
A duplicate means a conflict year was missed and the run is aborted with
:class:`~nmc_polity_merge.exceptions.UniquenessViolation`.
"""

from __future__ import annotations

import logging
import warnings
from typing import Iterable

import pandas as pd

from .. import config
from ..exceptions import UniquenessViolation, UnknownConflictYear
from .conflicts import duplicate_keys, overlap_years
from .rules import RULES, ConflictDrop, ReconciliationRule, RuleMode, check_rule_order

# Names of the rules already applied to a frame, kept in ``DataFrame.attrs``.
APPLIED_ATTR = "reconciled_rules"


def recode(
    frame: pd.DataFrame,
    mapping: Iterable[tuple[int, int]],
    code_col: str = config.CODE_COLUMN,
) -> pd.DataFrame:
    """Relabel codes according to ``mapping`` in a single step.

    All pairs are looked up against the original code column, so
    ``[(341, 347), (348, 341)]`` moves 341 to 347 and 348 to 341 without
    the second pair seeing the result of the first.
    """
    lookup = dict(mapping)
    old = frame[code_col]
    new = old.map(lookup).fillna(old).astype(old.dtype)
    out = frame.copy()
    out[code_col] = new
    return out


def drop_conflicts(
    frame: pd.DataFrame,
    drops: Iterable[ConflictDrop],
    code_col: str = config.CODE_COLUMN,
    year_col: str = config.YEAR_COLUMN,
) -> pd.DataFrame:
    """Remove the losing row of each listed conflict year.

    A row is only removed when both codes really have a row in that
    year.  A listed year without overlap is reported with an
    :class:`UnknownConflictYear` warning and nothing is dropped.
    """
    out = frame
    for drop in drops:
        if not (out[code_col] == drop.code).any():
            logging.debug("Code %s not present; nothing to drop for %s", drop.code, drop.year)
            continue
        if drop.year not in overlap_years(drop.code, drop.survivor, out, code_col, year_col):
            msg = (
                f"codes {drop.code} and {drop.survivor} do not overlap in {drop.year}; "
                "no row dropped"
            )
            logging.warning(msg)
            warnings.warn(msg, UnknownConflictYear, stacklevel=2)
            continue
        losing = (out[code_col] == drop.code) & (out[year_col] == drop.year)
        logging.debug(
            "Dropping %s row(s) of code %s in %s (kept %s)",
            int(losing.sum()), drop.code, drop.year, drop.survivor,
        )
        out = out.loc[~losing]
    return out


def copy_years(
    capabilities: pd.DataFrame,
    code: int,
    code_col: str = config.CODE_COLUMN,
    year_col: str = config.YEAR_COLUMN,
) -> list[int]:
    """Years that ``code`` covers in the capability relation."""
    years = capabilities.loc[capabilities[code_col] == code, year_col]
    return sorted(int(y) for y in years.unique())


def copy_forward(
    frame: pd.DataFrame,
    donor: int,
    new_code: int,
    years: Iterable[int],
    code_col: str = config.CODE_COLUMN,
    year_col: str = config.YEAR_COLUMN,
) -> pd.DataFrame:
    """Append copies of ``donor`` rows for ``years`` relabelled as ``new_code``.

    The donor rows stay as they are.  Years that already have a
    ``new_code`` row are not copied again.
    """
    years = list(years)
    existing = frame.loc[frame[code_col] == new_code, year_col]
    taken = sorted(int(y) for y in existing[existing.isin(years)].unique())
    if taken:
        logging.warning(
            "Code %s already has rows for %s; not copying %s into those years",
            new_code, taken, donor,
        )
    mask = (
        (frame[code_col] == donor)
        & frame[year_col].isin(years)
        & ~frame[year_col].isin(existing)
    )
    if not mask.any():
        return frame.copy()
    copies = frame.loc[mask].copy()
    copies[code_col] = new_code
    logging.debug("Copying %s rows of code %s as %s", len(copies), donor, new_code)
    return pd.concat([frame, copies], ignore_index=True)


def assert_unique_keys(
    frame: pd.DataFrame,
    rule: str | None = None,
    code_col: str = config.CODE_COLUMN,
    year_col: str = config.YEAR_COLUMN,
) -> None:
    dupes = duplicate_keys(frame, (code_col, year_col))
    if not dupes.empty:
        raise UniquenessViolation(dupes, rule)


def apply_rule(
    frame: pd.DataFrame,
    rule: ReconciliationRule,
    capabilities: pd.DataFrame | None = None,
    code_col: str = config.CODE_COLUMN,
    year_col: str = config.YEAR_COLUMN,
) -> pd.DataFrame:
    """Apply one rule and return the rewritten relation.

    ``capabilities`` is only needed by copy-forward rules, which take
    their year set from the capability relation's coverage of the new
    code.
    """
    applied = list(frame.attrs.get(APPLIED_ATTR, []))
    if rule.name in applied:
        logging.debug("Rule %s already applied; skipping", rule.name)
        return frame.copy()

    if rule.mode is RuleMode.COPY_FORWARD:
        if capabilities is None:
            raise ValueError(
                f"rule '{rule.name}' needs the capability relation to pick years"
            )
        years = copy_years(capabilities, rule.new_code, code_col, year_col)
        out = copy_forward(frame, rule.donor, rule.new_code, years, code_col, year_col)
    else:
        out = drop_conflicts(frame, rule.drops, code_col, year_col)
        out = recode(out, rule.mapping, code_col)

    out = out.reset_index(drop=True)
    assert_unique_keys(out, rule.name, code_col, year_col)
    out.attrs[APPLIED_ATTR] = applied + [rule.name]
    return out


def apply_rules(
    frame: pd.DataFrame,
    rules: Iterable[ReconciliationRule] = RULES,
    capabilities: pd.DataFrame | None = None,
    check_order: bool = True,
    code_col: str = config.CODE_COLUMN,
    year_col: str = config.YEAR_COLUMN,
) -> pd.DataFrame:
    """Apply ``rules`` in order to the regime relation.

    Raises :class:`RuleOrderError` when a rule is scheduled before one of
    the rules it declares in ``after`` (unless ``check_order`` is off)
    and :class:`UniquenessViolation` as soon as any rule leaves a
    duplicate key behind.
    """
    rules = list(rules)
    if check_order:
        check_rule_order(rules)
    assert_unique_keys(frame, None, code_col, year_col)

    out = frame
    for rule in rules:
        before = len(out)
        out = apply_rule(out, rule, capabilities, code_col, year_col)
        logging.info(
            "Applied %s (%s): %s -> %s rows",
            rule.name, rule.mode.value, before, len(out),
        )
    return out
