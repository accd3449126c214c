"""Errors raised while reconciling and merging the two relations."""

from __future__ import annotations

import pandas as pd


class MergeError(Exception):
    """Base class for fatal reconciliation and join errors."""


class UniquenessViolation(MergeError):
    """A relation holds more than one row for some (code, year) key."""

    def __init__(self, duplicates: pd.DataFrame, rule: str | None = None):
        self.duplicates = duplicates
        self.rule = rule
        keys = duplicates.drop_duplicates().head(10).to_dict("records")
        where = f" after rule '{rule}'" if rule else ""
        super().__init__(f"duplicate keys{where}: {keys}")


class JoinCardinalityViolation(MergeError):
    """A left join returned a different number of rows than its base."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"left join produced {actual} rows, base relation has {expected}"
        )


class RuleOrderError(MergeError):
    """A rule is scheduled before a rule it depends on."""


class UnknownConflictYear(UserWarning):
    """A rule lists a conflict year in which the two codes do not overlap."""
