from __future__ import annotations

import numpy as np
import pandas as pd
import pytest


REGIME_ROWS = [
    # ccode, year, country, polity2, democ
    (99, 1830, "Gran Colombia", -3, 1),
    (99, 1831, "Gran Colombia", -3, 1),
    (99, 1832, "Gran Colombia", np.nan, np.nan),
    (100, 1832, "Colombia", -2, 2),
    (100, 1833, "Colombia", -2, 2),
    (324, 1860, "Sardinia", -4, 0),
    (324, 1861, "Sardinia", -4, 0),
    (325, 1861, "Italy", -1, 3),
    (325, 1862, "Italy", -1, 3),
    (345, 1990, "Yugoslavia", -5, 0),
    (345, 1991, "Yugoslavia", -5, 0),
    (347, 1991, "Serbia and Montenegro", -7, 0),
    (347, 1995, "Serbia and Montenegro", -7, 0),
    (347, 2006, "Serbia and Montenegro", 7, 7),
    (342, 2006, "Serbia", 8, 8),
    (342, 2007, "Serbia", 8, 8),
    (342, 2008, "Serbia", 8, 8),
    (348, 2006, "Montenegro", 9, 9),
    (348, 2007, "Montenegro", 9, 9),
    (341, 2008, "Kosovo", 8, 8),
    (341, 2009, "Kosovo", 8, 8),
    (365, 1921, "Russia", -7, 0),
    (365, 1922, "Russia", -7, 0),
    (364, 1922, "USSR", -7, 0),
    (364, 1923, "USSR", -7, 0),
    (625, 2010, "Sudan", -2, 1),
    (625, 2011, "Sudan", -2, 1),
    (626, 2011, "Sudan-North", -4, 0),
    (626, 2012, "Sudan-North", -4, 0),
    (525, 2011, "South Sudan", 0, 2),
    (525, 2012, "South Sudan", 0, 2),
    (769, 1947, "Pakistan", 8, 8),
    (769, 1948, "Pakistan", 8, 8),
    (816, 1975, "Vietnam North", -7, 0),
    (816, 1976, "Vietnam North", -7, 0),
    (818, 1976, "Vietnam", -7, 0),
    (818, 1977, "Vietnam", -7, 0),
    (305, 1917, "Austria", -4, 0),
    (305, 1918, "Austria", -4, 0),
    (305, 1919, "Austria", 8, 8),
    (305, 1920, "Austria", 8, 8),
]

CAPABILITY_ROWS = [
    # ccode, year, cinc
    (1, 1900, 0.2),
    (100, 1832, 0.001),
    (300, 1916, 0.05),
    (300, 1917, 0.05),
    (300, 1918, 0.04),
    (305, 1919, 0.01),
    (345, 2006, 0.002),
    (341, 2007, 0.0001),
    (347, 2009, 0.0001),
    (625, 2012, 0.003),
    (626, 2012, 0.001),
    (770, 1948, 0.01),
    (816, 1977, 0.008),
]


def make_regime(rows=REGIME_ROWS) -> pd.DataFrame:
    return pd.DataFrame(rows, columns=["ccode", "year", "country", "polity2", "democ"])


def make_capabilities(rows=CAPABILITY_ROWS) -> pd.DataFrame:
    return pd.DataFrame(rows, columns=["ccode", "year", "cinc"])


def rows_for(frame: pd.DataFrame, code: int, year: int | None = None) -> pd.DataFrame:
    mask = frame["ccode"] == code
    if year is not None:
        mask &= frame["year"] == year
    return frame.loc[mask]


@pytest.fixture
def regime() -> pd.DataFrame:
    return make_regime()


@pytest.fixture
def capabilities() -> pd.DataFrame:
    return make_capabilities()
