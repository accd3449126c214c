"""
NMC / Polity merge package

This package builds a state-year table from the Correlates of War
National Material Capabilities data and the Polity5 regime data.  The
Polity country codes are first reconciled with the COW state system
through a fixed catalogue of historical rules, then joined onto the
capability rows.  Modules are organised by stage and can be used
independently or orchestrated together through the high‑level
pipeline functions.
"""

from . import config  # noqa: F401
from . import pipelines  # noqa: F401

__all__ = [
    "config",
    "pipelines",
]
