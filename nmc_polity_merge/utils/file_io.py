"""File input/output helper functions."""

import logging
from pathlib import Path

import pandas as pd


def read_csv(path, **kwargs):
    """Read a CSV file into a DataFrame."""
    path = Path(path)
    try:
        return pd.read_csv(path, **kwargs)
    except Exception as exc:
        logging.error("Failed to read CSV file %s: %s", path, exc)
        raise


def write_csv(df, path):
    """Write a DataFrame to a CSV file."""
    path = Path(path)
    try:
        df.to_csv(path, index=False)
    except Exception as exc:
        logging.error("Failed to write CSV file %s: %s", path, exc)
        raise


def read_excel(path, **kwargs):
    """Read the first sheet of an Excel workbook into a DataFrame."""
    path = Path(path)
    try:
        return pd.read_excel(path, **kwargs)
    except Exception as exc:
        logging.error("Failed to read Excel file %s: %s", path, exc)
        raise


def read_table(path, **kwargs):
    """Read a CSV or Excel file, chosen by extension."""
    path = Path(path)
    if path.suffix.lower() in (".xls", ".xlsx"):
        return read_excel(path, **kwargs)
    return read_csv(path, **kwargs)
