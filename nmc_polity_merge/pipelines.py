"""
High‑level pipeline orchestration functions.

Each function in this module coordinates a distinct stage of the
merge.  The functions call into lower‑level modules defined in
`data_collection`, `data_processing`, `integration` and `analysis`.
Use these functions from the command line or import them into your
own scripts/notebooks.
"""

from __future__ import annotations

import logging
from pathlib import Path

from . import config
from .analysis import summary, visualizations
from .data_collection import sources
from .data_processing import cleaning
from .integration import merge_datasets
from .utils.file_io import read_csv, write_csv


def run_data_collection(raw_dir: Path = config.RAW_DATA_DIR, overwrite: bool = False) -> None:
    """Download the NMC and Polity5 source files into ``raw_dir``."""
    logging.info("Collecting national material capabilities…")
    sources.fetch_capabilities(output_dir=raw_dir, overwrite=overwrite)

    logging.info("Collecting Polity5 regime data…")
    sources.fetch_polity(output_dir=raw_dir, overwrite=overwrite)


def run_data_processing(
    raw_dir: Path = config.RAW_DATA_DIR,
    processed_dir: Path = config.PROCESSED_DATA_DIR,
) -> None:
    """Clean the raw tables and write them to ``processed_dir``.

    The capability table keeps only the key and CINC components; the
    regime table loses its bookkeeping and transition columns and its
    special codes are set to missing.
    """
    processed_dir.mkdir(parents=True, exist_ok=True)

    logging.info("Cleaning capability data…")
    capabilities = cleaning.load_capabilities(raw_dir / config.NMC_FILENAME)
    write_csv(capabilities, processed_dir / "capabilities.csv")

    logging.info("Cleaning regime data…")
    regime = cleaning.load_regime(raw_dir / config.POLITY_FILENAME)
    write_csv(regime, processed_dir / "regime.csv")


def run_integration(
    processed_dir: Path = config.PROCESSED_DATA_DIR,
    results_dir: Path = config.RESULTS_DIR,
) -> Path | None:
    """Reconcile country codes and merge into the state-year table."""
    logging.info("Reconciling country codes and merging…")
    return merge_datasets.integrate_files(
        processed_data_dir=processed_dir,
        output_dir=results_dir,
    )


def run_analysis(results_dir: Path = config.RESULTS_DIR) -> None:
    """Write summary statistics and figures for the state-year table."""
    state_year_path: Path = results_dir / "state_year.csv"
    if not state_year_path.exists():
        logging.error("State-year table not found at %s", state_year_path)
        return
    state_year = read_csv(state_year_path)

    logging.info("Writing summary statistics…")
    summary.write_summary(state_year, results_dir)

    logging.info("Generating visualisations…")
    visualizations.generate_plots(state_year, results_dir / "figures")


def run_all(overwrite: bool = False) -> None:
    run_data_collection(overwrite=overwrite)
    run_data_processing()
    run_integration()
    run_analysis()
