"""Visualisation utilities for the state-year table."""

import logging
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from .. import config  # noqa: E402
from .summary import regime_coverage  # noqa: E402


def generate_plots(state_year, output_dir):
    """Save yearly overview plots of the state-year table.

    Parameters
    ----------
    state_year : DataFrame
        The merged state-year table.
    output_dir : Path or str
        Directory where figures should be saved.

    Returns
    -------
    list of Path
        The figures written.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []
    year = config.YEAR_COLUMN

    if "polity2" in state_year.columns:
        yearly = state_year.groupby(year)["polity2"].mean()
        plt.figure(figsize=(8, 4))
        yearly.plot()
        plt.title("Mean polity2 score by year")
        plt.xlabel("Year")
        plt.ylabel("polity2")
        plt.tight_layout()
        fig_path = output_dir / "polity2_by_year.png"
        plt.savefig(fig_path)
        plt.close()
        written.append(fig_path)

    if "cinc" in state_year.columns and "polity2" in state_year.columns:
        # capability share held by states with a democracy score of 6 or more
        democratic = state_year["polity2"] >= 6
        share = state_year.loc[democratic].groupby(year)["cinc"].sum()
        share = share.reindex(sorted(state_year[year].unique()), fill_value=0)
        plt.figure(figsize=(8, 4))
        share.plot()
        plt.title("Share of world capabilities held by democracies")
        plt.xlabel("Year")
        plt.ylabel("Summed CINC")
        plt.tight_layout()
        fig_path = output_dir / "democratic_cinc_share.png"
        plt.savefig(fig_path)
        plt.close()
        written.append(fig_path)

    coverage = regime_coverage(state_year)
    plt.figure(figsize=(8, 4))
    plt.plot(coverage[year], coverage["share_covered"])
    plt.title("Share of state-years with regime data")
    plt.xlabel("Year")
    plt.ylabel("Share")
    plt.ylim(0, 1.05)
    plt.tight_layout()
    fig_path = output_dir / "regime_coverage.png"
    plt.savefig(fig_path)
    plt.close()
    written.append(fig_path)

    logging.info("Saved %s figures to %s", len(written), output_dir)
    return written
