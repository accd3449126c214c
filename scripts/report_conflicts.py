r"""Print the code conflicts between the cleaned NMC and Polity tables.

Lists the Polity codes with no NMC counterpart, then for every conflict
year in the rule table shows the two overlapping rows so the chosen
survivor can be checked by eye.

Usage:
# python scripts/report_conflicts.py --processed-dir data/processed
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path

import pandas as pd

from nmc_polity_merge import config
from nmc_polity_merge.integration.conflicts import conflict_report, overlap
from nmc_polity_merge.integration.rules import RULES
from nmc_polity_merge.utils.file_io import read_csv

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Report country-code conflicts between NMC and Polity.")
    parser.add_argument("--processed-dir", type=Path, default=config.PROCESSED_DATA_DIR,
                        help="Directory holding capabilities.csv and regime.csv")
    args = parser.parse_args(argv)

    try:
        capabilities = read_csv(args.processed_dir / "capabilities.csv")
        regime = read_csv(args.processed_dir / "regime.csv")
    except FileNotFoundError:
        logger.error("Cleaned inputs not found in %s; run the processing stage first", args.processed_dir)
        return 2

    with pd.option_context("display.width", 120, "display.max_rows", 200):
        print("Polity codes without an NMC counterpart:")
        print(conflict_report(regime, capabilities).to_string(index=False))

        for rule in RULES:
            for drop in rule.drops:
                rows = overlap(drop.code, drop.survivor, regime)
                rows = rows.loc[rows[config.YEAR_COLUMN] == drop.year]
                print(f"\n[{rule.name}] {drop.year}: keep {drop.survivor}, drop {drop.code}")
                if rows.empty:
                    print("  no overlap")
                else:
                    print(rows.to_string(index=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
