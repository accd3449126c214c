"""Command line entry point for the merge pipeline.

Usage examples:
# run every stage (download, clean, merge, analyse)
# nmc-polity-merge

# only rebuild the merged table from already cleaned inputs
# nmc-polity-merge --stage integration
"""
from __future__ import annotations

import argparse
import logging

from tqdm import tqdm

from . import config, pipelines
from .exceptions import MergeError

STAGES = {
    "collection": pipelines.run_data_collection,
    "processing": pipelines.run_data_processing,
    "integration": pipelines.run_integration,
    "analysis": pipelines.run_analysis,
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Merge NMC capabilities with Polity5 regime data.")
    parser.add_argument(
        "--stage",
        choices=["all", *STAGES],
        default="all",
        help="Stage to run (default: all, in order)",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar over stages")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(message)s")

    names = list(STAGES) if args.stage == "all" else [args.stage]
    try:
        config.ensure_directories()
        for name in tqdm(names, desc="stages", disable=not args.progress):
            logging.info("Running %s stage", name)
            STAGES[name]()
    except MergeError:
        logging.exception("Reconciliation failed")
        return 1
    except KeyboardInterrupt:
        logging.info("Interrupted")
        return 130
    except Exception:
        logging.exception("Stage failed")
        return 3
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
