r"""Thin wrapper for running the merge pipeline from a checkout.

Usage examples:
# full run
# python scripts/run_pipeline.py

# rebuild the state-year table and figures only
# python scripts/run_pipeline.py --stage integration
# python scripts/run_pipeline.py --stage analysis
"""
from __future__ import annotations

from nmc_polity_merge.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
