"""
Subpackage for reconciling country codes and merging the datasets.

Contains the conflict diagnostics, the reconciliation rule table, the
rule applicator and the final left join onto the capability data.
"""

__all__ = ["conflicts", "rules", "reconcile", "merge_datasets"]
